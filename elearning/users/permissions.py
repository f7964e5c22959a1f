from rest_framework.permissions import BasePermission

from .models import resolve_role
from .roles import has_permission

# ------------------------------------------------------------
# Helper: Prüft über die Rollen-Tabelle, ob der eingeloggte
# Benutzer eine bestimmte Berechtigung besitzt.
# ------------------------------------------------------------


def user_has_permission(user, permission: str) -> bool:
    """Returns True, wenn die Rolle des Users die Berechtigung enthält."""
    if not user or not user.is_authenticated:
        return False
    return has_permission(resolve_role(user), permission)


class HasExamPermission(BasePermission):
    """
    Erlaubt den Zugriff nur mit der Berechtigung, die der View verlangt.

    Der View setzt entweder ``required_permission`` oder
    ``required_permissions`` (HTTP-Methode -> Berechtigung). Methoden ohne
    Eintrag bleiben für alle offen.
    """

    message = "You do not have permission to perform this action."

    def has_permission(self, request, view):
        permission = None
        per_method = getattr(view, "required_permissions", None)
        if per_method:
            permission = per_method.get(request.method)
        else:
            permission = getattr(view, "required_permission", None)

        if permission is None:
            return True
        return user_has_permission(request.user, permission)
