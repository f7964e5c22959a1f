"""
Role permission table.

The mapping is built once at import time and exposed read-only. Components
that need authorization decisions receive ROLE_PERMISSIONS (or call the
helpers below); nothing mutates it at runtime.
"""

from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping

from .models import UserRole


class Permission:
    CREATE_EXAM = "create_exam"
    UPDATE_EXAM = "update_exam"
    DELETE_EXAM = "delete_exam"
    VIEW_EXAM_REPORTS = "view_exam_reports"


_EXAM_MANAGEMENT = frozenset(
    {
        Permission.CREATE_EXAM,
        Permission.UPDATE_EXAM,
        Permission.DELETE_EXAM,
        Permission.VIEW_EXAM_REPORTS,
    }
)

ROLE_PERMISSIONS: Mapping[str, FrozenSet[str]] = MappingProxyType(
    {
        UserRole.USER: frozenset(),
        UserRole.ADMIN: _EXAM_MANAGEMENT,
        UserRole.SUPER_ADMIN: _EXAM_MANAGEMENT,
    }
)


def get_role_permissions(role: str) -> FrozenSet[str]:
    return ROLE_PERMISSIONS.get(role, frozenset())


def has_permission(role: str, permission: str) -> bool:
    return permission in get_role_permissions(role)


def has_all_permissions(role: str, permissions: Iterable[str]) -> bool:
    granted = get_role_permissions(role)
    return all(permission in granted for permission in permissions)
