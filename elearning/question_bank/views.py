from rest_framework import generics, permissions
from rest_framework.exceptions import ValidationError

from ..users.permissions import HasExamPermission
from ..users.roles import Permission
from .repository import QuestionRepository
from .serializers import QuestionSerializer


def _parse_int(value, name):
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError({name: "Must be an integer."})


class QuestionListView(generics.ListAPIView):
    """
    Question selection for exam authors.

    Query params (all optional): course, group, subject, chapter,
    sub_chapter, ids (comma separated).
    """

    serializer_class = QuestionSerializer
    permission_classes = [permissions.IsAuthenticated, HasExamPermission]
    required_permission = Permission.CREATE_EXAM

    def get_queryset(self):
        params = self.request.query_params
        repository = QuestionRepository()

        ids = params.get("ids")
        if ids:
            id_list = [_parse_int(part, "ids") for part in ids.split(",") if part.strip()]
            return repository.find_by_ids(id_list)

        return repository.find_filtered(
            course_id=_parse_int(params.get("course"), "course"),
            group_id=_parse_int(params.get("group"), "group"),
            subject_id=_parse_int(params.get("subject"), "subject"),
            chapter_id=_parse_int(params.get("chapter"), "chapter"),
            sub_chapter_id=_parse_int(params.get("sub_chapter"), "sub_chapter"),
        )
