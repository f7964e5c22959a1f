"""
Question Repository

Read-only access to the question bank used by the exam engine:
lookup by a set of ids and filtering on any level of the hierarchy.

Author: Exam Backend Team
Version: 1.0.0
"""

import logging
from typing import Iterable, List, Optional, Set

from django.db.models import QuerySet

from .models import Question

logger = logging.getLogger(__name__)


class QuestionRepository:
    """
    Repository für Fragen aus der Fragendatenbank.

    Liefert Fragen per ID-Menge oder über die Hierarchie
    (Kurs, Gruppe, Fach, Kapitel, Unterkapitel).
    """

    def __init__(self):
        self.logger = logger

    def find_by_ids(self, ids: Iterable[int]) -> List[Question]:
        """
        Return the questions whose ids are in ``ids``.

        Unknown ids are simply absent from the result; callers compare
        lengths or use missing_ids() to detect them.
        """
        id_list = list(ids)
        if not id_list:
            return []
        return list(Question.objects.filter(pk__in=id_list).order_by("pk"))

    def missing_ids(self, ids: Iterable[int]) -> List[int]:
        """Return the ids from ``ids`` that do not resolve to a question."""
        requested: Set[int] = set(ids)
        if not requested:
            return []
        found = set(
            Question.objects.filter(pk__in=requested).values_list("pk", flat=True)
        )
        missing = sorted(requested - found)
        if missing:
            self.logger.info(f"Unbekannte Fragen-IDs angefragt: {missing}")
        return missing

    def find_filtered(
        self,
        course_id: Optional[int] = None,
        group_id: Optional[int] = None,
        subject_id: Optional[int] = None,
        chapter_id: Optional[int] = None,
        sub_chapter_id: Optional[int] = None,
    ) -> QuerySet:
        """
        Filter questions by hierarchy level. Every filter is optional;
        an omitted level matches everything.
        """
        queryset = Question.objects.select_related(
            "sub_chapter",
            "sub_chapter__course",
            "sub_chapter__group",
            "sub_chapter__subject",
            "sub_chapter__chapter",
        )
        if course_id:
            queryset = queryset.filter(sub_chapter__course_id=course_id)
        if group_id:
            queryset = queryset.filter(sub_chapter__group_id=group_id)
        if subject_id:
            queryset = queryset.filter(sub_chapter__subject_id=subject_id)
        if chapter_id:
            queryset = queryset.filter(sub_chapter__chapter_id=chapter_id)
        if sub_chapter_id:
            queryset = queryset.filter(sub_chapter_id=sub_chapter_id)
        return queryset.order_by("pk")
