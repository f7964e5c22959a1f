"""
Exam Definition Service

Verwaltet Prüfungsdefinitionen (Erstellen, Ändern, Lesen, Löschen).
Jede Änderung an Fragenauswahl oder Fragenanzahl läuft vorher durch den
ExamValidationService; gespeichert wird in einer Transaktion.

Author: Exam Backend Team
Version: 1.0.0
"""

import logging
from typing import Any, Dict, Optional

from django.db import transaction
from django.db.models import QuerySet

from ..exceptions import ExamNotFound
from ..models import Exam
from .validation_service import ExamValidationService
from .window import NOT_ACTIVE, ExamWindowEvaluator

logger = logging.getLogger(__name__)

# Felder, die ohne weitere Prüfung direkt übernommen werden.
PLAIN_FIELDS = (
    "name",
    "description",
    "exam_date",
    "start_time",
    "end_time",
    "duration",
    "is_active",
)


class ExamService:
    """
    Store for exam definitions.

    Exams are mutated in place; ExamResult rows are never touched here,
    including on delete.
    """

    def __init__(
        self,
        validator: Optional[ExamValidationService] = None,
        window_evaluator: Optional[ExamWindowEvaluator] = None,
    ):
        self.validator = validator or ExamValidationService()
        self.window_evaluator = window_evaluator or ExamWindowEvaluator()
        self.logger = logger

    def queryset(self) -> QuerySet:
        return Exam.objects.prefetch_related("questions")

    def list(self) -> QuerySet:
        return self.queryset().all()

    def get(self, exam_id: int) -> Exam:
        try:
            return self.queryset().get(pk=exam_id)
        except (Exam.DoesNotExist, ValueError, TypeError):
            raise ExamNotFound(exam_id)

    def create(self, data: Dict[str, Any]) -> Exam:
        """
        Create an exam after validating its question selection.

        Args:
            data: Validated payload with name, description, exam_date,
                start_time, end_time, duration, total_questions,
                question_ids and optionally is_active

        Returns:
            The persisted exam with its question set
        """
        questions = self.validator.validate_question_selection(
            data["question_ids"], data["total_questions"]
        )

        with transaction.atomic():
            exam = Exam(
                name=data["name"],
                description=data.get("description") or "",
                exam_date=data["exam_date"],
                start_time=data["start_time"],
                end_time=data["end_time"],
                duration=data["duration"],
                total_questions=data["total_questions"],
                is_active=data.get("is_active", True),
            )
            exam.save()
            exam.questions.set(questions)

        self.logger.info(
            f"Prüfung erstellt: {exam.name} (ID: {exam.pk}, {exam.total_questions} Fragen)"
        )
        return self.get(exam.pk)

    def update(self, exam_id: int, patch: Dict[str, Any]) -> Exam:
        """
        Apply a partial update. Question selection and total are
        re-validated before anything is written.
        """
        exam = self.get(exam_id)

        question_ids = patch.get("question_ids")
        total_questions = patch.get("total_questions")
        questions = self.validator.validate_update(
            exam, question_ids=question_ids, total_questions=total_questions
        )

        with transaction.atomic():
            if questions is not None:
                exam.total_questions = (
                    total_questions if total_questions is not None else len(questions)
                )
            elif total_questions is not None:
                exam.total_questions = total_questions

            for field_name in PLAIN_FIELDS:
                if field_name in patch:
                    value = patch[field_name]
                    if field_name == "description" and value is None:
                        value = ""
                    setattr(exam, field_name, value)

            exam.save()
            if questions is not None:
                exam.questions.set(questions)

        self.logger.info(f"Prüfung aktualisiert: {exam.name} (ID: {exam.pk})")
        return self.get(exam.pk)

    def delete(self, exam_id: int) -> None:
        exam = self.get(exam_id)
        exam_name = exam.name
        # Ergebnisse bleiben als verwaiste Zeilen bestehen.
        exam.delete()
        self.logger.info(f"Prüfung gelöscht: {exam_name} (ID: {exam_id})")

    def start_exam(self, exam_id: int, now=None) -> Dict[str, Any]:
        """
        Check whether an exam can be started now.

        A closed window is an expected outcome and is reported as
        ``{"success": False, "message": ...}``, not raised. Only an
        unknown exam raises (ExamNotFound).
        """
        exam = self.get(exam_id)
        check = self.window_evaluator.is_open(exam, now)

        if check.is_open:
            return {"success": True, "message": "Exam started successfully"}
        if check.reason == NOT_ACTIVE:
            return {"success": False, "message": "Exam is not active"}
        return {"success": False, "message": "Exam is not available at this time"}
