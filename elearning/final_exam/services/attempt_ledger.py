"""
Attempt Ledger

Single writer of ExamResult rows. A real (non-practice) submission is
accepted at most once per (user, exam):

1. has_real_attempt() short-circuits the common case without grading
2. the partial unique constraint on ExamResult catches concurrent
   submissions that both passed step 1; the IntegrityError is translated
   into DuplicateAttempt

Practice submissions are graded the same way but never persisted.

Author: Exam Backend Team
Version: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import QuerySet
from django.utils import timezone

from ..exceptions import DuplicateAttempt, ExamWindowClosed
from ..models import ExamResult
from .exam_service import ExamService
from .grading import GradeResult, grade, is_passing
from .window import ExamWindowEvaluator

logger = logging.getLogger(__name__)


@dataclass
class SubmissionResult:
    exam_id: int
    user_id: int
    grade: GradeResult
    is_practice: bool
    result_id: Optional[int] = None
    submitted_at: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.result_id,
            "exam_id": self.exam_id,
            "user_id": self.user_id,
            "correct_answers": self.grade.correct_count,
            "total_questions": self.grade.total_count,
            "percentage": self.grade.percentage,
            "passed": self.grade.passed,
            "answers": self.grade.breakdown_as_list(),
            "is_practice": self.is_practice,
            "submitted_at": self.submitted_at,
        }


class AttemptLedgerService:
    def __init__(
        self,
        exam_service: Optional[ExamService] = None,
        window_evaluator: Optional[ExamWindowEvaluator] = None,
    ):
        self.exam_service = exam_service or ExamService()
        self.window_evaluator = window_evaluator or ExamWindowEvaluator()
        self.logger = logger

    def real_results(self) -> QuerySet:
        return ExamResult.objects.filter(is_practice=False)

    def has_real_attempt(self, exam_id: int, user_id: int) -> bool:
        return self.real_results().filter(exam_id=exam_id, user_id=user_id).exists()

    def submit(
        self,
        exam_id: int,
        user,
        answers: Optional[Iterable[Mapping[str, Any]]],
        is_practice: bool = False,
        now=None,
    ) -> SubmissionResult:
        """
        Grade a submission and, for real attempts, record it.

        Args:
            exam_id: Exam being submitted
            user: Authenticated user submitting the answers
            answers: ``{"question_id", "answer"}`` entries
            is_practice: Grade only, do not persist or count
            now: Override of the current time (window enforcement only)

        Raises:
            ExamNotFound: unknown exam
            DuplicateAttempt: a real result for (user, exam) already exists
            ExamWindowClosed: window enforcement on submit is enabled and
                the exam is not open
        """
        exam = self.exam_service.get(exam_id)

        if not is_practice:
            if self.has_real_attempt(exam.pk, user.pk):
                self.logger.info(
                    f"Doppelte Abgabe abgelehnt: Prüfung {exam.pk}, Benutzer {user.pk}"
                )
                raise DuplicateAttempt(exam.pk, user.pk)

            if getattr(settings, "EXAM_ENFORCE_WINDOW_ON_SUBMIT", False):
                check = self.window_evaluator.is_open(exam, now)
                if not check.is_open:
                    raise ExamWindowClosed(exam.pk, check.reason)

        result = grade(exam.questions.all(), answers)

        if is_practice:
            return SubmissionResult(
                exam_id=exam.pk,
                user_id=user.pk,
                grade=result,
                is_practice=True,
                submitted_at=timezone.now(),
            )

        try:
            with transaction.atomic():
                row = ExamResult.objects.create(
                    user=user,
                    exam=exam,
                    score=result.correct_count,
                    total_questions=result.total_count,
                    correct_answers=result.correct_count,
                    percentage=result.percentage,
                    passed=result.passed,
                    answers=result.breakdown_as_list(),
                    is_practice=False,
                )
        except IntegrityError:
            self.logger.warning(
                f"Gleichzeitige Abgabe erkannt: Prüfung {exam.pk}, Benutzer {user.pk}"
            )
            raise DuplicateAttempt(exam.pk, user.pk)

        self.logger.info(
            f"Prüfung {exam.pk} von Benutzer {user.pk} abgegeben: "
            f"{result.correct_count}/{result.total_count} ({result.percentage}%)"
        )
        return SubmissionResult(
            exam_id=exam.pk,
            user_id=user.pk,
            grade=result,
            is_practice=False,
            result_id=row.pk,
            submitted_at=row.submitted_at,
        )

    def user_results(self, user_id: int) -> QuerySet:
        return self.real_results().filter(user_id=user_id).select_related("exam")

    def user_history(self, user_id: int) -> List[Dict[str, Any]]:
        """
        Real results of a user, newest first, with the exam name and
        ``passed`` recomputed from the current pass threshold.
        """
        history = []
        results = self.user_results(user_id).order_by("-submitted_at", "-pk")
        for result in results:
            history.append(
                {
                    "id": result.pk,
                    "exam_id": result.exam_id,
                    "exam_name": result.exam_name,
                    "score": result.score,
                    "total_questions": result.total_questions,
                    "correct_answers": result.correct_answers,
                    "percentage": result.percentage,
                    "passed": is_passing(result.percentage),
                    "answers": result.answers,
                    "is_practice": result.is_practice,
                    "submitted_at": result.submitted_at,
                }
            )
        return history
