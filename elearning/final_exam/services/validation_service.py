"""
Exam Validation Service

Prüft die Fragenauswahl einer Prüfung, bevor irgendetwas gespeichert wird:
- keine doppelten Fragen
- Anzahl der Fragen == total_questions
- mindestens EXAM_MIN_QUESTIONS Fragen
- alle Fragen existieren in der Fragendatenbank

Author: Exam Backend Team
Version: 1.0.0
"""

import logging
from collections import Counter
from typing import Iterable, List, Optional

from django.conf import settings

from ...question_bank.models import Question
from ...question_bank.repository import QuestionRepository
from ..exceptions import (
    CountMismatchOnUpdate,
    DuplicateQuestionReference,
    InvalidQuestionCount,
    MinimumQuestionsNotMet,
    UnknownQuestion,
)

logger = logging.getLogger(__name__)


class ExamValidationService:
    """
    Validation layer for exam definitions.

    All checks are read-only; the store calls them before it mutates
    anything, so a failed validation leaves the database untouched.
    """

    def __init__(
        self,
        repository: Optional[QuestionRepository] = None,
        min_questions: Optional[int] = None,
    ):
        self.repository = repository or QuestionRepository()
        if min_questions is None:
            min_questions = getattr(settings, "EXAM_MIN_QUESTIONS", 10)
        self.min_questions = min_questions
        self.logger = logger

    def validate_question_selection(
        self, question_ids: Iterable[int], total_questions: int
    ) -> List[Question]:
        """
        Validate a question selection against its declared total.

        Args:
            question_ids: Selected question ids
            total_questions: Declared number of questions

        Returns:
            The resolved Question objects

        Raises:
            DuplicateQuestionReference: an id is listed more than once
            InvalidQuestionCount: selection size differs from the total
            MinimumQuestionsNotMet: fewer than the minimum number of questions
            UnknownQuestion: an id does not resolve in the question bank
        """
        question_ids = list(question_ids)

        duplicates = [qid for qid, count in Counter(question_ids).items() if count > 1]
        if duplicates:
            raise DuplicateQuestionReference(duplicates)

        if len(question_ids) != total_questions:
            raise InvalidQuestionCount(len(question_ids), total_questions)

        if len(question_ids) < self.min_questions:
            raise MinimumQuestionsNotMet(len(question_ids), self.min_questions)

        questions = self.repository.find_by_ids(question_ids)
        if len(questions) != len(question_ids):
            missing = self.repository.missing_ids(question_ids)
            raise UnknownQuestion(missing)

        return questions

    def validate_update(
        self,
        exam,
        question_ids: Optional[Iterable[int]] = None,
        total_questions: Optional[int] = None,
    ) -> Optional[List[Question]]:
        """
        Validate a patch touching the question set and/or the total.

        Returns the resolved questions when a new selection was supplied,
        otherwise None.

        Raises:
            CountMismatchOnUpdate: only the total was patched and it differs
                from the exam's current number of questions
            (plus everything validate_question_selection raises)
        """
        if question_ids is not None:
            question_ids = list(question_ids)
            expected = total_questions if total_questions is not None else len(question_ids)
            return self.validate_question_selection(question_ids, expected)

        if total_questions is not None:
            current = exam.questions.count()
            if current != total_questions:
                raise CountMismatchOnUpdate(total_questions, current)

        return None
