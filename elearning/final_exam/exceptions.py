"""
Exam Engine Exceptions

This module provides the exception hierarchy of the exam engine and the
DRF exception handler that turns it into HTTP responses. Every failure the
engine reports belongs to one of four families:

- ExamValidationError (400): bad question selection or counts
- ExamNotFoundError (404): unknown exam or question reference
- ExamConflictError (409): duplicate real submission
- ExamWindowError (403): submission outside the exam window (only raised
  when window enforcement on submit is switched on; starting an exam
  outside its window is reported as a structured result instead)

Author: Exam Backend Team
Version: 1.0.0
"""

import logging
from typing import Any, Dict, Iterable, Optional

from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ExamEngineException(Exception):
    """
    Base exception class for all exam engine errors.

    Attributes:
        message (str): Human-readable error message
        status_code (int): HTTP status code used by the API layer
        error_code (str): Stable machine-readable error identifier
        details (Dict[str, Any]): Additional error details
    """

    default_status_code = 400
    default_error_code = "ExamError"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code or self.default_status_code
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for serialization.

        Returns:
            Dictionary representation of the exception
        """
        return {
            "message": self.message,
            "status_code": self.status_code,
            "error_code": self.error_code,
            "details": self.details,
            "exception_type": self.__class__.__name__,
        }


# --- Validation ---


class ExamValidationError(ExamEngineException):
    default_status_code = 400
    default_error_code = "ValidationError"


class InvalidQuestionCount(ExamValidationError):
    """Raised when the number of selected questions differs from the declared total."""

    def __init__(self, selected: int, expected: int) -> None:
        super().__init__(
            message=(
                f"Number of selected questions ({selected}) does not match "
                f"the expected total ({expected})"
            ),
            error_code="InvalidQuestionCount",
            details={"selected": selected, "expected": expected},
        )


class MinimumQuestionsNotMet(ExamValidationError):
    def __init__(self, selected: int, minimum: int) -> None:
        super().__init__(
            message=f"Minimum {minimum} questions required for an exam",
            error_code="MinimumQuestionsNotMet",
            details={"selected": selected, "minimum": minimum},
        )


class CountMismatchOnUpdate(ExamValidationError):
    """Raised when only total_questions is patched and it disagrees with the stored set."""

    def __init__(self, requested: int, current: int) -> None:
        super().__init__(
            message=(
                f"Cannot update totalQuestions to {requested} as it does not match "
                f"the current number of questions ({current})"
            ),
            error_code="CountMismatchOnUpdate",
            details={"requested": requested, "current": current},
        )


class DuplicateQuestionReference(ExamValidationError):
    def __init__(self, duplicates: Iterable[int]) -> None:
        duplicates = sorted(set(duplicates))
        super().__init__(
            message=f"Questions selected more than once: {duplicates}",
            error_code="DuplicateQuestionReference",
            details={"question_ids": duplicates},
        )


# --- Not found ---


class ExamNotFoundError(ExamEngineException):
    default_status_code = 404
    default_error_code = "NotFound"


class ExamNotFound(ExamNotFoundError):
    def __init__(self, exam_id: Any) -> None:
        super().__init__(
            message=f"Exam with ID {exam_id} not found",
            error_code="ExamNotFound",
            details={"exam_id": exam_id},
        )


class UnknownQuestion(ExamNotFoundError):
    def __init__(self, question_ids: Iterable[int]) -> None:
        question_ids = sorted(question_ids)
        super().__init__(
            message="One or more selected questions do not exist",
            error_code="UnknownQuestion",
            details={"question_ids": question_ids},
        )


# --- Conflict ---


class ExamConflictError(ExamEngineException):
    default_status_code = 409
    default_error_code = "Conflict"


class DuplicateAttempt(ExamConflictError):
    def __init__(self, exam_id: Any, user_id: Any) -> None:
        super().__init__(
            message="You have already taken this exam",
            error_code="DuplicateAttempt",
            details={"exam_id": exam_id, "user_id": user_id},
        )


# --- Window ---


class ExamWindowError(ExamEngineException):
    default_status_code = 403
    default_error_code = "WindowError"


class ExamWindowClosed(ExamWindowError):
    def __init__(self, exam_id: Any, reason: str) -> None:
        super().__init__(
            message=f"Exam cannot be submitted: {reason}",
            error_code="ExamWindowClosed",
            details={"exam_id": exam_id, "reason": reason},
        )


def exam_exception_handler(exc, context):
    """
    DRF exception handler: engine exceptions become ``{"error": {...}}``
    with their own status code, everything else goes to DRF's default.
    """
    if isinstance(exc, ExamEngineException):
        view = context.get("view")
        logger.info(
            f"{exc.__class__.__name__} in {view.__class__.__name__ if view else 'unknown view'}: {exc.message}"
        )
        return Response({"error": exc.to_dict()}, status=exc.status_code)
    return exception_handler(exc, context)
