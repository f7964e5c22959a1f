"""
Exam Window Evaluator

Decides whether an exam can be started at a given instant. The exam date
and its start/end times of day are interpreted in the time zone of ``now``
(the project's TIME_ZONE when ``now`` is omitted). Both boundaries are
inclusive.
"""

import datetime
from typing import NamedTuple, Optional, Tuple

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_time

NOT_ACTIVE = "not active"
OUTSIDE_WINDOW = "outside window"


class WindowCheck(NamedTuple):
    is_open: bool
    reason: str


def _as_date(value) -> datetime.date:
    return parse_date(value) if isinstance(value, str) else value


def _as_time(value) -> datetime.time:
    return parse_time(value) if isinstance(value, str) else value


def window_bounds(exam, tzinfo=None) -> Tuple[datetime.datetime, datetime.datetime]:
    """Absolute start and end instants of the exam window."""
    exam_date = _as_date(exam.exam_date)
    start = datetime.datetime.combine(exam_date, _as_time(exam.start_time), tzinfo=tzinfo)
    end = datetime.datetime.combine(exam_date, _as_time(exam.end_time), tzinfo=tzinfo)
    return start, end


class ExamWindowEvaluator:
    def is_open(self, exam, now: Optional[datetime.datetime] = None) -> WindowCheck:
        if not exam.is_active:
            return WindowCheck(False, NOT_ACTIVE)

        if now is None:
            now = timezone.localtime()

        # Naive "now" is compared against naive bounds, aware against aware.
        start, end = window_bounds(exam, tzinfo=now.tzinfo)
        if start <= now <= end:
            return WindowCheck(True, "")
        return WindowCheck(False, OUTSIDE_WINDOW)
