import datetime
from types import SimpleNamespace
from zoneinfo import ZoneInfo

from django.test import SimpleTestCase

from elearning.final_exam.services.window import (
    NOT_ACTIVE,
    OUTSIDE_WINDOW,
    ExamWindowEvaluator,
)

UTC = datetime.timezone.utc


def make_exam(is_active=True, exam_date=datetime.date(2030, 6, 1)):
    return SimpleNamespace(
        exam_date=exam_date,
        start_time=datetime.time(9, 0),
        end_time=datetime.time(11, 0),
        is_active=is_active,
    )


def at(hour, minute, second=0, tzinfo=UTC, day=1):
    return datetime.datetime(2030, 6, day, hour, minute, second, tzinfo=tzinfo)


class ExamWindowTests(SimpleTestCase):
    def setUp(self):
        self.evaluator = ExamWindowEvaluator()
        self.exam = make_exam()

    def test_boundaries_are_inclusive(self):
        self.assertTrue(self.evaluator.is_open(self.exam, at(9, 0)).is_open)
        self.assertTrue(self.evaluator.is_open(self.exam, at(11, 0)).is_open)

    def test_inside_window(self):
        check = self.evaluator.is_open(self.exam, at(10, 15))
        self.assertTrue(check.is_open)
        self.assertEqual(check.reason, "")

    def test_one_minute_before_and_after(self):
        before = self.evaluator.is_open(self.exam, at(8, 59))
        after = self.evaluator.is_open(self.exam, at(11, 1))

        self.assertEqual(tuple(before), (False, OUTSIDE_WINDOW))
        self.assertEqual(tuple(after), (False, OUTSIDE_WINDOW))

    def test_other_day_is_outside(self):
        check = self.evaluator.is_open(self.exam, at(10, 0, day=2))
        self.assertFalse(check.is_open)

    def test_inactive_exam_is_never_open(self):
        check = self.evaluator.is_open(make_exam(is_active=False), at(10, 0))
        self.assertEqual(tuple(check), (False, NOT_ACTIVE))

    def test_window_is_read_in_the_time_zone_of_now(self):
        berlin = ZoneInfo("Europe/Berlin")
        # 10:00 in Berlin is 08:00 UTC; the window is 09:00-11:00 local time.
        self.assertTrue(self.evaluator.is_open(self.exam, at(10, 0, tzinfo=berlin)).is_open)
        self.assertFalse(
            self.evaluator.is_open(self.exam, at(10, 0, tzinfo=berlin).astimezone(UTC)).is_open
        )

    def test_string_fields_are_parsed(self):
        exam = SimpleNamespace(
            exam_date="2030-06-01", start_time="09:00:00", end_time="11:00:00", is_active=True
        )
        self.assertTrue(self.evaluator.is_open(exam, at(9, 30)).is_open)
