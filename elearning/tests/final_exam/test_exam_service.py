"""
Tests für Prüfungsdefinitionen: Validierung der Fragenauswahl,
Erstellen/Ändern/Löschen und den Start-Check.
"""

import datetime

from django.test import TestCase

from elearning.final_exam.exceptions import (
    CountMismatchOnUpdate,
    DuplicateQuestionReference,
    ExamNotFound,
    InvalidQuestionCount,
    MinimumQuestionsNotMet,
    UnknownQuestion,
)
from elearning.final_exam.models import Exam, ExamResult
from elearning.final_exam.services import ExamService, ExamValidationService
from elearning.tests.helpers import create_exam, create_questions, create_sub_chapter, create_user

UTC = datetime.timezone.utc


class ExamValidationTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.questions = create_questions(create_sub_chapter(), 12)
        cls.ids = [question.pk for question in cls.questions]

    def setUp(self):
        self.validator = ExamValidationService()

    def test_valid_selection_returns_questions(self):
        questions = self.validator.validate_question_selection(self.ids[:10], 10)
        self.assertEqual([q.pk for q in questions], sorted(self.ids[:10]))

    def test_count_mismatch_is_rejected(self):
        with self.assertRaises(InvalidQuestionCount) as ctx:
            self.validator.validate_question_selection(self.ids[:10], 12)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.details, {"selected": 10, "expected": 12})

    def test_minimum_is_enforced(self):
        with self.assertRaises(MinimumQuestionsNotMet) as ctx:
            self.validator.validate_question_selection(self.ids[:9], 9)
        self.assertEqual(ctx.exception.message, "Minimum 10 questions required for an exam")

    def test_minimum_can_be_configured(self):
        validator = ExamValidationService(min_questions=3)
        self.assertEqual(len(validator.validate_question_selection(self.ids[:3], 3)), 3)

    def test_unknown_question_is_rejected(self):
        ids = self.ids[:9] + [999999]
        with self.assertRaises(UnknownQuestion) as ctx:
            self.validator.validate_question_selection(ids, 10)
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.details["question_ids"], [999999])

    def test_duplicate_ids_are_rejected(self):
        ids = self.ids[:9] + [self.ids[0]]
        with self.assertRaises(DuplicateQuestionReference) as ctx:
            self.validator.validate_question_selection(ids, 10)
        self.assertEqual(ctx.exception.details["question_ids"], [self.ids[0]])

    def test_count_is_checked_before_minimum(self):
        with self.assertRaises(InvalidQuestionCount):
            self.validator.validate_question_selection(self.ids[:5], 10)


class ExamServiceTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.questions = create_questions(create_sub_chapter(), 12)
        cls.ids = [question.pk for question in cls.questions]

    def setUp(self):
        self.service = ExamService()

    def create_data(self, ids=None, total=None, **overrides):
        ids = self.ids[:10] if ids is None else ids
        data = {
            "name": "Physics Final",
            "description": "Final exam",
            "exam_date": datetime.date(2030, 6, 1),
            "start_time": datetime.time(9, 0),
            "end_time": datetime.time(11, 0),
            "duration": 120,
            "total_questions": len(ids) if total is None else total,
            "question_ids": ids,
        }
        data.update(overrides)
        return data

    def test_create_stores_question_set(self):
        exam = self.service.create(self.create_data())

        self.assertEqual(exam.total_questions, 10)
        self.assertEqual(exam.questions.count(), 10)
        self.assertTrue(exam.is_active)

    def test_failed_create_writes_nothing(self):
        with self.assertRaises(InvalidQuestionCount):
            self.service.create(self.create_data(total=12))
        self.assertFalse(Exam.objects.exists())

    def test_get_unknown_exam(self):
        with self.assertRaises(ExamNotFound) as ctx:
            self.service.get(424242)
        self.assertEqual(ctx.exception.status_code, 404)

    def test_update_plain_fields_keeps_questions(self):
        exam = self.service.create(self.create_data())

        updated = self.service.update(exam.pk, {"name": "Renamed", "duration": 60})

        self.assertEqual(updated.name, "Renamed")
        self.assertEqual(updated.duration, 60)
        self.assertEqual(updated.questions.count(), 10)

    def test_update_question_set_adjusts_total(self):
        exam = self.service.create(self.create_data())

        updated = self.service.update(exam.pk, {"question_ids": self.ids})

        self.assertEqual(updated.total_questions, 12)
        self.assertEqual(updated.questions.count(), 12)

    def test_update_question_set_with_wrong_total(self):
        exam = self.service.create(self.create_data())

        with self.assertRaises(InvalidQuestionCount):
            self.service.update(exam.pk, {"question_ids": self.ids, "total_questions": 10})

        exam.refresh_from_db()
        self.assertEqual(exam.questions.count(), 10)

    def test_update_total_only_must_match_current_set(self):
        exam = self.service.create(self.create_data())

        with self.assertRaises(CountMismatchOnUpdate) as ctx:
            self.service.update(exam.pk, {"total_questions": 12})
        self.assertEqual(ctx.exception.details, {"requested": 12, "current": 10})

        same = self.service.update(exam.pk, {"total_questions": 10})
        self.assertEqual(same.total_questions, 10)

    def test_update_unknown_exam(self):
        with self.assertRaises(ExamNotFound):
            self.service.update(424242, {"name": "x"})

    def test_delete_keeps_results(self):
        exam = create_exam(self.questions[:10])
        user = create_user("Max")
        ExamResult.objects.create(
            user=user,
            exam=exam,
            score=5,
            total_questions=10,
            correct_answers=5,
            percentage=50,
            passed=True,
        )

        self.service.delete(exam.pk)

        self.assertFalse(Exam.objects.filter(pk=exam.pk).exists())
        result = ExamResult.objects.get(user=user)
        self.assertIsNone(result.exam_name)
        with self.assertRaises(ExamNotFound):
            self.service.get(exam.pk)

    def test_delete_unknown_exam(self):
        with self.assertRaises(ExamNotFound):
            self.service.delete(424242)


class StartExamTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.questions = create_questions(create_sub_chapter(), 10)

    def setUp(self):
        self.service = ExamService()

    def test_start_inside_window(self):
        exam = create_exam(self.questions)
        response = self.service.start_exam(exam.pk, now=datetime.datetime(2030, 6, 1, 9, 30, tzinfo=UTC))
        self.assertEqual(response, {"success": True, "message": "Exam started successfully"})

    def test_start_outside_window(self):
        exam = create_exam(self.questions)
        response = self.service.start_exam(exam.pk, now=datetime.datetime(2030, 6, 1, 12, 0, tzinfo=UTC))
        self.assertEqual(
            response, {"success": False, "message": "Exam is not available at this time"}
        )

    def test_start_inactive_exam(self):
        exam = create_exam(self.questions, is_active=False)
        response = self.service.start_exam(exam.pk, now=datetime.datetime(2030, 6, 1, 9, 30, tzinfo=UTC))
        self.assertEqual(response, {"success": False, "message": "Exam is not active"})

    def test_start_unknown_exam(self):
        with self.assertRaises(ExamNotFound):
            self.service.start_exam(424242)
