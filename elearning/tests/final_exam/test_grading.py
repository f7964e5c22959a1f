from types import SimpleNamespace

from django.test import SimpleTestCase, override_settings

from elearning.final_exam.services.grading import (
    build_answer_map,
    grade,
    is_passing,
    round_percentage,
)


def make_questions(count, correct_answer="A"):
    return [SimpleNamespace(pk=index + 1, correct_answer=correct_answer) for index in range(count)]


class GradingTests(SimpleTestCase):
    def test_six_of_ten_is_sixty_percent_and_passed(self):
        questions = make_questions(10)
        answers = [
            {"question_id": q.pk, "answer": "A" if q.pk <= 6 else "C"} for q in questions
        ]

        result = grade(questions, answers)

        self.assertEqual(result.correct_count, 6)
        self.assertEqual(result.total_count, 10)
        self.assertEqual(result.percentage, 60)
        self.assertTrue(result.passed)

    def test_unanswered_questions_count_as_wrong(self):
        questions = make_questions(10)
        answers = [{"question_id": 1, "answer": "A"}, {"question_id": 2, "answer": "A"}]

        result = grade(questions, answers)

        self.assertEqual(result.correct_count, 2)
        self.assertEqual(result.total_count, 10)
        self.assertEqual(result.percentage, 20)
        self.assertFalse(result.passed)
        unanswered = [record for record in result.breakdown if record.user_answer == ""]
        self.assertEqual(len(unanswered), 8)

    def test_answers_for_foreign_questions_are_ignored(self):
        questions = make_questions(10)
        answers = [{"question_id": 999, "answer": "A"}]

        result = grade(questions, answers)

        self.assertEqual(result.correct_count, 0)
        self.assertEqual([record.question_id for record in result.breakdown], list(range(1, 11)))

    def test_grading_is_deterministic(self):
        questions = make_questions(12, correct_answer="D")
        answers = [{"question_id": q.pk, "answer": "D"} for q in questions[:7]]

        first = grade(questions, answers)
        second = grade(list(reversed(questions)), answers)

        self.assertEqual(first, second)
        self.assertEqual(first.percentage, 58)

    def test_empty_exam_scores_zero(self):
        result = grade([], [{"question_id": 1, "answer": "A"}])

        self.assertEqual(result.total_count, 0)
        self.assertEqual(result.percentage, 0)
        self.assertFalse(result.passed)

    def test_breakdown_contains_answer_key(self):
        questions = make_questions(1, correct_answer="B")

        result = grade(questions, [{"question_id": 1, "answer": "C"}])

        self.assertEqual(
            result.breakdown_as_list(),
            [{"question_id": 1, "user_answer": "C", "correct_answer": "B"}],
        )

    def test_percentage_rounds_half_up(self):
        self.assertEqual(round_percentage(1, 8), 13)  # 12.5
        self.assertEqual(round_percentage(2, 3), 67)
        self.assertEqual(round_percentage(1, 3), 33)
        self.assertEqual(round_percentage(0, 0), 0)

    def test_later_answer_for_same_question_wins(self):
        answer_map = build_answer_map(
            [
                {"question_id": 3, "answer": "A"},
                {"question_id": "3", "answer": "B"},
                {"question_id": None, "answer": "C"},
                {"question_id": "x", "answer": "D"},
            ]
        )
        self.assertEqual(answer_map, {3: "B"})

    def test_threshold_is_inclusive(self):
        self.assertTrue(is_passing(50, threshold=50))
        self.assertFalse(is_passing(49, threshold=50))

    @override_settings(EXAM_PASS_PERCENTAGE=70)
    def test_threshold_follows_settings(self):
        questions = make_questions(10)
        answers = [{"question_id": q.pk, "answer": "A"} for q in questions[:6]]

        self.assertFalse(grade(questions, answers).passed)
