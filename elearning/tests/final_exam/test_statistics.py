from django.contrib.auth.models import User
from django.test import TestCase

from elearning.final_exam.services import AttemptLedgerService, ExamStatisticsService
from elearning.tests.helpers import (
    answers_for,
    create_exam,
    create_questions,
    create_sub_chapter,
    create_user,
)


class ExamStatisticsTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.questions = create_questions(create_sub_chapter(), 10)
        cls.exam = create_exam(cls.questions, name="Physics Final")
        cls.empty_exam = create_exam(cls.questions, name="Nobody took this")
        cls.users = [
            create_user("Max", first_name="Max", last_name="Mustermann"),
            create_user("Erika"),
            create_user("Hans"),
        ]

    def setUp(self):
        self.service = ExamStatisticsService()
        self.ledger = AttemptLedgerService()

    def submit_scores(self, scores):
        for user, score in zip(self.users, scores):
            self.ledger.submit(self.exam.pk, user, answers_for(self.questions, score))

    def test_no_results_yields_zeros(self):
        self.assertEqual(
            self.service.exam_statistics(self.empty_exam.pk),
            {
                "exam_id": self.empty_exam.pk,
                "total_participants": 0,
                "average_score": 0,
                "pass_rate": 0,
                "highest_score": 0,
                "lowest_score": 0,
            },
        )

    def test_aggregates(self):
        self.submit_scores([9, 4, 6])

        stats = self.service.exam_statistics(self.exam.pk)

        self.assertEqual(stats["total_participants"], 3)
        self.assertEqual(stats["average_score"], 6)  # 19 / 3 = 6.33
        self.assertEqual(stats["pass_rate"], 67)  # 2 von 3
        self.assertEqual(stats["highest_score"], 9)
        self.assertEqual(stats["lowest_score"], 4)

    def test_practice_results_are_excluded(self):
        self.submit_scores([9])
        self.ledger.submit(
            self.exam.pk, self.users[1], answers_for(self.questions, 1), is_practice=True
        )

        stats = self.service.exam_statistics(self.exam.pk)

        self.assertEqual(stats["total_participants"], 1)
        self.assertEqual(stats["lowest_score"], 9)

    def test_all_exam_statistics_lists_every_exam(self):
        self.submit_scores([5])

        statistics = self.service.all_exam_statistics()

        self.assertEqual(
            [(entry["exam_name"], entry["total_participants"]) for entry in statistics],
            [("Physics Final", 1), ("Nobody took this", 0)],
        )

    def test_participation_groups_by_exam(self):
        self.submit_scores([9, 4])

        participation = self.service.exam_participation()

        self.assertEqual(len(participation), 1)
        entry = participation[0]
        self.assertEqual(entry["exam_name"], "Physics Final")
        self.assertEqual(entry["total_participants"], 2)
        self.assertEqual(
            {p["user_name"] for p in entry["participants"]}, {"Max Mustermann", "Erika"}
        )

    def test_admin_report(self):
        self.submit_scores([9, 4, 6])

        report = self.service.admin_report(recent_limit=2)

        self.assertEqual(report["total_exams"], 2)
        self.assertEqual(report["total_results"], 3)
        self.assertEqual(report["total_users"], User.objects.count())
        self.assertEqual(len(report["recent_results"]), 2)
        self.assertEqual(report["recent_results"][0]["user_name"], "Hans")
        self.assertEqual(report["recent_results"][0]["percentage"], 60)
        self.assertEqual(len(report["exam_stats"]), 2)
