"""
Exam Statistics Service

Read-only aggregation over real (non-practice) exam results: per-exam
metrics, metrics for all exams, participation lists and the admin report.

Author: Exam Backend Team
Version: 1.0.0
"""

import logging
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db.models import Avg, Count, Max, Min, Q

from ...users.models import display_name
from ..models import Exam, ExamResult
from .grading import is_passing, pass_threshold

logger = logging.getLogger(__name__)


def _round_half_up(value) -> int:
    # Avg() liefert je nach Datenbank float oder Decimal.
    return int(float(value) + 0.5)


class ExamStatisticsService:
    def __init__(self):
        self.logger = logger

    def real_results(self):
        return ExamResult.objects.filter(is_practice=False)

    def exam_statistics(self, exam_id: int) -> Dict[str, Any]:
        """
        Participants, average raw score, pass rate (percent) and min/max
        raw score of one exam. All zero when nobody has taken it yet.
        """
        aggregates = self.real_results().filter(exam_id=exam_id).aggregate(
            total=Count("pk"),
            passed=Count("pk", filter=Q(percentage__gte=pass_threshold())),
            average=Avg("score"),
            highest=Max("score"),
            lowest=Min("score"),
        )

        total = aggregates["total"]
        if not total:
            return {
                "exam_id": exam_id,
                "total_participants": 0,
                "average_score": 0,
                "pass_rate": 0,
                "highest_score": 0,
                "lowest_score": 0,
            }

        return {
            "exam_id": exam_id,
            "total_participants": total,
            "average_score": _round_half_up(aggregates["average"]),
            "pass_rate": _round_half_up(aggregates["passed"] * 100 / total),
            "highest_score": aggregates["highest"],
            "lowest_score": aggregates["lowest"],
        }

    def all_exam_statistics(self) -> List[Dict[str, Any]]:
        statistics = []
        for exam in Exam.objects.order_by("pk"):
            stats = self.exam_statistics(exam.pk)
            stats["exam_name"] = exam.name
            statistics.append(stats)
        return statistics

    def exam_participation(self) -> List[Dict[str, Any]]:
        """
        Real results grouped by exam, newest submissions first inside each
        group. Exams without results are not listed.
        """
        participation: Dict[int, Dict[str, Any]] = {}
        results = (
            self.real_results()
            .select_related("user", "exam")
            .order_by("-submitted_at", "-pk")
        )
        for result in results:
            entry = participation.setdefault(
                result.exam_id,
                {
                    "exam_id": result.exam_id,
                    "exam_name": result.exam_name,
                    "total_participants": 0,
                    "participants": [],
                },
            )
            entry["total_participants"] += 1
            entry["participants"].append(
                {
                    "user_id": result.user_id,
                    "user_name": display_name(result.user),
                    "score": result.score,
                    "percentage": result.percentage,
                    "passed": is_passing(result.percentage),
                    "submitted_at": result.submitted_at,
                }
            )
        return list(participation.values())

    def admin_report(self, recent_limit: Optional[int] = None) -> Dict[str, Any]:
        if recent_limit is None:
            recent_limit = getattr(settings, "EXAM_RECENT_RESULTS_LIMIT", 10)

        recent = (
            self.real_results()
            .select_related("user", "exam")
            .order_by("-submitted_at", "-pk")[:recent_limit]
        )

        report = {
            "total_exams": Exam.objects.count(),
            "total_results": self.real_results().count(),
            "total_users": get_user_model().objects.count(),
            "recent_results": [
                {
                    "id": result.pk,
                    "user": result.user_id,
                    "user_name": display_name(result.user),
                    "exam_name": result.exam_name,
                    "score": result.score,
                    "percentage": result.percentage,
                    "passed": is_passing(result.percentage),
                    "submitted_at": result.submitted_at,
                }
                for result in recent
            ],
            "exam_stats": self.all_exam_statistics(),
        }
        self.logger.debug(
            f"Admin-Report erstellt: {report['total_exams']} Prüfungen, "
            f"{report['total_results']} Ergebnisse"
        )
        return report
