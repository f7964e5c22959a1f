"""
Grading Engine

Pure scoring of a submission against an exam's question set. Nothing here
touches the database; the same inputs always produce the same result.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from django.conf import settings


@dataclass(frozen=True)
class AnswerRecord:
    """Eine Zeile der Auswertung: Frage, Antwort des Nutzers, richtige Antwort."""
    question_id: int
    user_answer: str
    correct_answer: str

    @property
    def is_correct(self) -> bool:
        return bool(self.user_answer) and self.user_answer == self.correct_answer


@dataclass(frozen=True)
class GradeResult:
    correct_count: int
    total_count: int
    percentage: int
    passed: bool
    breakdown: Tuple[AnswerRecord, ...] = field(default_factory=tuple)

    def breakdown_as_list(self) -> List[Dict[str, Any]]:
        return [asdict(record) for record in self.breakdown]


def pass_threshold() -> int:
    return getattr(settings, "EXAM_PASS_PERCENTAGE", 50)


def is_passing(percentage: int, threshold: Optional[int] = None) -> bool:
    if threshold is None:
        threshold = pass_threshold()
    return percentage >= threshold


def round_percentage(correct: int, total: int) -> int:
    """correct / total * 100, rounded half up to an integer. 0 for an empty exam."""
    if total <= 0:
        return 0
    return (correct * 200 + total) // (2 * total)


def build_answer_map(answers: Optional[Iterable[Mapping[str, Any]]]) -> Dict[int, str]:
    """
    Map question id -> submitted answer.

    Later entries for the same question override earlier ones; entries
    without a usable question id are ignored.
    """
    answer_map: Dict[int, str] = {}
    for entry in answers or ():
        question_id = entry.get("question_id")
        if question_id is None:
            continue
        try:
            question_id = int(question_id)
        except (TypeError, ValueError):
            continue
        answer = entry.get("answer")
        answer_map[question_id] = "" if answer is None else str(answer)
    return answer_map


def grade(questions: Iterable[Any], answers: Optional[Iterable[Mapping[str, Any]]]) -> GradeResult:
    """
    Grade ``answers`` against every question of the exam.

    Args:
        questions: The exam's question set (objects with ``pk`` and
            ``correct_answer``)
        answers: Submitted ``{"question_id", "answer"}`` entries; questions
            without an entry count as wrong, entries for questions outside
            the exam are ignored

    Returns:
        GradeResult with counts, integer percentage, pass flag and a
        per-question breakdown in question id order
    """
    answer_map = build_answer_map(answers)

    records = []
    for question in sorted(questions, key=lambda q: q.pk):
        records.append(
            AnswerRecord(
                question_id=question.pk,
                user_answer=answer_map.get(question.pk, ""),
                correct_answer=question.correct_answer,
            )
        )

    correct = sum(1 for record in records if record.is_correct)
    total = len(records)
    percentage = round_percentage(correct, total)

    return GradeResult(
        correct_count=correct,
        total_count=total,
        percentage=percentage,
        passed=is_passing(percentage),
        breakdown=tuple(records),
    )
