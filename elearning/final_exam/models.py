from django.db import models
from django.db.models import Q
from django.conf import settings
from django.utils.translation import gettext_lazy as _
from django.core.validators import MinValueValidator, MaxValueValidator

from ..question_bank.models import Question

User = settings.AUTH_USER_MODEL


class Exam(models.Model):
    """
    A time-windowed multiple choice exam.

    The question set is fixed on create/update and always holds exactly
    ``total_questions`` entries. ``duration`` is informational; the window
    is defined by ``exam_date`` together with ``start_time``/``end_time``.
    """

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    exam_date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    duration = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text=_("Bearbeitungszeit in Minuten."),
    )
    total_questions = models.PositiveIntegerField()
    questions = models.ManyToManyField(Question, related_name="exams", blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Exam")
        verbose_name_plural = _("Exams")
        ordering = ["exam_date", "start_time", "name"]

    def __str__(self):
        return self.name


class ExamResult(models.Model):
    """
    Terminal result of one submission.

    At most one row with ``is_practice=False`` exists per (user, exam); the
    partial unique constraint below is the authority for that rule.
    ``answers`` is a snapshot of the answer key at submission time, so the
    row stays reviewable if the exam or its questions change later.
    Rows outlive their exam: the FK carries no database constraint.
    """

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="exam_results")
    exam = models.ForeignKey(
        Exam,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        related_name="results",
    )
    score = models.PositiveIntegerField()
    total_questions = models.PositiveIntegerField()
    correct_answers = models.PositiveIntegerField()
    percentage = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    passed = models.BooleanField()
    answers = models.JSONField(default=list)
    is_practice = models.BooleanField(default=False)
    submitted_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        verbose_name = _("Exam Result")
        verbose_name_plural = _("Exam Results")
        ordering = ["-submitted_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "exam"],
                condition=Q(is_practice=False),
                name="unique_real_attempt_per_user_exam",
            ),
        ]

    @property
    def exam_name(self):
        """Name of the exam, or None once the exam has been deleted."""
        try:
            exam = self.exam
        except Exam.DoesNotExist:
            return None
        return exam.name if exam is not None else None

    def __str__(self):
        return f"Result of exam {self.exam_id} for user {self.user_id}: {self.percentage}%"
