"""
Question Bank Models

Hierarchy: ExamCourse -> QuestionGroup -> Subject -> Chapter -> SubChapter
-> Question. Every level stores foreign keys to all of its ancestors so a
question can be filtered on any level with a single join chain from its
sub-chapter.

The exam engine only reads these tables; managing them happens in the
admin.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class TimestampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class ExamCourse(TimestampedModel):
    name = models.CharField(max_length=128)
    description = models.TextField(blank=True, null=True)

    class Meta:
        verbose_name = _("Exam Course")
        verbose_name_plural = _("Exam Courses")
        ordering = ["name"]

    def __str__(self):
        return self.name


class QuestionGroup(TimestampedModel):
    name = models.CharField(max_length=128)
    course = models.ForeignKey(ExamCourse, on_delete=models.CASCADE, related_name="groups")
    description = models.TextField(blank=True, null=True)

    class Meta:
        verbose_name = _("Question Group")
        verbose_name_plural = _("Question Groups")
        ordering = ["course", "name"]

    def __str__(self):
        return f"{self.course.name} / {self.name}"


class Subject(TimestampedModel):
    name = models.CharField(max_length=128)
    course = models.ForeignKey(ExamCourse, on_delete=models.CASCADE, related_name="subjects")
    group = models.ForeignKey(QuestionGroup, on_delete=models.CASCADE, related_name="subjects")
    description = models.TextField(blank=True, null=True)

    class Meta:
        verbose_name = _("Subject")
        verbose_name_plural = _("Subjects")
        ordering = ["group", "name"]

    def __str__(self):
        return self.name


class Chapter(TimestampedModel):
    name = models.CharField(max_length=128)
    course = models.ForeignKey(ExamCourse, on_delete=models.CASCADE, related_name="chapters")
    group = models.ForeignKey(QuestionGroup, on_delete=models.CASCADE, related_name="chapters")
    subject = models.ForeignKey(Subject, on_delete=models.CASCADE, related_name="chapters")
    description = models.TextField(blank=True, null=True)

    class Meta:
        verbose_name = _("Question Chapter")
        verbose_name_plural = _("Question Chapters")
        ordering = ["subject", "name"]

    def __str__(self):
        return self.name


class SubChapter(TimestampedModel):
    name = models.CharField(max_length=128)
    course = models.ForeignKey(ExamCourse, on_delete=models.CASCADE, related_name="sub_chapters")
    group = models.ForeignKey(QuestionGroup, on_delete=models.CASCADE, related_name="sub_chapters")
    subject = models.ForeignKey(Subject, on_delete=models.CASCADE, related_name="sub_chapters")
    chapter = models.ForeignKey(Chapter, on_delete=models.CASCADE, related_name="sub_chapters")
    description = models.TextField(blank=True, null=True)

    class Meta:
        verbose_name = _("Sub-Chapter")
        verbose_name_plural = _("Sub-Chapters")
        ordering = ["chapter", "name"]

    def __str__(self):
        return self.name


class AnswerOption(models.TextChoices):
    A = "A", "A"
    B = "B", "B"
    C = "C", "C"
    D = "D", "D"


class Question(TimestampedModel):
    sub_chapter = models.ForeignKey(
        SubChapter, on_delete=models.CASCADE, related_name="questions"
    )
    question_text = models.TextField()
    option_a = models.TextField()
    option_b = models.TextField()
    option_c = models.TextField()
    option_d = models.TextField()
    correct_answer = models.CharField(max_length=1, choices=AnswerOption.choices)
    description = models.TextField(
        blank=True, null=True, help_text=_("Explanation shown after grading.")
    )
    previous_year_info = models.TextField(
        blank=True,
        null=True,
        help_text=_("Where this question appeared before (year, board, ...)."),
    )

    class Meta:
        verbose_name = _("Question")
        verbose_name_plural = _("Questions")
        ordering = ["id"]

    def __str__(self):
        return f"Q{self.pk}: {self.question_text[:40]}"
