"""
E-Learning Application Django Admin Configuration

Admin interface for the exam backend, organized into:
- User Management: user administration with role (profile) integration
- Question Bank: hierarchy and question maintenance
- Examination System: exam overview and read-only results

Exams are created and their question sets changed through the API only,
where the question selection is validated; the admin keeps those fields
read-only. Exam results are never edited by hand.

Author: Exam Backend Team
Version: 1.0.0
"""

from typing import Optional
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.models import User
from django.utils.translation import gettext_lazy as _
from django.db.models import Count, QuerySet
from django.http import HttpRequest

# Import all models from the central models registry
from .models import (
    Profile,
    ExamCourse,
    QuestionGroup,
    Subject,
    Chapter,
    SubChapter,
    Question,
    Exam,
    ExamResult,
)

# --- User Management Administration ---


class ProfileInline(admin.StackedInline):
    """Inline admin for the user's role."""

    model = Profile
    can_delete = False
    verbose_name_plural = "Profile Information"
    fk_name = "user"
    fields = ("role",)

    def get_extra(
        self, request: HttpRequest, obj: Optional[User] = None, **kwargs
    ) -> int:
        """Return 0 extra forms since profile should exist or be created automatically."""
        return 0


class UserAdmin(BaseUserAdmin):
    """User administration including the exam role."""

    inlines = (ProfileInline,)
    list_display = (
        "username",
        "email",
        "first_name",
        "last_name",
        "is_staff",
        "is_active",
        "get_role",
    )
    list_select_related = ("profile",)
    list_filter = (
        "is_staff",
        "is_superuser",
        "is_active",
        "profile__role",
        "date_joined",
    )
    search_fields = ("username", "first_name", "last_name", "email")
    ordering = ("username",)

    @admin.display(description=_("Role"))
    def get_role(self, instance: User) -> Optional[str]:
        try:
            return instance.profile.get_role_display()
        except Profile.DoesNotExist:
            return None

    def get_queryset(self, request: HttpRequest) -> QuerySet:
        return super().get_queryset(request).select_related("profile")


# Register enhanced user administration
admin.site.unregister(User)
admin.site.register(User, UserAdmin)

# --- Question Bank Administration ---


@admin.register(ExamCourse)
class ExamCourseAdmin(admin.ModelAdmin):
    list_display = ("name", "created_at")
    search_fields = ("name",)


@admin.register(QuestionGroup)
class QuestionGroupAdmin(admin.ModelAdmin):
    list_display = ("name", "course")
    list_filter = ("course",)
    search_fields = ("name",)


@admin.register(Subject)
class SubjectAdmin(admin.ModelAdmin):
    list_display = ("name", "course", "group")
    list_filter = ("course", "group")
    search_fields = ("name",)


@admin.register(Chapter)
class ChapterAdmin(admin.ModelAdmin):
    list_display = ("name", "subject", "group", "course")
    list_filter = ("course", "group", "subject")
    search_fields = ("name",)


@admin.register(SubChapter)
class SubChapterAdmin(admin.ModelAdmin):
    list_display = ("name", "chapter", "subject", "course")
    list_filter = ("course", "group", "subject", "chapter")
    search_fields = ("name",)


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    """
    Question maintenance.

    Editing the answer key of a question already used in an exam changes
    how future submissions are graded; stored results keep their snapshot.
    """

    list_display = ("id", "short_text", "correct_answer", "sub_chapter")
    list_filter = ("correct_answer", "sub_chapter__course", "sub_chapter__subject")
    search_fields = ("question_text", "previous_year_info")
    list_select_related = ("sub_chapter",)

    @admin.display(description=_("Question"))
    def short_text(self, obj: Question) -> str:
        return obj.question_text[:60]


# --- Examination System Administration ---


@admin.register(Exam)
class ExamAdmin(admin.ModelAdmin):
    """Exam overview; question set and total are maintained through the API."""

    list_display = (
        "name",
        "exam_date",
        "start_time",
        "end_time",
        "total_questions",
        "is_active",
        "result_count",
    )
    list_filter = ("is_active", "exam_date")
    search_fields = ("name", "description")
    readonly_fields = ("total_questions", "questions", "created_at", "updated_at")

    fieldsets = (
        (_("Basic Information"), {"fields": ("name", "description", "is_active")}),
        (
            _("Schedule"),
            {"fields": ("exam_date", "start_time", "end_time", "duration")},
        ),
        (
            _("Questions"),
            {"fields": ("total_questions", "questions"), "classes": ("collapse",)},
        ),
        (_("Timestamps"), {"fields": ("created_at", "updated_at")}),
    )

    @admin.display(description=_("Results"))
    def result_count(self, obj: Exam) -> int:
        return obj.result_count

    def has_add_permission(self, request: HttpRequest) -> bool:
        """Exams are created through the API so the question selection gets validated."""
        return False

    def get_queryset(self, request: HttpRequest) -> QuerySet:
        return (
            super()
            .get_queryset(request)
            .annotate(result_count=Count("results"))
        )


@admin.register(ExamResult)
class ExamResultAdmin(admin.ModelAdmin):
    """Read-only view of the attempt ledger."""

    list_display = (
        "user",
        "exam",
        "score",
        "total_questions",
        "percentage",
        "passed",
        "is_practice",
        "submitted_at",
    )
    list_filter = ("is_practice", "passed", "exam", "submitted_at")
    search_fields = ("user__username", "user__email", "exam__name")

    def has_add_permission(self, request: HttpRequest) -> bool:
        return False

    def has_change_permission(self, request: HttpRequest, obj=None) -> bool:
        return False

    def get_queryset(self, request: HttpRequest) -> QuerySet:
        return super().get_queryset(request).select_related("user", "exam")
