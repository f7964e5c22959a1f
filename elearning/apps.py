"""
E-Learning Application Configuration

This module contains the Django application configuration for the exam
backend. All models of the users, question_bank and final_exam packages
are registered under the ``elearning`` app label.

Author: Exam Backend Team
Version: 1.0.0
"""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class ElearningConfig(AppConfig):
    """
    Configuration class for the E-Learning Django application.

    Attributes:
        default_auto_field: Default primary key field type for models
        name: Application name for Django registration
        verbose_name: Human-readable application name for admin interface
    """

    default_auto_field: str = "django.db.models.BigAutoField"
    name: str = "elearning"
    verbose_name: str = "E-Learning Exams"

    def ready(self) -> None:
        """
        Log the exam engine configuration once the app registry is ready.

        Profile signal handlers are connected on import of the models
        registry, so nothing needs to be registered here.
        """
        super().ready()
        from django.conf import settings

        logger.debug(
            f"Exam engine ready: pass={settings.EXAM_PASS_PERCENTAGE}%, "
            f"min_questions={settings.EXAM_MIN_QUESTIONS}, "
            f"enforce_window_on_submit={settings.EXAM_ENFORCE_WINDOW_ON_SUBMIT}"
        )
