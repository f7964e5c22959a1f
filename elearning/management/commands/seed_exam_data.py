"""
Seed Exam Data Management Command

Legt für die lokale Entwicklung eine kleine Fragendatenbank
(Kurs -> Gruppe -> Fach -> Kapitel -> Unterkapitel -> Fragen), eine
Prüfung mit heutigem Zeitfenster sowie einen Admin- und einen
Kandidaten-Account an.

Usage:
    python manage.py seed_exam_data [--questions N] [--flush]

Author: Exam Backend Team
Version: 1.0.0
"""

import datetime
import logging
import random

from django.contrib.auth.models import User
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from ...final_exam.exceptions import ExamEngineException
from ...final_exam.services import ExamService
from ...models import (
    Chapter,
    Exam,
    ExamCourse,
    ExamResult,
    Question,
    QuestionGroup,
    SubChapter,
    Subject,
)
from ...users.models import UserRole

logger = logging.getLogger(__name__)

HIERARCHY = {
    "Science": {
        "Physics": ["Mechanics", "Optics"],
        "Chemistry": ["Atoms", "Bonding"],
    },
}

SEED_USERS = (
    ("exam_admin", UserRole.ADMIN, True),
    ("candidate", UserRole.USER, False),
)


class Command(BaseCommand):
    help = "Legt eine Beispiel-Fragendatenbank, eine Prüfung und Test-Accounts an."

    def add_arguments(self, parser):
        parser.add_argument(
            "--questions",
            type=int,
            default=12,
            help="Anzahl der Fragen in der Beispielprüfung (Standard: 12).",
        )
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Vorhandene Fragen, Prüfungen und Ergebnisse vorher löschen.",
        )

    def _create_hierarchy(self):
        course, _ = ExamCourse.objects.get_or_create(name="Entrance Preparation")
        group, _ = QuestionGroup.objects.get_or_create(name="Science", course=course)
        sub_chapters = []
        for subject_name, chapters in HIERARCHY["Science"].items():
            subject, _ = Subject.objects.get_or_create(
                name=subject_name, course=course, group=group
            )
            for chapter_name in chapters:
                chapter, _ = Chapter.objects.get_or_create(
                    name=chapter_name, course=course, group=group, subject=subject
                )
                sub_chapter, _ = SubChapter.objects.get_or_create(
                    name=f"{chapter_name} Basics",
                    course=course,
                    group=group,
                    subject=subject,
                    chapter=chapter,
                )
                sub_chapters.append(sub_chapter)
        return sub_chapters

    def _create_questions(self, sub_chapters, count):
        questions = []
        for index in range(count):
            sub_chapter = sub_chapters[index % len(sub_chapters)]
            questions.append(
                Question.objects.create(
                    sub_chapter=sub_chapter,
                    question_text=f"{sub_chapter.name}: sample question {index + 1}?",
                    option_a="Option A",
                    option_b="Option B",
                    option_c="Option C",
                    option_d="Option D",
                    correct_answer=random.choice("ABCD"),
                    description="Seeded question.",
                )
            )
        return questions

    def _create_users(self):
        for username, role, is_staff in SEED_USERS:
            user, created = User.objects.get_or_create(
                username=username,
                defaults={"email": f"{username}@example.com", "is_staff": is_staff},
            )
            if created:
                user.set_password(username)
                user.save()
            user.profile.role = role
            user.profile.save(update_fields=["role"])
            self.stdout.write(f"  - Benutzer {username} ({role})")

    def handle(self, *args, **options):
        count = options["questions"]

        try:
            with transaction.atomic():
                if options["flush"]:
                    ExamResult.objects.all().delete()
                    Exam.objects.all().delete()
                    Question.objects.all().delete()
                    self.stdout.write(self.style.WARNING("Vorhandene Prüfungsdaten gelöscht."))

                sub_chapters = self._create_hierarchy()
                questions = self._create_questions(sub_chapters, count)
                self.stdout.write(f"{len(questions)} Fragen erstellt.")

                today = timezone.localdate()
                exam = ExamService().create(
                    {
                        "name": f"Sample Exam {today.isoformat()}",
                        "description": "Seeded exam open for the whole day.",
                        "exam_date": today,
                        "start_time": datetime.time(0, 0),
                        "end_time": datetime.time(23, 59),
                        "duration": 60,
                        "total_questions": len(questions),
                        "question_ids": [question.pk for question in questions],
                    }
                )
                self.stdout.write(f"Prüfung erstellt: {exam.name} (ID: {exam.pk})")

                self._create_users()
        except ExamEngineException as e:
            logger.error(f"Fehler beim Seeden der Prüfungsdaten: {e.message}", exc_info=True)
            raise CommandError(e.message)

        self.stdout.write(self.style.SUCCESS("Seeding abgeschlossen."))
