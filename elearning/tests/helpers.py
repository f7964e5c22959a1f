"""
Gemeinsame Testdaten für die Exam-Tests.

Legt eine minimale Fragen-Hierarchie, Fragen mit bekanntem Antwortschlüssel
und Prüfungen an, ohne über die Validierung zu gehen.
"""

import datetime

from django.contrib.auth.models import User

from elearning.final_exam.models import Exam
from elearning.question_bank.models import (
    Chapter,
    ExamCourse,
    Question,
    QuestionGroup,
    SubChapter,
    Subject,
)
from elearning.users.models import UserRole


def create_sub_chapter(name="Kinematics", course_name="Entrance"):
    course = ExamCourse.objects.create(name=course_name)
    group = QuestionGroup.objects.create(name="Science", course=course)
    subject = Subject.objects.create(name="Physics", course=course, group=group)
    chapter = Chapter.objects.create(name="Mechanics", course=course, group=group, subject=subject)
    return SubChapter.objects.create(
        name=name, course=course, group=group, subject=subject, chapter=chapter
    )


def create_questions(sub_chapter, count, correct_answer="A"):
    return [
        Question.objects.create(
            sub_chapter=sub_chapter,
            question_text=f"Question {index + 1}",
            option_a="a",
            option_b="b",
            option_c="c",
            option_d="d",
            correct_answer=correct_answer,
        )
        for index in range(count)
    ]


def create_exam(questions, name="Physics Final", **overrides):
    fields = {
        "name": name,
        "exam_date": datetime.date(2030, 6, 1),
        "start_time": datetime.time(9, 0),
        "end_time": datetime.time(11, 0),
        "duration": 120,
        "total_questions": len(questions),
    }
    fields.update(overrides)
    exam = Exam.objects.create(**fields)
    exam.questions.set(questions)
    return exam


def exam_payload(questions, **overrides):
    payload = {
        "name": "Chemistry Midterm",
        "description": "",
        "exam_date": "2030-06-01",
        "start_time": "09:00:00",
        "end_time": "11:00:00",
        "duration": 90,
        "total_questions": len(questions),
        "question_ids": [question.pk for question in questions],
    }
    payload.update(overrides)
    return payload


def answers_for(questions, correct_count, right="A", wrong="B"):
    """Die ersten ``correct_count`` Fragen richtig, den Rest falsch beantworten."""
    return [
        {"question_id": question.pk, "answer": right if index < correct_count else wrong}
        for index, question in enumerate(questions)
    ]


def create_user(username, role=UserRole.USER, **extra):
    user = User.objects.create_user(username=username, password="Musterpassword", **extra)
    if role != UserRole.USER:
        user.profile.role = role
        user.profile.save()
    return user
