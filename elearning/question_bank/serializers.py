from rest_framework import serializers

from .models import Question


class QuestionSerializer(serializers.ModelSerializer):
    """Full question including the answer key, for exam administrators."""

    sub_chapter_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Question
        fields = [
            "id",
            "sub_chapter_id",
            "question_text",
            "option_a",
            "option_b",
            "option_c",
            "option_d",
            "correct_answer",
            "description",
            "previous_year_info",
            "created_at",
            "updated_at",
        ]


class CandidateQuestionSerializer(serializers.ModelSerializer):
    """Question as shown to a candidate: no answer key, no explanation."""

    class Meta:
        model = Question
        fields = [
            "id",
            "question_text",
            "option_a",
            "option_b",
            "option_c",
            "option_d",
        ]
