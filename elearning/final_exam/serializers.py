from rest_framework import serializers

from ..question_bank.serializers import CandidateQuestionSerializer, QuestionSerializer
from .models import Exam, ExamResult


class ExamWriteSerializer(serializers.Serializer):
    """
    Payload for creating (all required fields) or patching (partial=True)
    an exam. Only checks the shape of the fields; the question selection
    rules live in ExamValidationService.
    """

    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    exam_date = serializers.DateField()
    start_time = serializers.TimeField()
    end_time = serializers.TimeField()
    duration = serializers.IntegerField(min_value=1)
    total_questions = serializers.IntegerField(min_value=1)
    question_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1), allow_empty=True
    )
    is_active = serializers.BooleanField(required=False)

    def validate(self, attrs):
        start_time = attrs.get("start_time")
        end_time = attrs.get("end_time")
        if self.instance is not None:
            start_time = start_time or self.instance.start_time
            end_time = end_time or self.instance.end_time
        if start_time and end_time and end_time <= start_time:
            raise serializers.ValidationError(
                {"end_time": "End time must be after start time."}
            )
        return attrs


class ExamSerializer(serializers.ModelSerializer):
    """Exam with its full question set (answer key included) for administrators."""

    questions = QuestionSerializer(many=True, read_only=True)

    class Meta:
        model = Exam
        fields = [
            "id",
            "name",
            "description",
            "exam_date",
            "start_time",
            "end_time",
            "duration",
            "total_questions",
            "is_active",
            "questions",
            "created_at",
            "updated_at",
        ]


class CandidateExamSerializer(ExamSerializer):
    """Exam as delivered to candidates: questions without answer key."""

    questions = CandidateQuestionSerializer(many=True, read_only=True)


class AnswerSerializer(serializers.Serializer):
    question_id = serializers.IntegerField()
    answer = serializers.CharField(allow_blank=True, allow_null=True, max_length=16)


class SubmissionSerializer(serializers.Serializer):
    answers = AnswerSerializer(many=True, allow_empty=True)


class ExamResultSerializer(serializers.ModelSerializer):
    exam_name = serializers.CharField(read_only=True, allow_null=True)

    class Meta:
        model = ExamResult
        fields = [
            "id",
            "user",
            "exam",
            "exam_name",
            "score",
            "total_questions",
            "correct_answers",
            "percentage",
            "passed",
            "answers",
            "is_practice",
            "submitted_at",
        ]
        read_only_fields = fields
