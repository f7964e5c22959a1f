from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

# Angepasste Importe
from ...users.permissions import HasExamPermission, user_has_permission
from ...users.roles import Permission
from ..serializers import CandidateExamSerializer, ExamSerializer, ExamWriteSerializer
from ..services import ExamService


def exam_serializer_for(user):
    """Administrators see the answer key, everybody else does not."""
    if user_has_permission(user, Permission.UPDATE_EXAM):
        return ExamSerializer
    return CandidateExamSerializer


class ExamListCreateView(APIView):
    permission_classes = [HasExamPermission]
    required_permissions = {"POST": Permission.CREATE_EXAM}

    def get(self, request):
        exams = ExamService().list()
        serializer_class = exam_serializer_for(request.user)
        return Response(serializer_class(exams, many=True).data)

    def post(self, request):
        serializer = ExamWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        exam = ExamService().create(serializer.validated_data)
        return Response(ExamSerializer(exam).data, status=status.HTTP_201_CREATED)


class ExamDetailView(APIView):
    permission_classes = [HasExamPermission]
    required_permissions = {
        "PUT": Permission.UPDATE_EXAM,
        "PATCH": Permission.UPDATE_EXAM,
        "DELETE": Permission.DELETE_EXAM,
    }

    def get(self, request, exam_id):
        exam = ExamService().get(exam_id)
        serializer_class = exam_serializer_for(request.user)
        return Response(serializer_class(exam).data)

    def put(self, request, exam_id):
        return self._update(request, exam_id)

    def patch(self, request, exam_id):
        return self._update(request, exam_id)

    def _update(self, request, exam_id):
        service = ExamService()
        exam = service.get(exam_id)
        # Updates sind immer partiell, auch bei PUT.
        serializer = ExamWriteSerializer(exam, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        exam = service.update(exam_id, serializer.validated_data)
        return Response(ExamSerializer(exam).data)

    def delete(self, request, exam_id):
        ExamService().delete(exam_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
