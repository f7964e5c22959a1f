from rest_framework import permissions
from rest_framework.views import APIView
from rest_framework.response import Response

# Angepasste Importe
from ...users.permissions import HasExamPermission
from ...users.roles import Permission
from ..services import ExamService, ExamStatisticsService


class ReportView(APIView):
    permission_classes = [permissions.IsAuthenticated, HasExamPermission]
    required_permission = Permission.VIEW_EXAM_REPORTS


class AdminReportView(ReportView):
    def get(self, request):
        return Response(ExamStatisticsService().admin_report())


class ExamParticipationView(ReportView):
    def get(self, request):
        return Response(ExamStatisticsService().exam_participation())


class AllExamStatisticsView(ReportView):
    def get(self, request):
        return Response(ExamStatisticsService().all_exam_statistics())


class ExamStatisticsView(ReportView):
    def get(self, request, exam_id):
        exam = ExamService().get(exam_id)
        return Response(ExamStatisticsService().exam_statistics(exam.pk))
