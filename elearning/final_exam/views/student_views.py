from rest_framework import generics, permissions, status
from rest_framework.views import APIView
from rest_framework.response import Response

# Angepasste Importe
from ..serializers import ExamResultSerializer, SubmissionSerializer
from ..services import AttemptLedgerService, ExamService


class StartExamView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, exam_id):
        # Ein geschlossenes Zeitfenster ist kein Fehler: success=False mit 200.
        return Response(ExamService().start_exam(exam_id), status=status.HTTP_200_OK)


class SubmitExamView(APIView):
    permission_classes = [permissions.IsAuthenticated]
    is_practice = False

    def post(self, request, exam_id):
        serializer = SubmissionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = AttemptLedgerService().submit(
            exam_id,
            request.user,
            serializer.validated_data["answers"],
            is_practice=self.is_practice,
        )
        return Response(result.to_dict(), status=status.HTTP_200_OK)


class SubmitPracticeExamView(SubmitExamView):
    is_practice = True


class CheckAttemptView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, exam_id):
        ledger = AttemptLedgerService()
        # 404 für unbekannte Prüfungen
        exam = ledger.exam_service.get(exam_id)
        return Response({"has_attempted": ledger.has_real_attempt(exam.pk, request.user.pk)})


class UserResultsView(generics.ListAPIView):
    serializer_class = ExamResultSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return AttemptLedgerService().user_results(self.request.user.pk)


class UserHistoryView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response(AttemptLedgerService().user_history(request.user.pk))
