"""
E-Learning Application URL Configuration

URL Structure:
- /api/elearning/token/: Authentication endpoints (JWT token management)
- /api/elearning/questions/: Question bank read access for exam authors
- /api/elearning/exams/: Exam management, submissions and reports

Author: Exam Backend Team
Version: 1.0.0
"""

from typing import List
from django.urls import path, include, URLPattern
from rest_framework_simplejwt.views import TokenVerifyView

# Import der Views
from .users import views as user_views
from .question_bank import views as question_views
from .final_exam import views as exam_views

app_name = 'elearning'

# --- Question Bank URL Patterns ---

questions_urlpatterns: List[URLPattern] = [
    path('', question_views.QuestionListView.as_view(), name='question-list'),
]

# --- Examination System URL Patterns ---

exams_urlpatterns: List[URLPattern] = [
    # Exam definitions (write access requires exam permissions)
    path('', exam_views.ExamListCreateView.as_view(), name='exam-list'),
    path('<int:exam_id>/', exam_views.ExamDetailView.as_view(), name='exam-detail'),

    # Candidate endpoints
    path('<int:exam_id>/start/', exam_views.StartExamView.as_view(), name='start-exam'),
    path('<int:exam_id>/submit/', exam_views.SubmitExamView.as_view(), name='submit-exam'),
    path('<int:exam_id>/practice/', exam_views.SubmitPracticeExamView.as_view(), name='submit-practice'),
    path('<int:exam_id>/check-attempt/', exam_views.CheckAttemptView.as_view(), name='check-attempt'),
    path('user/results/', exam_views.UserResultsView.as_view(), name='user-results'),
    path('user/history/', exam_views.UserHistoryView.as_view(), name='user-history'),

    # Reports (requires report permission)
    path('admin/report/', exam_views.AdminReportView.as_view(), name='admin-report'),
    path('admin/participation/', exam_views.ExamParticipationView.as_view(), name='exam-participation'),
    path('statistics/', exam_views.AllExamStatisticsView.as_view(), name='all-exam-statistics'),
    path('<int:exam_id>/statistics/', exam_views.ExamStatisticsView.as_view(), name='exam-statistics'),
]

# --- Main URL Configuration for E-Learning Application ---

urlpatterns: List[URLPattern] = [
    # Authentication endpoints (JWT token management)
    path('token/', user_views.CustomTokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('token/refresh/', user_views.CustomTokenRefreshView.as_view(), name='token_refresh'),
    path('token/verify/', TokenVerifyView.as_view(), name='token_verify'),

    # Functional area URL includes with proper namespacing
    path('questions/', include((questions_urlpatterns, 'questions'))),
    path('exams/', include((exams_urlpatterns, 'exams'))),
]
