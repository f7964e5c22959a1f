"""
Exam engine services.

- validation_service: question selection and count checks
- exam_service: exam definition store and start check
- window: exam window evaluation
- grading: pure scoring
- attempt_ledger: at-most-once real submissions, user results/history
- statistics_service: per-exam and cross-exam aggregates, admin report
"""

from .attempt_ledger import AttemptLedgerService, SubmissionResult
from .exam_service import ExamService
from .grading import AnswerRecord, GradeResult, grade
from .statistics_service import ExamStatisticsService
from .validation_service import ExamValidationService
from .window import ExamWindowEvaluator, WindowCheck
