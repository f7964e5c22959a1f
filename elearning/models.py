"""
E-Learning Application Models Registry

This module serves as the central models registry for the E-Learning application.
It imports and exposes all models from the logical submodules (users,
question_bank, final_exam) so they are registered with Django's ORM under
the single ``elearning`` app label.

Architecture:
- users/: Profiles and roles
- question_bank/: Course -> group -> subject -> chapter -> sub-chapter -> question
- final_exam/: Exams and exam results

Author: Exam Backend Team
Version: 1.0.0
"""

# Import all user-related models for registration with Django ORM
from .users.models import *

# Import all question bank models for registration with Django ORM
from .question_bank.models import *

# Import all final exam-related models for registration with Django ORM
from .final_exam.models import *
