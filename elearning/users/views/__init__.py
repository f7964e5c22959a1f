"""
E-Learning Users Views Package

Dieses Paket enthält die Authentifizierungs-Views des Exam-Backends.

Features:
- JWT-basierte Authentifizierung mit Rollen im Token
- Token-Spiegelung in HTTP-only Cookies

Author: Exam Backend Team
Version: 1.0.0
"""

from .auth_views import (
    CustomTokenObtainPairView,
    CustomTokenRefreshView,
)
