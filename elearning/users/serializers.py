"""
E-Learning User Management Serializers

Serializers:
- CustomTokenObtainPairSerializer: JWT token carrying the user's role
  and the permissions granted by the role permission table

Author: Exam Backend Team
Version: 1.0.0
"""

from django.contrib.auth.models import User
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.tokens import RefreshToken

from .models import resolve_role
from .roles import get_role_permissions


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    JWT token serializer with role metadata.

    Token Payload Includes:
    - username: User identification
    - role: Effective role (superusers count as super_admin)
    - permissions: Sorted list of granted permissions
    """

    @classmethod
    def get_token(cls, user: User) -> RefreshToken:
        token = super().get_token(user)

        role = resolve_role(user)
        token["username"] = user.username
        token["role"] = str(role)
        token["permissions"] = sorted(get_role_permissions(role))

        return token
