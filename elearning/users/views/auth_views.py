"""
E-Learning User Authentication Views

Views:
- CustomTokenObtainPairView: JWT login, tokens returned and mirrored into cookies
- CustomTokenRefreshView: Refresh from body or refresh_token cookie

The cookies are read back by backend.custom_auth.JWTAuthentication when a
client does not send an Authorization header.

Author: Exam Backend Team
Version: 1.0.0
"""

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.serializers import TokenRefreshSerializer
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from ..serializers import CustomTokenObtainPairSerializer


def _set_token_cookies(response: Response, refresh=None, access=None) -> None:
    secure = not settings.DEBUG
    if refresh:
        response.set_cookie(
            "refresh_token",
            refresh,
            httponly=True,
            secure=secure,
            samesite="Lax",
            path="/",
            max_age=settings.SIMPLE_JWT["REFRESH_TOKEN_LIFETIME"],
        )
    if access:
        response.set_cookie(
            "access_token",
            access,
            httponly=True,
            secure=secure,
            samesite="Lax",
            path="/",
            max_age=settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"],
        )


class CustomTokenObtainPairView(TokenObtainPairView):
    """
    Login view issuing role-aware tokens.

    Tokens stay in the response body for API clients and are additionally
    stored in HTTP-only cookies for browser clients.
    """

    serializer_class = CustomTokenObtainPairSerializer

    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)
        if response.status_code == status.HTTP_200_OK:
            _set_token_cookies(
                response,
                refresh=response.data.get("refresh"),
                access=response.data.get("access"),
            )
        return response


class CustomTokenRefreshView(TokenRefreshView):
    """
    Refresh view accepting the refresh token from the body or the
    refresh_token cookie.
    """

    def post(self, request, *args, **kwargs):
        refresh_token = request.data.get("refresh") or request.COOKIES.get("refresh_token")
        if not refresh_token:
            return Response(
                {"detail": "Refresh token not provided"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = TokenRefreshSerializer(data={"refresh": refresh_token})
        try:
            serializer.is_valid(raise_exception=True)
        except TokenError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        data = dict(serializer.validated_data)
        response = Response(data, status=status.HTTP_200_OK)
        _set_token_cookies(response, refresh=data.get("refresh"), access=data.get("access"))
        return response
