from django.test import TestCase
from rest_framework import status
from rest_framework_simplejwt.tokens import AccessToken

from elearning.users.models import UserRole
from elearning.tests.helpers import create_user

"""
    Test Script für die Token generierung, richtige Formatierung und für das neue Ausstellen von Access Tokens
    Token werden für den Login benötigt und tragen Rolle und Berechtigungen.
"""


class TokenTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = create_user("testUser", role=UserRole.ADMIN)

    def setUp(self):
        response = self.client.post(
            "/api/elearning/token/", {"username": "testUser", "password": "Musterpassword"}
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.body = response.json()
        self.refresh_token = response.cookies.get("refresh_token").value

    def test_token_contains_role_and_permissions(self):
        token = AccessToken(self.body["access"])
        self.assertEqual(token["role"], "admin")
        self.assertIn("create_exam", token["permissions"])

    def test_access_cookie_authenticates(self):
        # Ohne Authorization-Header greift das access_token-Cookie.
        response = self.client.get("/api/elearning/exams/user/history/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_refresh_token_success(self):
        self.client.cookies["refresh_token"] = self.refresh_token
        response = self.client.post("/api/elearning/token/refresh/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNotNone(response.cookies["access_token"])

    def test_refresh_token_from_body(self):
        response = self.client.post(
            "/api/elearning/token/refresh/", {"refresh": self.body["refresh"]}
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("access", response.json())

    def test_refresh_token_failure(self):
        self.client.cookies["refresh_token"] = "bad token"
        response = self.client.post("/api/elearning/token/refresh/")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_refresh_token_missing(self):
        del self.client.cookies["refresh_token"]
        response = self.client.post("/api/elearning/token/refresh/")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_wrong_password(self):
        response = self.client.post(
            "/api/elearning/token/", {"username": "testUser", "password": "falsch"}
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
