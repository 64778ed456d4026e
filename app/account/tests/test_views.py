"""
Tests for Login / Bearer token authentication

로그인 API 와 보호된 API 접근 테스트
"""

from datetime import datetime, timedelta, timezone

import pytest
from account.application.credential_service import CredentialService
from rest_framework import status
from rest_framework.test import APIClient


@pytest.mark.django_db
class TestLoginView:
    def setup_method(self):
        self.client = APIClient()

    def test_login_success(self, settings):
        """설정된 관리자 계정으로 로그인"""
        # When
        response = self.client.post(
            "/api/v1/auth/login/",
            {
                "username": settings.ADMIN_CREDENTIALS["USERNAME"],
                "password": settings.ADMIN_CREDENTIALS["PASSWORD"],
            },
            format="json",
        )

        # Then
        assert response.status_code == status.HTTP_200_OK
        assert response.data["token"]
        assert response.data["expires"]

    def test_login_with_form_body(self, settings):
        response = self.client.post(
            "/api/v1/auth/login/",
            {
                "username": settings.ADMIN_CREDENTIALS["USERNAME"],
                "password": settings.ADMIN_CREDENTIALS["PASSWORD"],
            },
        )

        assert response.status_code == status.HTTP_200_OK

    def test_login_invalid_credentials(self, settings):
        """잘못된 계정은 401, 사유 구분 없음"""
        response = self.client.post(
            "/api/v1/auth/login/",
            {"username": settings.ADMIN_CREDENTIALS["USERNAME"], "password": "nope"},
            format="json",
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["error_code"] == "UNAUTHORIZED"
        assert response.data["error"] == "Invalid credentials."

    def test_login_missing_fields(self):
        response = self.client.post("/api/v1/auth/login/", {}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_login_ignores_bad_bearer_header(self, settings):
        """로그인은 Authorization 헤더를 검사하지 않음"""
        self.client.credentials(HTTP_AUTHORIZATION="Bearer garbage")

        response = self.client.post(
            "/api/v1/auth/login/",
            {
                "username": settings.ADMIN_CREDENTIALS["USERNAME"],
                "password": settings.ADMIN_CREDENTIALS["PASSWORD"],
            },
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK


@pytest.mark.django_db
class TestBearerTokenAuthentication:
    def setup_method(self):
        self.client = APIClient()

    def test_protected_route_without_token(self):
        response = self.client.get("/api/v1/departments/")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_protected_route_with_token(self, admin_client):
        response = admin_client.get("/api/v1/departments/")

        assert response.status_code == status.HTTP_200_OK

    def test_token_from_login_is_accepted(self, settings):
        login = self.client.post(
            "/api/v1/auth/login/",
            {
                "username": settings.ADMIN_CREDENTIALS["USERNAME"],
                "password": settings.ADMIN_CREDENTIALS["PASSWORD"],
            },
            format="json",
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['token']}")

        response = self.client.get("/api/v1/departments/")

        assert response.status_code == status.HTTP_200_OK

    def test_tampered_token_is_rejected(self, admin_token):
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {admin_token}x")

        response = self.client.get("/api/v1/departments/")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["detail"] == "Invalid token."

    def test_expired_token_is_rejected(self, settings):
        """만료된 토큰도 동일한 메시지로 거부"""
        jwt_settings = settings.SIMPLE_JWT
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        expired = CredentialService(
            admin_username=settings.ADMIN_CREDENTIALS["USERNAME"],
            admin_password=settings.ADMIN_CREDENTIALS["PASSWORD"],
            signing_key=jwt_settings["SIGNING_KEY"],
            issuer=jwt_settings["ISSUER"],
            audience=jwt_settings["AUDIENCE"],
            now=lambda: past,
        ).authenticate(
            username=settings.ADMIN_CREDENTIALS["USERNAME"],
            password=settings.ADMIN_CREDENTIALS["PASSWORD"],
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {expired.value.token}")

        response = self.client.get("/api/v1/departments/")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["detail"] == "Invalid token."

    def test_invalid_token_on_public_route_is_rejected(self):
        """공개 API 라도 잘못된 토큰을 보내면 401"""
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")

        response = self.client.get("/api/v1/locations/")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.parametrize("header", ["Bearer a b", "Bearer"])
    def test_malformed_header_gets_uniform_rejection(self, header):
        """헤더 형식 오류도 다른 토큰 실패와 같은 메시지"""
        self.client.credentials(HTTP_AUTHORIZATION=header)

        response = self.client.get("/api/v1/departments/")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["detail"] == "Invalid token."
        assert response.data["detail"].code == "token_not_valid"
