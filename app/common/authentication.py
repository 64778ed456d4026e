"""
Bearer Token Authentication

Authorization: Bearer <token> 헤더의 토큰을 CredentialService 로 검증합니다.
DB 사용자 조회 없이 토큰 클레임만으로 요청 주체를 만듭니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from account.application.container import build_credential_service
from account.application.credential_service import INVALID_TOKEN
from account.domain.token import TokenClaims
from common.application.result import Err
from common.masking import mask_secrets
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenPrincipal:
    """토큰 클레임 기반 요청 주체 (request.user)."""

    claims: TokenClaims

    is_authenticated = True
    is_anonymous = False

    @property
    def username(self) -> str:
        return self.claims.subject

    @property
    def roles(self) -> tuple[str, ...]:
        return self.claims.roles

    def __str__(self) -> str:
        return self.claims.subject


class BearerTokenAuthentication(JWTAuthentication):
    """
    헤더 파싱은 simplejwt 의 JWTAuthentication 을 그대로 쓰고,
    검증과 주체 생성만 교체합니다.

    검증 실패 시 사유와 관계없이 동일한 메시지로 401 을 반환합니다.
    """

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except AuthenticationFailed:
            header = self.get_header(request) or b""
            logger.warning(
                f"Rejected credential on {request.method} {request.path}: "
                f"{mask_secrets(header.decode('utf-8', errors='replace'))}"
            )
            # 헤더 형식 오류도 토큰 검증 실패와 같은 응답
            raise AuthenticationFailed(INVALID_TOKEN, code="token_not_valid") from None

    def get_validated_token(self, raw_token):
        if isinstance(raw_token, bytes):
            raw_token = raw_token.decode("utf-8")

        result = build_credential_service().validate_token(raw_token)
        if isinstance(result, Err):
            raise AuthenticationFailed(result.message, code="token_not_valid")
        return result.value

    def get_user(self, validated_token: TokenClaims) -> TokenPrincipal:
        return TokenPrincipal(claims=validated_token)
