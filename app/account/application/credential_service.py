from __future__ import annotations

import logging
import secrets
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable

from account.domain.token import ADMIN_ROLES, IssuedToken, TokenClaims
from common.application.result import UNAUTHORIZED, Err, Ok, Result
from rest_framework_simplejwt.backends import TokenBackend
from rest_framework_simplejwt.exceptions import TokenBackendError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."
INVALID_TOKEN = "Invalid token."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CredentialService:
    """
    단일 관리자 계정 인증 및 bearer 토큰 발급/검증.

    - 토큰은 HMAC 서명된 JWT 이며 서버에 세션을 저장하지 않습니다.
    - 검증 실패 사유(서명/issuer/audience/만료)는 외부에 구분해서 알리지 않습니다.
    - 취소(revocation)는 없고 만료까지 유효합니다.
    """

    def __init__(
        self,
        *,
        admin_username: str,
        admin_password: str,
        signing_key: str,
        issuer: str,
        audience: str,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(hours=1),
        now: Callable[[], datetime] = _utcnow,
    ):
        self._admin_username = admin_username
        self._admin_password = admin_password
        self._lifetime = lifetime
        self._now = now
        self._backend = TokenBackend(
            algorithm,
            signing_key=signing_key,
            audience=audience,
            issuer=issuer,
            leeway=0,
        )

    def authenticate(self, *, username: str, password: str) -> Result[IssuedToken]:
        # 두 비교를 모두 수행해 어느 쪽이 틀렸는지 드러나지 않게 함
        username_ok = secrets.compare_digest(
            username.encode("utf-8"), self._admin_username.encode("utf-8")
        )
        password_ok = secrets.compare_digest(
            password.encode("utf-8"), self._admin_password.encode("utf-8")
        )
        if not (username_ok and password_ok):
            logger.warning("Rejected login attempt")
            return Err(code=UNAUTHORIZED, message=INVALID_CREDENTIALS)

        # JWT 의 iat/exp 는 초 단위이므로 발급 시각도 초 단위로 맞춘다
        issued_at = self._now().astimezone(timezone.utc).replace(microsecond=0)
        expires_at = issued_at + self._lifetime
        token_id = uuid.uuid4().hex
        token = self._backend.encode(
            {
                "sub": username,
                "jti": token_id,
                "name": username,
                "roles": list(ADMIN_ROLES),
                "iat": int(issued_at.timestamp()),
                "exp": int(expires_at.timestamp()),
            }
        )
        logger.info(f"Issued token {token_id} for '{username}'")
        return Ok(
            IssuedToken(
                token=token,
                token_id=token_id,
                issued_at=issued_at,
                expires_at=expires_at,
            )
        )

    def validate_token(self, token: str) -> Result[TokenClaims]:
        rejected = Err(code=UNAUTHORIZED, message=INVALID_TOKEN)

        try:
            payload = self._backend.decode(token, verify=True)
        except TokenBackendError as e:
            logger.info(f"Token rejected: {e}")
            return rejected

        try:
            claims = TokenClaims(
                subject=str(payload["sub"]),
                token_id=str(payload["jti"]),
                roles=tuple(str(role) for role in payload["roles"]),
                issued_at=datetime.fromtimestamp(int(payload["iat"]), timezone.utc),
                expires_at=datetime.fromtimestamp(int(payload["exp"]), timezone.utc),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.info(f"Token rejected, malformed claims: {e!r}")
            return rejected

        # [iat, exp) 구간 밖이면 거부 (허용 오차 없음)
        now = self._now()
        if not (claims.issued_at <= now < claims.expires_at):
            logger.info(f"Token {claims.token_id} rejected: outside validity window")
            return rejected

        return Ok(claims)
