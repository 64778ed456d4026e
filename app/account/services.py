from __future__ import annotations

from account.application.container import build_credential_service
from account.domain.token import IssuedToken
from common.application.result import Result


class AccountService:
    @staticmethod
    def login(*, username: str, password: str) -> Result[IssuedToken]:
        """
        관리자 계정 로그인.

        성공 시 1시간 유효한 bearer 토큰을 발급합니다.
        """
        service = build_credential_service()
        return service.authenticate(username=username, password=password)
