from __future__ import annotations

import logging

from common.masking import mask_secrets
from common.request_id import get_request_id


class RequestIdFilter(logging.Filter):
    """모든 레코드에 현재 request_id 를 붙입니다. 요청 밖에서는 "-"."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()  # type: ignore[attr-defined]
        return True


class SecretMaskingFilter(logging.Filter):
    """
    레코드 메시지를 포맷한 뒤 토큰/비밀번호를 가립니다.

    인증 실패 로그처럼 헤더 값을 그대로 담을 수 있는 메시지가 있어서,
    개별 호출부의 mask_secrets 와 별개로 handler 단에서 한 번 더 거릅니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = mask_secrets(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True
