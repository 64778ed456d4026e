from __future__ import annotations

import re

REDACTED = "[REDACTED]"
MAX_LOGGED_LENGTH = 500

_SECRET_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Authorization 헤더 값
    re.compile(r"Bearer\s+[A-Za-z0-9\-\._~\+/]+=*", re.IGNORECASE),
    # 헤더 없이 노출된 JWT (header.payload.signature)
    re.compile(r"\beyJ[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]*"),
    # key=value / key: value 형태의 자격 증명
    re.compile(r"\b(token|password|signing_key)\b\s*[:=]\s*[^\s,]+", re.IGNORECASE),
)


def mask_secrets(text: str, *, max_length: int = MAX_LOGGED_LENGTH) -> str:
    """관리자 토큰이나 비밀번호가 로그에 남지 않도록 가리고, 긴 값은 자릅니다."""
    if not text:
        return text

    for pattern in _SECRET_PATTERNS:
        text = pattern.sub(REDACTED, text)

    if len(text) > max_length:
        return text[:max_length] + "...[TRUNCATED]"
    return text
