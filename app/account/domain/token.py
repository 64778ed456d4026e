from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

ROLE_ADMINISTRATOR = "Administrator"
ROLE_USER = "User"
ADMIN_ROLES: tuple[str, ...] = (ROLE_ADMINISTRATOR, ROLE_USER)


@dataclass(frozen=True, slots=True)
class IssuedToken:
    token: str
    token_id: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True, slots=True)
class TokenClaims:
    subject: str
    token_id: str
    roles: tuple[str, ...]
    issued_at: datetime
    expires_at: datetime

    def has_role(self, role: str) -> bool:
        return role in self.roles
