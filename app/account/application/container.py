from __future__ import annotations

from account.application.credential_service import CredentialService
from django.conf import settings


def build_credential_service() -> CredentialService:
    """
    설정값을 읽어 CredentialService 를 조립합니다.

    서비스 자체는 django.conf.settings 를 모르며, 필요한 값은 여기서만 주입합니다.
    """
    jwt_settings = settings.SIMPLE_JWT
    admin = settings.ADMIN_CREDENTIALS
    return CredentialService(
        admin_username=admin["USERNAME"],
        admin_password=admin["PASSWORD"],
        signing_key=jwt_settings["SIGNING_KEY"],
        issuer=jwt_settings["ISSUER"],
        audience=jwt_settings["AUDIENCE"],
        algorithm=jwt_settings.get("ALGORITHM", "HS256"),
        lifetime=jwt_settings["ACCESS_TOKEN_LIFETIME"],
    )
