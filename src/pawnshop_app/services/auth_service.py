from __future__ import annotations

import logging

from pawnshop_sdk import ApiSession
from pawnshop_sdk.models import TokenResponse

from .errors import ServiceError, normalize_error

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "Login successful but no token received"


class AuthService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def has_active_session(self) -> bool:
        return bool(self.session.token)

    def sign_in(self, phone_number: str, password: str) -> TokenResponse:
        logger.info("sign_in_attempt", extra={"phone_number": phone_number})
        try:
            token = self.session.auth_client().sign_in(phone_number, password)
        except Exception as exc:
            logger.warning("sign_in_failure", extra={"phone_number": phone_number})
            raise normalize_error(exc) from exc
        if not token.access_token:
            logger.warning("sign_in_missing_token", extra={"phone_number": phone_number})
            raise ServiceError(MISSING_TOKEN_MESSAGE)
        self.session.establish(token.access_token, phone_number=phone_number)
        logger.info("sign_in_success", extra={"phone_number": phone_number})
        return token

    def sign_out(self) -> None:
        logger.info("sign_out")
        self.session.clear()
