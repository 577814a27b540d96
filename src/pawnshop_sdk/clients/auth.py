from __future__ import annotations

from dataclasses import dataclass

from ..http_client import unwrap_result
from ..models import TokenResponse
from .base import BaseClient


@dataclass
class AuthClient(BaseClient):
    module: str = "auth"

    def sign_in(self, phone_number: str, password: str) -> TokenResponse:
        payload = {"phone_number": phone_number, "password": password}
        data = self.http.request(
            "POST",
            self._path("/sign_in"),
            json_body=payload,
            module=self.module,
            operation="sign_in",
        )
        result = unwrap_result(data, operation="sign_in")
        return TokenResponse.model_validate(result if isinstance(result, dict) else {})
