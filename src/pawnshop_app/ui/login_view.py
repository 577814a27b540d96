from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pawnshop_app.services.auth_service import AuthService
from pawnshop_app.services.errors import ServiceError

LOGIN_SUCCESS_MESSAGE = "Login successful!"
MISSING_CREDENTIALS_MESSAGE = "Please enter your phone number and password."


@dataclass
class LoginView:
    service: AuthService
    title: str = "Pawnshop Staff Sign In"
    phone_number: str = ""
    password: str = ""
    response_message: str = ""
    is_loading: bool = False

    def submit(self) -> bool:
        if not self.phone_number.strip() or not self.password:
            self.response_message = MISSING_CREDENTIALS_MESSAGE
            return False
        self.is_loading = True
        try:
            self.service.sign_in(self.phone_number.strip(), self.password)
        except ServiceError as exc:
            self.response_message = f"Error: {exc.message}"
            return False
        finally:
            self.is_loading = False
            self.password = ""
        self.response_message = LOGIN_SUCCESS_MESSAGE
        return True

    def render(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "phone_number": self.phone_number,
            "message": self.response_message,
            "is_loading": self.is_loading,
        }
