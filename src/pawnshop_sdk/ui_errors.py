from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ApiError, PermissionDeniedError, TransportError

ACCESS_DENIED_MESSAGE = "Access denied. You are not authorized."
CONNECTION_FAILED_MESSAGE = "Failed to connect to the server."


@dataclass(frozen=True)
class UserFacingError:
    message: str
    details: str | None = None

    @property
    def technical_details(self) -> str | None:
        if self.details:
            return self.details
        return None


def to_user_facing_error(exc: ApiError) -> UserFacingError:
    details = f"{exc.code} (HTTP {exc.status_code})"
    if isinstance(exc, TransportError):
        return UserFacingError(message=CONNECTION_FAILED_MESSAGE, details=f"{details}: {exc.message}")
    if isinstance(exc, PermissionDeniedError):
        return UserFacingError(message=ACCESS_DENIED_MESSAGE, details=details)
    primary = exc.message.strip() or "Request failed"
    return UserFacingError(message=primary, details=details)
