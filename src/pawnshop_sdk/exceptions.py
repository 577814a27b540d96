from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApiError(Exception):
    code: str
    message: str
    details: object | None
    status_code: int
    raw_payload: object | None = None

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.code}: {self.message}"


class AuthError(ApiError):
    """Sign-in rejected or bearer token refused."""


class PermissionDeniedError(ApiError):
    """403 returned for the staff token."""


class NotFoundError(ApiError):
    pass


class ValidationError(ApiError):
    pass


class AlreadyExistsError(ValidationError):
    """Backend refused a create because the identifier is taken."""


class ServerError(ApiError):
    """5xx server-side failures."""


class TransportError(ApiError):
    """Network/transport failure before an HTTP response was returned."""


class EnvelopeError(ApiError):
    """2xx response whose body is not a {code, result} envelope."""
