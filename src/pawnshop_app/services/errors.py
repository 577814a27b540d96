from __future__ import annotations

from dataclasses import dataclass

from pawnshop_sdk import to_user_facing_error
from pawnshop_sdk.exceptions import ApiError


@dataclass(frozen=True)
class ServiceError(RuntimeError):
    message: str
    details: str | None = None

    def __str__(self) -> str:
        return self.message


def normalize_error(exc: Exception, default: str = "Unexpected client error") -> ServiceError:
    if isinstance(exc, ServiceError):
        return exc
    if isinstance(exc, ApiError):
        user_facing = to_user_facing_error(exc)
        return ServiceError(message=user_facing.message, details=user_facing.technical_details)
    return ServiceError(message=str(exc) or default)
