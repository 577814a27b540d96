from __future__ import annotations

from typing import Any, Mapping

from .exceptions import (
    AlreadyExistsError,
    ApiError,
    AuthError,
    NotFoundError,
    PermissionDeniedError,
    ServerError,
    ValidationError,
)

ALREADY_EXISTS_MARKER = "already exists"


def detail_message(detail: Any) -> str | None:
    """Flatten a FastAPI ``detail`` (string or list of ``{loc, msg}``) into one line."""
    if detail is None:
        return None
    if isinstance(detail, str):
        return detail.strip() or None
    if isinstance(detail, list):
        parts: list[str] = []
        for item in detail:
            if isinstance(item, Mapping):
                loc = item.get("loc")
                field = loc[-1] if isinstance(loc, (list, tuple)) and loc else None
                msg = item.get("msg") or item.get("message")
                if msg:
                    parts.append(f"{field}: {msg}" if field else str(msg))
            elif item:
                parts.append(str(item))
        return "; ".join(parts) or None
    if isinstance(detail, Mapping):
        return detail_message(detail.get("msg") or detail.get("message"))
    return str(detail)


def map_error(status_code: int, payload: Mapping[str, object] | None) -> ApiError:
    payload = payload or {}
    detail = payload.get("detail")
    message = detail_message(detail) or str(payload.get("message") or "Request failed")
    code = str(payload.get("code") or f"HTTP_{status_code}")
    mapped: type[ApiError]
    if status_code == 401:
        mapped = AuthError
    elif status_code == 403:
        mapped = PermissionDeniedError
    elif status_code == 404:
        mapped = NotFoundError
    elif status_code in {400, 409} and ALREADY_EXISTS_MARKER in message.lower():
        mapped = AlreadyExistsError
    elif status_code in {400, 409, 422}:
        mapped = ValidationError
    elif status_code >= 500:
        mapped = ServerError
    else:
        mapped = ApiError
    return mapped(
        code=code,
        message=message,
        details=detail,
        status_code=status_code,
        raw_payload=dict(payload),
    )
