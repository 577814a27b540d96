from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from .config import ClientConfig
from .error_mapper import map_error
from .exceptions import EnvelopeError, TransportError

logger = logging.getLogger(__name__)


@dataclass
class LastOperation:
    module: str
    operation: str
    duration_ms: int
    result: str
    status_code: int | None = None


@dataclass
class HttpClient:
    config: ClientConfig
    session: requests.Session | None = None
    last_operation: LastOperation | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=self.config.max_connections,
                pool_maxsize=self.config.max_connections,
            )
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def _build_url(self, path: str) -> str:
        base = self.config.api_base_url.rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        module: str = "unknown",
        operation: str = "unknown",
    ) -> dict[str, Any] | list[Any] | None:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        request_headers = {"Accept": "application/json", "Content-Type": "application/json"}
        if headers:
            request_headers.update(headers)

        normalized_method = method.upper()
        url = self._build_url(path)
        started = time.monotonic()
        try:
            response = self.session.request(
                method=normalized_method,
                url=url,
                headers=request_headers,
                json=json_body,
                params=params,
                timeout=(self.config.connect_timeout_seconds, self.config.read_timeout_seconds),
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            self._record_operation(module, operation, started, "transport_error", None)
            raise TransportError(
                code="TRANSPORT_ERROR",
                message=str(exc) or "Failed to connect to the server.",
                details={"type": type(exc).__name__},
                status_code=0,
                raw_payload=None,
            ) from exc

        if response.ok:
            self._record_operation(module, operation, started, "success", response.status_code)
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                raise EnvelopeError(
                    code="INVALID_JSON",
                    message="Invalid response format from server",
                    details=response.text[:200],
                    status_code=response.status_code,
                ) from exc

        payload: Any
        try:
            payload = response.json()
        except json.JSONDecodeError:
            payload = {"message": response.text or response.reason}
        self._record_operation(module, operation, started, "error", response.status_code)
        raise map_error(response.status_code, payload if isinstance(payload, dict) else {"detail": payload})

    def _record_operation(
        self,
        module: str,
        operation: str,
        started: float,
        result: str,
        status_code: int | None,
    ) -> None:
        self.last_operation = LastOperation(
            module=module,
            operation=operation,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
            status_code=status_code,
        )
        logger.info(
            "api_call",
            extra={
                "api_module": module,
                "operation": operation,
                "result": result,
                "status_code": status_code,
                "duration_ms": self.last_operation.duration_ms,
            },
        )


def unwrap_result(payload: Any, *, operation: str = "unknown") -> Any:
    if not isinstance(payload, dict) or "result" not in payload:
        raise EnvelopeError(
            code="INVALID_ENVELOPE",
            message="Invalid response format from server",
            details={"operation": operation},
            status_code=200,
            raw_payload=payload,
        )
    return payload["result"]


def result_list(payload: Any, *, operation: str = "unknown") -> list[Any]:
    result = unwrap_result(payload, operation=operation)
    if result is None:
        return []
    if isinstance(result, list):
        return result
    return [result]


def envelope_ok(payload: Any) -> bool:
    """True when the envelope carries code 200 (or omits it) and a non-empty result."""
    if not isinstance(payload, dict):
        return False
    code = payload.get("code")
    if code is not None and str(code) != "200":
        return False
    result = payload.get("result")
    return bool(result)
