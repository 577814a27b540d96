from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from ..http_client import HttpClient, unwrap_result
from ..models import NextId


@dataclass
class BaseClient:
    http: HttpClient
    access_token: str | None = None
    prefix: str = ""
    module: str = "base"

    def _auth_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _path(self, path: str) -> str:
        return f"{self.prefix}{path}"

    def _request(self, method: str, path: str, **kwargs: Any):
        headers = kwargs.pop("headers", {})
        merged = {**self._auth_headers(), **headers}
        kwargs.setdefault("module", self.module)
        return self.http.request(method, self._path(path), headers=merged, **kwargs)

    def _next_id(self, path: str, operation: str) -> NextId:
        payload = self._request("GET", path, operation=operation)
        return NextId.model_validate(unwrap_result(payload, operation=operation))


def path_segment(value: Any) -> str:
    return quote(str(value).strip(), safe="")
