from __future__ import annotations

from pathlib import Path

import pytest

from pawnshop_sdk import ApiSession, AuthStore, ClientConfig, HttpClient

BASE_URL = "http://api.test"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PAWNSHOP_ENV",
        "PAWNSHOP_API_BASE_URL",
        "PAWNSHOP_API_BASE_URL_DEV",
        "PAWNSHOP_STAFF_PREFIX",
        "PAWNSHOP_CONNECT_TIMEOUT_SECONDS",
        "PAWNSHOP_READ_TIMEOUT_SECONDS",
        "PAWNSHOP_VERIFY_SSL",
        "PAWNSHOP_MAX_CONNECTIONS",
        "PAWNSHOP_SHOP_NAME",
        "PAWNSHOP_SHOP_PHONE",
        "PAWNSHOP_SHOP_ADDRESS",
        "PAWNSHOP_LOGO_URL",
        "PAWNSHOP_INVOICE_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(env_name="test", api_base_url=BASE_URL)


@pytest.fixture
def http(config: ClientConfig) -> HttpClient:
    return HttpClient(config)


@pytest.fixture
def auth_store(tmp_path: Path) -> AuthStore:
    return AuthStore(base_dir=tmp_path / "auth")


@pytest.fixture
def session(config: ClientConfig, auth_store: AuthStore, http: HttpClient) -> ApiSession:
    return ApiSession(config, auth_store=auth_store, http=http, token="token-123", phone_number="012345678")
