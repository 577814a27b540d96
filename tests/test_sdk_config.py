from __future__ import annotations

from pathlib import Path

import pytest

from pawnshop_sdk.config import ConfigError, load_config


def test_defaults_point_at_local_backend() -> None:
    cfg = load_config()
    assert cfg.env_name == "dev"
    assert cfg.api_base_url == "http://127.0.0.1:8000"
    assert cfg.staff_prefix == "/staff"
    assert cfg.connect_timeout_seconds == 5.0
    assert cfg.read_timeout_seconds == 15.0
    assert cfg.max_connections == 10
    assert cfg.verify_ssl is True


def test_env_specific_base_url_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAWNSHOP_ENV", "prod")
    monkeypatch.setenv("PAWNSHOP_API_BASE_URL", "http://fallback.example.com")
    monkeypatch.setenv("PAWNSHOP_API_BASE_URL_PROD", "https://shop.example.com/")
    cfg = load_config()
    assert cfg.api_base_url == "https://shop.example.com"
    assert cfg.normalized_env == "prod"


def test_prefix_and_ssl_are_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAWNSHOP_STAFF_PREFIX", "staff/")
    monkeypatch.setenv("PAWNSHOP_VERIFY_SSL", "false")
    cfg = load_config()
    assert cfg.staff_prefix == "/staff"
    assert cfg.verify_ssl is False


def test_env_file_is_loaded(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("PAWNSHOP_API_BASE_URL=http://10.0.0.5:8000\nPAWNSHOP_READ_TIMEOUT_SECONDS=30\n")
    # register both names so teardown removes what load_dotenv writes
    for name in ("PAWNSHOP_API_BASE_URL", "PAWNSHOP_READ_TIMEOUT_SECONDS"):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    cfg = load_config(str(env_file))
    assert cfg.api_base_url == "http://10.0.0.5:8000"
    assert cfg.read_timeout_seconds == 30.0


@pytest.mark.parametrize(
    ("name", "value", "fragment"),
    [
        ("PAWNSHOP_API_BASE_URL", "ftp://nope", "PAWNSHOP_API_BASE_URL"),
        ("PAWNSHOP_CONNECT_TIMEOUT_SECONDS", "0", "PAWNSHOP_CONNECT_TIMEOUT_SECONDS"),
        ("PAWNSHOP_READ_TIMEOUT_SECONDS", "abc", "PAWNSHOP_READ_TIMEOUT_SECONDS"),
        ("PAWNSHOP_MAX_CONNECTIONS", "0", "PAWNSHOP_MAX_CONNECTIONS"),
    ],
)
def test_invalid_values_raise_config_error(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str, fragment: str
) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError, match=fragment):
        load_config()
