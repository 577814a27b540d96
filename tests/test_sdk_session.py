from __future__ import annotations

import os
import stat
from pathlib import Path

from pawnshop_sdk import ApiSession, AuthStore, ClientConfig, HttpClient
from pawnshop_sdk.models import SessionData


def test_auth_store_round_trip_is_private(tmp_path: Path) -> None:
    store = AuthStore(base_dir=tmp_path)
    store.save(SessionData(access_token="tok", phone_number="012", env_name="test"))

    loaded = store.load()
    assert loaded is not None
    assert loaded.access_token == "tok"
    if os.name == "posix":
        mode = stat.S_IMODE((tmp_path / "session.json").stat().st_mode)
        assert mode == 0o600

    store.clear()
    assert store.load() is None


def test_corrupt_session_file_is_discarded(tmp_path: Path) -> None:
    (tmp_path / "session.json").write_text("{not json", encoding="utf-8")
    store = AuthStore(base_dir=tmp_path)

    assert store.load() is None
    assert not (tmp_path / "session.json").exists()


def test_session_restores_stored_token(config: ClientConfig, auth_store: AuthStore, http: HttpClient) -> None:
    auth_store.save(SessionData(access_token="stored", phone_number="099"))

    session = ApiSession(config, auth_store=auth_store, http=http)

    assert session.is_authenticated
    assert session.token == "stored"
    assert session.products_client().access_token == "stored"
    assert session.products_client().prefix == "/staff"
    assert session.auth_client().prefix == ""


def test_establish_and_clear(config: ClientConfig, auth_store: AuthStore, http: HttpClient) -> None:
    session = ApiSession(config, auth_store=auth_store, http=http)
    assert not session.is_authenticated

    session.establish("fresh", phone_number="012")
    assert auth_store.load() == SessionData(access_token="fresh", phone_number="012", env_name="test")

    session.clear()
    assert not session.is_authenticated
    assert auth_store.load() is None
