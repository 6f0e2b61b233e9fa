from __future__ import annotations

import json
from pathlib import Path

from scanback_admin_sdk.auth_store import TOKEN_KEY, SessionStore


def test_store_starts_empty(store: SessionStore) -> None:
    assert store.get() is None


def test_set_persists_token_under_fixed_key(store: SessionStore, tmp_path: Path) -> None:
    store.set("token-1")

    assert store.get() == "token-1"
    assert json.loads((tmp_path / "session.json").read_text()) == {TOKEN_KEY: "token-1"}


def test_token_survives_reload(store: SessionStore, tmp_path: Path) -> None:
    store.set("token-1")

    reloaded = SessionStore(path=tmp_path / "session.json")

    assert reloaded.get() == "token-1"


def test_clear_removes_durable_copy(store: SessionStore, tmp_path: Path) -> None:
    store.set("token-1")
    store.clear()

    assert store.get() is None
    assert not (tmp_path / "session.json").exists()
    assert SessionStore(path=tmp_path / "session.json").get() is None


def test_store_handles_corruption(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_text("{not-json")
    store = SessionStore(path=path)

    assert store.get() is None
    assert not path.exists()


def test_store_handles_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    store = SessionStore(path=path)

    assert store.get() is None
    assert not path.exists()


def test_reads_do_not_create_data_directory(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "session.json"
    store = SessionStore(path=path)

    assert store.get() is None
    store.clear()
    assert not path.parent.exists()

    store.set("token-1")
    assert path.exists()


def test_store_ignores_payload_without_token(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"other": "value"}))

    assert SessionStore(path=path).get() is None
    assert not path.exists()
