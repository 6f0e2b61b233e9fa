from __future__ import annotations

import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
SDK_SRC = BASE_DIR / "src"

sys.path.insert(0, str(SDK_SRC))

from scanback_admin_sdk.auth_store import SessionStore  # noqa: E402
from scanback_admin_sdk.config import ClientConfig  # noqa: E402
from scanback_admin_sdk.http_client import HttpClient  # noqa: E402

BASE_URL = "https://api.example.com"


@pytest.fixture
def store(tmp_path: Path) -> SessionStore:
    return SessionStore(path=tmp_path / "session.json")


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(env_name="test", api_base_url=BASE_URL)


@pytest.fixture
def http(config: ClientConfig, store: SessionStore) -> HttpClient:
    return HttpClient(config=config, store=store)
