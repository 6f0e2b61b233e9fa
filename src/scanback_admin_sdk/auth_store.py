from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_data_dir

from .config import DEFAULT_SESSION_APP_NAME

TOKEN_KEY = "admin_token"


@dataclass
class SessionStore:
    """Single owner of the bearer credential.

    ``set`` and ``clear`` write the backing file before returning, so the
    in-memory token and durable storage never disagree.
    """

    app_name: str = DEFAULT_SESSION_APP_NAME
    filename: str = "session.json"
    path: Path | None = None
    _token: str | None = field(default=None, init=False, repr=False)
    _loaded: bool = field(default=False, init=False, repr=False)

    def _path(self) -> Path:
        if self.path is not None:
            return self.path
        return Path(user_data_dir(self.app_name, "ScanBack")) / self.filename

    def get(self) -> str | None:
        if not self._loaded:
            self._token = self._load()
            self._loaded = True
        return self._token

    def set(self, token: str) -> None:
        if not token:
            raise ValueError("token must be a non-empty string")
        path = self._path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({TOKEN_KEY: token}, indent=2))
        try:
            path.chmod(0o600)
        except OSError:
            pass
        self._token = token
        self._loaded = True

    def clear(self) -> None:
        path = self._path()
        if path.exists():
            path.unlink()
        self._token = None
        self._loaded = True

    def _load(self) -> str | None:
        path = self._path()
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text())
        except (json.JSONDecodeError, UnicodeDecodeError, OSError):
            self.clear()
            return None
        token = data.get(TOKEN_KEY) if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            self.clear()
            return None
        return token
