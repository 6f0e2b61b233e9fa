from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

from dotenv import load_dotenv

DEFAULT_SESSION_APP_NAME = "scanback-admin"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    env_name: str
    api_base_url: str
    timeout_seconds: float | None = None
    verify_ssl: bool = True
    session_app_name: str = DEFAULT_SESSION_APP_NAME
    log_level: str = "INFO"

    @property
    def normalized_env(self) -> str:
        return self.env_name.lower().strip()


def _require(values: dict[str, str | None], required: Iterable[str]) -> None:
    missing = [key for key in required if not values.get(key)]
    if missing:
        raise ConfigError(f"Missing required config values: {', '.join(missing)}")


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override."""
    load_dotenv(env_file)

    env_name = (os.getenv("SCANBACK_ENV") or "dev").strip()
    env_key = env_name.upper()

    api_base_url = (
        (os.getenv(f"SCANBACK_API_BASE_URL_{env_key}") or "").strip()
        or (os.getenv("SCANBACK_API_BASE_URL") or "").strip()
    )

    # unset means the transport default (no timeout)
    timeout_seconds = _read_optional_float("SCANBACK_TIMEOUT_SECONDS")
    if timeout_seconds is not None:
        _validate(
            timeout_seconds > 0,
            f"Invalid SCANBACK_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}",
        )

    verify_ssl = _coerce_bool(os.getenv("SCANBACK_VERIFY_SSL"), True)
    session_app_name = (os.getenv("SCANBACK_SESSION_APP_NAME") or DEFAULT_SESSION_APP_NAME).strip()
    log_level = (os.getenv("SCANBACK_LOG_LEVEL") or "INFO").strip().upper()
    _validate(
        log_level in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
        f"Invalid SCANBACK_LOG_LEVEL: got {log_level!r}",
    )

    values = {"SCANBACK_API_BASE_URL": api_base_url}
    _require(values, ["SCANBACK_API_BASE_URL"])

    return ClientConfig(
        env_name=env_name,
        api_base_url=api_base_url.rstrip("/"),
        timeout_seconds=timeout_seconds,
        verify_ssl=verify_ssl,
        session_app_name=session_app_name,
        log_level=log_level,
    )
