from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

ROOT_LOGGER_NAME = "scanback_admin_sdk"
_REDACTED_KEYS = {"token", "password", "authorization"}


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        root.setLevel(logging.INFO)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    return logging.getLogger(name)


def configure_logging(level: str | int) -> None:
    get_logger(ROOT_LOGGER_NAME).setLevel(level)


def log_action(
    logger: logging.Logger,
    module: str,
    action: str,
    outcome: str,
    level: int = logging.INFO,
    **fields: object,
) -> None:
    payload: dict[str, object] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": logging.getLevelName(level),
        "module": module,
        "action": action,
        "outcome": outcome,
    }
    for key, value in fields.items():
        if key.lower() in _REDACTED_KEYS:
            continue
        payload[key] = value
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))
