from __future__ import annotations

import os


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


DEFAULT_FILE_NAME = "AppConfig.json"

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FILE_PATH = os.environ.get("LOG_FILE_PATH")
LOG_MAX_BYTES = env_int("LOG_MAX_BYTES", 2_000_000)
LOG_BACKUP_COUNT = env_int("LOG_BACKUP_COUNT", 2)
