"""
config_store.py

key-value settings persisted as a single json object file.

the file is loaded lazily on first access and rewritten in full after every
mutation. disk failures never raise out of the public api: reads fall back to
an empty mapping, writes report through PersistResult and the dirty flag.
"""

from __future__ import annotations

import contextlib
import json
import logging
import math
import os
from pathlib import Path
from typing import Any, TypeVar

from pydantic import JsonValue, ValidationError

from .models import ConfigDocument, PersistResult, StoreState
from .path_utils import config_file_path, files_dir_of
from .settings import DEFAULT_FILE_NAME

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid json")


def _finite_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {raw}")
    return value


def _parse_document(text: str) -> dict[str, JsonValue]:
    if not text.strip():
        return {}
    parsed = json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    return ConfigDocument.validate_python(parsed)


def _describe(exc: ValueError) -> str:
    if isinstance(exc, ValidationError):
        return exc.errors()[0]["msg"]
    return str(exc)


def _write_document(path: Path, data: dict[str, Any], atomic: bool = False) -> None:
    # serialize first so a bad value never truncates the file
    text = json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
    if not atomic:
        path.write_text(text, encoding="utf-8")
        return

    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(text, encoding="utf-8")
        tmp.replace(path)
    except OSError:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise


class ConfigStore:
    """
    json file backed settings store.

    base_dir must already exist; the store never creates directories.
    a stored None is indistinguishable from a missing key for get(), use
    has() to tell them apart.
    """

    def __init__(
        self,
        base_dir: str | os.PathLike[str],
        file_name: str = DEFAULT_FILE_NAME,
        *,
        atomic: bool = False,
    ) -> None:
        self._path = config_file_path(base_dir, file_name)
        self._atomic = atomic
        self._data: dict[str, Any] = {}
        self._state = StoreState.UNINITIALIZED
        self._last_error: str | None = None
        self._dirty = False

    @classmethod
    def from_context(cls, context: Any, file_name: str = DEFAULT_FILE_NAME, *, atomic: bool = False) -> ConfigStore:
        return cls(files_dir_of(context), file_name, atomic=atomic)

    def __repr__(self) -> str:
        return f"ConfigStore({str(self._path)!r}, state={self._state.value})"

    @property
    def file_path(self) -> Path:
        return self._path

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def dirty(self) -> bool:
        return self._dirty

    def _ensure_loaded(self) -> None:
        if self._state is StoreState.READY:
            return
        if self._state is StoreState.FAILED and self._dirty:
            # reloading now would throw away writes that never reached disk
            return

        try:
            exists = self._path.exists()
        except OSError as exc:
            logger.error("cannot stat config file %s: %s", self._path, exc)
            self._fail(f"cannot stat {self._path}: {exc}")
            return

        if not exists:
            logger.info("creating config file %s", self._path)
            self._data = {}
            self._persist()
            self._state = StoreState.READY
            return

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("failed to read config file %s: %s", self._path, exc)
            self._fail(f"read failed: {exc}")
            return

        try:
            self._data = _parse_document(text)
        except ValueError as exc:
            # covers json syntax errors and ValidationError for non-object content
            reason = _describe(exc)
            logger.warning("config file %s has invalid content (%s), using empty config", self._path, reason)
            self._fail(f"invalid content: {reason}")
            return

        logger.debug("loaded %d keys from %s", len(self._data), self._path)
        self._state = StoreState.READY
        self._last_error = None

    def _fail(self, reason: str) -> None:
        self._data = {}
        self._state = StoreState.FAILED
        self._last_error = reason

    def _persist(self) -> PersistResult:
        try:
            _write_document(self._path, self._data, atomic=self._atomic)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("failed to write config file %s: %s", self._path, exc)
            self._dirty = True
            self._last_error = f"write failed: {exc}"
            return PersistResult(ok=False, path=str(self._path), error=str(exc))

        self._dirty = False
        self._state = StoreState.READY
        self._last_error = None
        return PersistResult(ok=True, path=str(self._path))

    def get(self, key: str, default: T = None) -> Any | T:
        self._ensure_loaded()
        value = self._data.get(key)
        return default if value is None else value

    def set(self, key: str, value: Any) -> PersistResult:
        self._ensure_loaded()
        self._data[key] = value
        return self._persist()

    def remove(self, key: str) -> PersistResult:
        self._ensure_loaded()
        self._data.pop(key, None)
        return self._persist()

    def has(self, key: str) -> bool:
        self._ensure_loaded()
        return key in self._data

    def clear(self) -> PersistResult:
        self._ensure_loaded()
        self._data = {}
        return self._persist()

    def get_all(self) -> dict[str, Any]:
        self._ensure_loaded()
        return dict(self._data)
