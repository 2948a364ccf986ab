"""
models.py

value types shared by the store: the json value union, the on-disk document
adapter, load state and the outcome of a write.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, JsonValue, TypeAdapter


# the file holds exactly one json object: str keys, any json value.
# nan and infinities are not json and could never be written back.
ConfigDocument: TypeAdapter[dict[str, JsonValue]] = TypeAdapter(
    dict[str, JsonValue],
    config=ConfigDict(allow_inf_nan=False),
)


class StoreState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    FAILED = "failed"


class PersistResult(BaseModel):
    ok: bool
    path: str = Field(..., description="absolute path of the backing file")
    error: str | None = Field(None, description="why the write failed, None on success")

    def __bool__(self) -> bool:
        return self.ok
