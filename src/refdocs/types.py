"""Shared Pydantic models for refdocs."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

# ── Enums ──


class ErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    TRANSIENT_IO = "transient_io"
    CANCELLED = "cancelled"


# ── Config models ──


class DocumentSpec(BaseModel):
    """Per-document configuration: where to read it and what to serve if we can't."""

    name: str
    tool_name: str = ""
    description: str = ""
    source_key: str
    fallback: str

    @property
    def resolved_tool_name(self) -> str:
        return self.tool_name or f"get_{self.name}_best_practices"


# ── Runtime models ──


class CachedDocument(BaseModel):
    """Immutable snapshot of one successfully loaded document."""

    model_config = ConfigDict(frozen=True)

    content: str
    source_version: Any
    expires_at: float

    def is_valid(self, now: float, current_version: Any) -> bool:
        return now < self.expires_at and current_version == self.source_version


class DocumentInfo(BaseModel):
    name: str
    tool_name: str
    description: str
    source_key: str
    builtin: bool
    cached: bool = False
