"""
Bug Record Model
================
Pydantic model for one entry of the bug reports JSON file.

Fields:
    id          — unique integer identifier within a loaded batch
    type        — free-text category (crash, ui, performance, ...)
    app         — product name (Messages, Safari, ...)
    severity    — free-text rank label (critical, medium, low)
    title       — one-line summary
    resolution  — free text, None while the bug is unresolved

Records are frozen: the loader builds them once and the store replaces the
whole collection on reload.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr


class BugRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Strict: "1" or true is not an id, 3 is not a title.
    id: StrictInt
    type: StrictStr
    app: StrictStr
    severity: StrictStr
    title: StrictStr
    resolution: Optional[StrictStr] = None


class TypeCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    count: int
