"""
Bug Loader
==========
Reads the bug reports file and decodes it into BugRecord objects.

Contract:
    - One attempt per call, no retries
    - All records or none: any failure raises before a list is returned
    - Order of the returned list matches the order of the JSON array

Failure mapping:
    missing / directory / unreadable  → BugFileNotFoundError
    bad UTF-8, bad JSON, bad schema   → BugDecodeError
    duplicate ids                     → BugDecodeError
"""
import asyncio
import json
import logging
from typing import List, Sequence

from pydantic import TypeAdapter, ValidationError

from app.core.exceptions import BugDecodeError, BugFileNotFoundError
from app.models.bug_record import BugRecord

logger = logging.getLogger(__name__)

_BUG_LIST = TypeAdapter(List[BugRecord])


def _read_text(path: str) -> str:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as exc:
        raise BugDecodeError(path, "Bug file is not valid UTF-8") from exc
    except OSError as exc:
        raise BugFileNotFoundError(path, "Bug file not readable") from exc


def decode_bugs(raw: str, path: str = "<memory>") -> List[BugRecord]:
    """Decode a JSON array of bug objects. ``path`` is only used in errors."""
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise BugDecodeError(path, f"Malformed JSON at line {exc.lineno} column {exc.colno}") from exc
    except RecursionError as exc:
        raise BugDecodeError(path, "Malformed JSON (nesting too deep)") from exc

    try:
        bugs = _BUG_LIST.validate_python(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise BugDecodeError(path, f"Schema mismatch at {location or 'root'} ({first['msg']})") from exc
    except RecursionError as exc:
        raise BugDecodeError(path, "Schema mismatch (nesting too deep)") from exc

    seen = set()
    for bug in bugs:
        if bug.id in seen:
            raise BugDecodeError(path, f"Duplicate bug id {bug.id}")
        seen.add(bug.id)

    return bugs


def load_bugs(path: str) -> List[BugRecord]:
    logger.info("Fetching bugs from JSON at %s...", path)
    bugs = decode_bugs(_read_text(path), path)
    logger.info("Fetched %d bugs from JSON", len(bugs))
    return bugs


async def load_bugs_async(path: str) -> List[BugRecord]:
    """Run load_bugs in a worker thread so the event loop stays free."""
    return await asyncio.to_thread(load_bugs, path)


def dump_bugs(records: Sequence[BugRecord]) -> str:
    """Encode records in the same shape load_bugs accepts."""
    return json.dumps([r.model_dump() for r in records], indent=2, ensure_ascii=False)
