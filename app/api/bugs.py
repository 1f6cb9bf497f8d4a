"""
Bug API
=======
JSON views over the loaded bugs, all scoped by the same ``app`` filter the
dashboard tabs use. An empty or missing ``app`` means "All".

Routes:
    GET  /api/apps           — filter tab labels
    GET  /api/bugs           — filtered bug list with assigned team
    GET  /api/bugs/counts    — per-type counts, sorted by type
    POST /api/bugs/reload    — re-read the bug file
"""
import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from app.api.deps import get_bug_store
from app.core.config import DASHBOARD_APPS
from app.core.exceptions import BugDecodeError, BugFileNotFoundError
from app.models.bug_record import BugRecord, TypeCount
from app.services.bug_query import (
    assign_team,
    counts_by_type,
    filter_by_app,
    list_apps,
    normalize_app_filter,
)
from app.state.bug_store import BugStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Bugs"])


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class BugView(BugRecord):
    team: str


class ReloadResponse(BaseModel):
    path: str
    bug_count: int


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------
@router.get("/apps", response_model=List[str])
async def get_apps(store: BugStore = Depends(get_bug_store)):
    return list_apps(store.records, DASHBOARD_APPS)


@router.get("/bugs", response_model=List[BugView])
async def get_bugs(
    app: Optional[str] = Query(None),
    store: BugStore = Depends(get_bug_store),
):
    selected = normalize_app_filter(app)
    return [
        BugView(**bug.model_dump(), team=assign_team(bug))
        for bug in filter_by_app(store.records, selected)
    ]


@router.get("/bugs/counts", response_model=List[TypeCount])
async def get_bug_counts(
    app: Optional[str] = Query(None),
    store: BugStore = Depends(get_bug_store),
):
    selected = normalize_app_filter(app)
    counts = counts_by_type(store.records, selected)
    logger.debug("Bug counts for %s: %s", selected, [(c.type, c.count) for c in counts])
    return counts


@router.post("/bugs/reload", response_model=ReloadResponse)
async def reload_bugs(store: BugStore = Depends(get_bug_store)):
    try:
        records = await store.reload()
    except BugFileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except BugDecodeError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except asyncio.TimeoutError:
        raise HTTPException(status_code=504, detail=store.last_error)

    return ReloadResponse(path=store.path, bug_count=len(records))
