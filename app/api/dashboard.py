"""
GET /
Renders the triage dashboard for the selected app tab.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from app.api.deps import get_bug_store
from app.core.config import DASHBOARD_APPS
from app.services.bug_query import list_apps, normalize_app_filter
from app.services.dashboard_renderer import render_dashboard
from app.state.bug_store import BugStore

router = APIRouter(tags=["Dashboard"])


@router.get("/", response_class=HTMLResponse)
async def dashboard(
    app: Optional[str] = Query(None),
    store: BugStore = Depends(get_bug_store),
):
    records = store.records
    return render_dashboard(
        records,
        normalize_app_filter(app),
        list_apps(records, DASHBOARD_APPS),
        error=store.last_error,
    )
