"""
Bug Query
=========
Pure transformations over an already-loaded collection of BugRecord.

    counts_by_type  — (type, count) pairs for one app or all, sorted by type
    filter_by_app   — records for one app, original order kept
    assign_team     — static app → team lookup with a fallback team
    list_apps       — labels for the dashboard filter tabs

The show-all sentinel is ALL_APPS ("All"). Use normalize_app_filter on any
user-supplied value before calling into this module.
"""
from collections import Counter
from typing import Iterable, List, Optional, Sequence

from app.core.constants import ALL_APPS, DEFAULT_TEAM, TEAM_BY_APP
from app.models.bug_record import BugRecord, TypeCount


def normalize_app_filter(app: Optional[str]) -> str:
    if app is None or not app.strip():
        return ALL_APPS
    return app


def filter_by_app(records: Sequence[BugRecord], app: str) -> List[BugRecord]:
    if app == ALL_APPS:
        return list(records)
    return [bug for bug in records if bug.app == app]


def counts_by_type(records: Sequence[BugRecord], app_filter: str = ALL_APPS) -> List[TypeCount]:
    counts = Counter(bug.type for bug in filter_by_app(records, app_filter))
    return [TypeCount(type=bug_type, count=counts[bug_type]) for bug_type in sorted(counts)]


def assign_team(record: BugRecord) -> str:
    return TEAM_BY_APP.get(record.app, DEFAULT_TEAM)


def list_apps(records: Iterable[BugRecord], defaults: Sequence[str]) -> List[str]:
    """"All", then the configured apps, then any other apps seen in the data."""
    tabs = [ALL_APPS]
    for app in defaults:
        if app not in tabs:
            tabs.append(app)
    extra = sorted({bug.app for bug in records} - set(tabs))
    return tabs + extra
