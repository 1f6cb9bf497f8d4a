"""
Dashboard Renderer
==================
Builds the single-page triage dashboard as one HTML string.

Layout (top to bottom):
    - title
    - app filter tabs ("All" + apps), the selected tab fully opaque
    - bar chart of bug counts by type for the selected app
    - list of bugs for the selected app: title, severity, assigned team

When no bugs are loaded the chart and list are replaced by EMPTY_MESSAGE.
All user-supplied text goes through html.escape.
"""
import html
from typing import List, Optional, Sequence
from urllib.parse import quote

from app.core.constants import (
    DASHBOARD_TITLE,
    DEFAULT_TYPE_COLOR,
    EMPTY_MESSAGE,
    TYPE_COLORS,
)
from app.models.bug_record import BugRecord, TypeCount
from app.services.bug_query import assign_team, counts_by_type, filter_by_app

_CHART_HEIGHT_PX = 200


def type_color(bug_type: str) -> str:
    return TYPE_COLORS.get(bug_type, DEFAULT_TYPE_COLOR)


def _render_tabs(apps: Sequence[str], selected: str) -> str:
    return "".join(
        f'<a class="tab{" active" if app == selected else ""}" href="/?app={quote(app)}">{html.escape(app)}</a>'
        for app in apps
    )


def _render_chart(counts: List[TypeCount]) -> str:
    if not counts:
        return '<p class="muted">No bugs for this app</p>'
    peak = max(c.count for c in counts)
    bars = []
    for c in counts:
        height = round(_CHART_HEIGHT_PX * c.count / peak)
        bars.append(
            f'<div class="bar-col" data-type="{html.escape(c.type)}">'
            f'<div class="bar-count">{c.count}</div>'
            f'<div class="bar" style="height: {height}px; background: {type_color(c.type)}"></div>'
            f'<div class="bar-label">{html.escape(c.type)}</div>'
            f'</div>'
        )
    return f'<div class="chart">{"".join(bars)}</div>'


def _render_list(bugs: List[BugRecord]) -> str:
    rows = "".join(
        f'<li data-id="{bug.id}">'
        f'<div><div class="bug-title">{html.escape(bug.title)}</div>'
        f'<div class="muted">Severity: {html.escape(bug.severity)}</div></div>'
        f'<div class="team">{html.escape(assign_team(bug))}</div>'
        f'</li>'
        for bug in bugs
    )
    return f'<ul class="bug-list">{rows}</ul>'


def render_dashboard(
    records: Sequence[BugRecord],
    selected: str,
    apps: Sequence[str],
    error: Optional[str] = None,
) -> str:
    if records:
        body = _render_chart(counts_by_type(records, selected)) + _render_list(filter_by_app(records, selected))
    else:
        body = f'<p class="empty muted">{EMPTY_MESSAGE}</p>'

    banner = f'<p class="error">{html.escape(error)}</p>' if error else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Triage Dashboard</title>
  <style>
    body {{ font-family: system-ui, sans-serif; margin: 0 auto; max-width: 720px; padding: 1rem; }}
    h1 {{ text-align: center; }}
    .muted {{ color: #6f6e77; }}
    .error {{ color: #e5484d; }}
    .tabs {{ display: flex; gap: 10px; overflow-x: auto; padding: 0 1rem; }}
    .tab {{ padding: 8px 16px; border-radius: 12px; background: #f1f0f4; color: inherit; text-decoration: none; opacity: 0.5; }}
    .tab.active {{ opacity: 1; }}
    .chart {{ display: flex; align-items: flex-end; gap: 1rem; height: {_CHART_HEIGHT_PX + 40}px; padding: 1rem; }}
    .bar-col {{ flex: 1; text-align: center; }}
    .bar {{ border-radius: 4px 4px 0 0; }}
    .bug-list {{ list-style: none; padding: 0; border-radius: 16px; background: #f8f8fa; }}
    .bug-list li {{ display: flex; justify-content: space-between; padding: 0.75rem 1rem; border-bottom: 1px solid #e9e8ee; }}
    .bug-title {{ font-weight: 600; }}
    .team {{ color: #3e63dd; }}
  </style>
</head>
<body>
  <h1>{DASHBOARD_TITLE}</h1>
  <nav class="tabs">{_render_tabs(apps, selected)}</nav>
  {banner}
  {body}
</body>
</html>
"""
