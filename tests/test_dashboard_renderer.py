"""
Unit Tests — Dashboard Renderer
===============================
HTML structure of the triage page: tabs, chart bars, list rows, empty state.
"""
import re

from app.core.constants import DEFAULT_TYPE_COLOR, TYPE_COLORS
from app.models.bug_record import BugRecord
from app.services.dashboard_renderer import render_dashboard, type_color

TABS = ["All", "Messages", "Safari", "FaceTime", "Mail"]


def test_empty_state():
    html = render_dashboard([], "All", TABS)
    assert "No bugs available" in html
    assert 'class="chart"' not in html
    assert 'class="bug-list"' not in html


def test_selected_tab_is_active():
    html = render_dashboard([], "Safari", TABS)
    assert '<a class="tab active" href="/?app=Safari">Safari</a>' in html
    assert '<a class="tab" href="/?app=All">All</a>' in html


def test_one_bar_per_type_in_sorted_order(sample_bugs):
    html = render_dashboard(sample_bugs, "All", TABS)
    assert re.findall(r'data-type="([^"]+)"', html) == ["crash", "performance", "ui"]


def test_tallest_bar_is_full_height(sample_bugs):
    html = render_dashboard(sample_bugs, "All", TABS)
    heights = [int(h) for h in re.findall(r"height: (\d+)px; background", html)]
    assert heights == [200, 100, 200]


def test_bar_colours():
    assert type_color("crash") == TYPE_COLORS["crash"]
    assert type_color("ui") == TYPE_COLORS["ui"]
    assert type_color("performance") == TYPE_COLORS["performance"]
    assert type_color("localization") == DEFAULT_TYPE_COLOR


def test_list_rows_follow_filter(sample_bugs):
    html = render_dashboard(sample_bugs, "Messages", TABS)
    assert re.findall(r'<li data-id="(\d+)">', html) == ["1", "3"]
    assert "Severity: critical" in html
    assert "Messages Team" in html


def test_selected_app_without_bugs_still_lists_nothing(sample_bugs):
    html = render_dashboard(sample_bugs, "FaceTime", TABS)
    assert "No bugs for this app" in html
    assert re.findall(r'<li data-id="(\d+)">', html) == []


def test_text_is_escaped():
    bug = BugRecord(id=1, type="ui", app="Mail", severity="<b>low</b>", title="<script>alert(1)</script>")
    html = render_dashboard([bug], "All", TABS)
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
    assert "&lt;b&gt;low&lt;/b&gt;" in html


def test_error_banner():
    html = render_dashboard([], "All", TABS, error="Bug file not readable: x.json")
    assert '<p class="error">Bug file not readable: x.json</p>' in html
