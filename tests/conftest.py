import json
import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from app.models.bug_record import BugRecord


SAMPLE_BUGS = [
    {"id": 1, "type": "crash", "app": "Messages", "severity": "critical", "title": "Null pointer on send"},
    {"id": 2, "type": "crash", "app": "Safari", "severity": "critical", "title": "Tab crash on reload",
     "resolution": "Fixed in 18.1"},
    {"id": 3, "type": "ui", "app": "Messages", "severity": "low", "title": "Bubble misaligned", "resolution": None},
    {"id": 4, "type": "performance", "app": "Mail", "severity": "medium", "title": "Slow inbox sync"},
    {"id": 5, "type": "ui", "app": "Notes", "severity": "low", "title": "Toolbar clipped"},
]


@pytest.fixture
def sample_bugs():
    return [BugRecord(**b) for b in SAMPLE_BUGS]


@pytest.fixture
def bug_file(tmp_path):
    path = tmp_path / "bug_reports.json"
    path.write_text(json.dumps(SAMPLE_BUGS), encoding="utf-8")
    return path


@pytest.fixture
def client(bug_file):
    with patch("main.BUG_REPORTS_PATH", str(bug_file)):
        from main import app
        with TestClient(app) as c:
            yield c
