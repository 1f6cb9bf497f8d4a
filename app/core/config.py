"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    BUG_REPORTS_PATH      — JSON file of bug reports (default: bug_reports.json)
    LOAD_TIMEOUT_SECONDS  — Max seconds a reload may take (default: 5.0)
    LOG_DIR               — Directory for the daily log file (default: logs)
    DASHBOARD_APPS        — Comma-separated filter tabs shown after "All"
                            (default: Messages,Safari,FaceTime,Mail)

Reload Timeout:
    A reload that exceeds LOAD_TIMEOUT_SECONDS is discarded and the
    previously loaded bugs stay on screen.
"""
import os
from dotenv import load_dotenv

load_dotenv()

BUG_REPORTS_PATH = os.getenv("BUG_REPORTS_PATH", "bug_reports.json")
LOAD_TIMEOUT_SECONDS = float(os.getenv("LOAD_TIMEOUT_SECONDS", 5.0))
LOG_DIR = os.getenv("LOG_DIR", "logs")

DASHBOARD_APPS: list[str] = [
    app.strip()
    for app in os.getenv("DASHBOARD_APPS", "Messages,Safari,FaceTime,Mail").split(",")
    if app.strip()
]
