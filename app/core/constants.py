"""
Constants
Centralised storage for the app filter sentinel, team routing and chart colours.
"""

# The one "show everything" filter value. Empty strings are normalised to this
# at the HTTP boundary; the query layer only ever compares against ALL_APPS.
ALL_APPS = "All"

TEAM_BY_APP: dict[str, str] = {
    "Messages": "Messages Team",
    "Safari": "Safari Team",
    "FaceTime": "FaceTime Team",
    "Mail": "Mail Team",
}
DEFAULT_TEAM = "General Team"

TYPE_COLORS: dict[str, str] = {
    "crash": "#e5484d",
    "ui": "#3e63dd",
    "performance": "#30a46c",
}
DEFAULT_TYPE_COLOR = "#8b8d98"

DASHBOARD_TITLE = "Radar Bug Triage"
EMPTY_MESSAGE = "No bugs available"
