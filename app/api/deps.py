from fastapi import Request

from app.state.bug_store import BugStore


def get_bug_store(request: Request) -> BugStore:
    return request.app.state.bug_store
