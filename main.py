import asyncio
import uvicorn
import time
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.bugs import router as bugs_router
from app.api.dashboard import router as dashboard_router
from app.core.config import BUG_REPORTS_PATH, LOAD_TIMEOUT_SECONDS
from app.core.exceptions import BugLoadError
from app.state.bug_store import BugStore
from app.utils.logging_config import setup_logging

# Initialize enhanced logging
setup_logging(level=logging.INFO)
logger = logging.getLogger("main")


# ---------------------------------------------------------------------------
# Lifespan: initial load of the bug file
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    store = BugStore(BUG_REPORTS_PATH, timeout=LOAD_TIMEOUT_SECONDS)
    app.state.bug_store = store
    try:
        await store.reload()
    except (BugLoadError, asyncio.TimeoutError):
        # Already logged by the store; the dashboard shows the empty state.
        pass
    yield


app = FastAPI(title="Radar Bug Triage", lifespan=lifespan)


# ---------------------------------------------------------------------------
# Logging Middleware
# ---------------------------------------------------------------------------
class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        client_host = request.client.host if request.client else "unknown"
        logger.info(f"Incoming: {request.method} {request.url.path} from {client_host}")

        try:
            response = await call_next(request)
            process_time = (time.time() - start_time) * 1000
            logger.info(
                f"Outgoing: {request.method} {request.url.path} - "
                f"Status: {response.status_code} - "
                f"Time: {process_time:.2f}ms"
            )
            return response
        except Exception as e:
            logger.error(f"Request failed: {request.method} {request.url.path} - Error: {str(e)}")
            raise e

app.add_middleware(LoggingMiddleware)


# Health endpoint
@app.get("/health")
async def health_check():
    return {"status": "ok"}

# Register routers
app.include_router(dashboard_router)
app.include_router(bugs_router)

if __name__ == "__main__":
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
