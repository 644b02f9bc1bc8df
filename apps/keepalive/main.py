# apps/keepalive/main.py
import logging
import os
import time

from fastapi import FastAPI, Request

from apps.keepalive.deps import get_keepalive_config
from apps.keepalive.utils.errors import install_error_handlers
from apps.keepalive.utils.request_log import log_request_response

from apps.keepalive.routes.health import router as health_router
from apps.keepalive.routes.keepalive import router as keepalive_router
from apps.keepalive.routes.keepalive_status import router as keepalive_status_router

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
log = logging.getLogger("keepalive.main")

app = FastAPI(
    title="Supabase Keep-Alive",
    version=os.getenv("KEEPALIVE_VERSION", "0.1.0"),
    description="Keeps a Supabase project from pausing by touching it on a schedule",
)

# -------------------------------------------------------------------
# Error handling
# -------------------------------------------------------------------
install_error_handlers(app)


# -------------------------------------------------------------------
# Request logging (cron calls tagged, failed keep-alives warned)
# -------------------------------------------------------------------
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    log_request_response(request, response, start)
    return response


# -------------------------------------------------------------------
# Routers
# -------------------------------------------------------------------
app.include_router(health_router)
app.include_router(keepalive_status_router)
app.include_router(keepalive_router, prefix="/api")


# -------------------------------------------------------------------
# Root
# -------------------------------------------------------------------
@app.get("/")
async def root():
    return {
        "status": "Keep-Alive Online",
        "routes": [
            "/health",
            "/keepalive/status",
            "/api/keep-alive",
        ],
    }


# -------------------------------------------------------------------
# Startup (no background jobs; an external cron calls /api/keep-alive)
# -------------------------------------------------------------------
@app.on_event("startup")
async def startup_event():
    config = get_keepalive_config()
    log.info(
        "Keep-alive starting: table=%s insert/delete=%s random query=%s",
        config.table,
        config.allow_insertion_and_deletion,
        not config.disable_random_string_query,
    )
