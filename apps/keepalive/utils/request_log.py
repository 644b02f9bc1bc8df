import logging
import time
from typing import Any, Dict

from fastapi import Request, Response

log = logging.getLogger("keepalive.requests")

KEEPALIVE_PATH = "/api/keep-alive"


def request_trigger(request: Request) -> str:
    """'cron' for scheduler calls (Vercel cron sends its own user agent), else 'manual'."""
    user_agent = request.headers.get("user-agent", "").lower()
    if "vercel-cron" in user_agent or "x-vercel-cron" in request.headers:
        return "cron"
    return "manual"


def log_request_response(request: Request, response: Response, start_time: float) -> Dict[str, Any]:
    entry: Dict[str, Any] = {
        "method": request.method,
        "path": request.url.path,
        "status_code": response.status_code,
        "duration_ms": int((time.time() - start_time) * 1000),
        "trigger": request_trigger(request),
    }

    # a failed keep-alive means the project may be pausing
    if request.url.path == KEEPALIVE_PATH and response.status_code >= 400:
        log.warning("keep-alive call failed: %s", entry)
    else:
        log.info("%s", entry)
    return entry
