import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from apps.keepalive.db import SupabaseNotConfiguredError

log = logging.getLogger("keepalive.errors")


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(SupabaseNotConfiguredError)
    async def supabase_not_configured(request: Request, exc: SupabaseNotConfiguredError):
        log.error("[KEEPALIVE] %s %s: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=500)
