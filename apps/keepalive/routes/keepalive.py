from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from apps.keepalive.config.keepalive_config import KeepAliveConfig
from apps.keepalive.db import get_supabase
from apps.keepalive.deps import get_keepalive_config
from apps.keepalive.services.keepalive.keepalive import run_keepalive

router = APIRouter(tags=["Keepalive"])


@router.get("/keep-alive", response_class=PlainTextResponse)
async def keep_alive(
    config: KeepAliveConfig = Depends(get_keepalive_config),
    supabase=Depends(get_supabase),
):
    """
    Cron target. Plain-text trace of every step;
    200 when all database steps succeeded, 400 otherwise.
    """
    result = await run_keepalive(supabase, config)
    return PlainTextResponse(result.message, status_code=200 if result.successful else 400)
