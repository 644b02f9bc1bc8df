from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
import os

from apps.keepalive.config.keepalive_config import KeepAliveConfig
from apps.keepalive.deps import get_keepalive_config

router = APIRouter(prefix="/keepalive", tags=["Keepalive"])


@router.get("/status")
async def keepalive_status(config: KeepAliveConfig = Depends(get_keepalive_config)):
    """
    Which table, toggles and sibling endpoints this deployment keeps alive.
    Never touches the database; credentials are not echoed.
    """
    now = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

    data = {
        "timestamp": now,
        "config": config.summary(),
        "supabase_target": "configured" if _supabase_env_present() else "not configured",
    }

    return JSONResponse(content=data)


def _supabase_env_present() -> bool:
    return bool(os.getenv("SUPABASE_URL")) and bool(
        os.getenv("SUPABASE_SERVICE_ROLE_KEY") or os.getenv("SUPABASE_ANON_KEY")
    )
