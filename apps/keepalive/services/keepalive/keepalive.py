"""
Keep-Alive Cycle
================

Purpose:
- Prevent Supabase from auto-pausing
- Safe, low-cost activity on every call
- Can be called by:
  - Vercel cron
  - Render cron
  - External uptime monitor

Steps (each gated by KeepAliveConfig):
1. random string liveness query
2. insert-or-delete on the dedicated table
3. sibling endpoint pings (reported, never counted as failure)
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from fastapi.concurrency import run_in_threadpool

from apps.keepalive.config.keepalive_config import KeepAliveConfig
from apps.keepalive.services.keepalive.endpoints import probe_endpoints
from apps.keepalive.services.keepalive.repository import KeepAliveRepository
from apps.keepalive.services.keepalive.results import QueryResponse

log = logging.getLogger("keepalive.service")


async def run_keepalive(
    supabase_client: Any,
    config: KeepAliveConfig,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> QueryResponse:
    repo = KeepAliveRepository(supabase_client, config)

    response_message = ""
    successful_responses = True

    # supabase-py is synchronous; keep it off the event loop
    if not config.disable_random_string_query:
        query_result = await run_in_threadpool(repo.query_random_string)
        successful_responses = successful_responses and query_result.successful
        response_message += query_result.message + "\n\n"

    if config.allow_insertion_and_deletion:
        action_result = await run_in_threadpool(repo.determine_action)
        successful_responses = successful_responses and action_result.successful
        response_message += action_result.message + "\n\n"

    if config.other_endpoints:
        endpoint_results = await probe_endpoints(
            config.other_endpoints,
            timeout=config.endpoint_timeout_seconds,
            transport=transport,
        )
        response_message += "\n\nOther Endpoint Results:\n" + "\n".join(endpoint_results)

    if successful_responses:
        log.info("[KEEPALIVE] Cycle OK")
    else:
        log.warning("[KEEPALIVE] Cycle finished with failures")

    return QueryResponse(successful=successful_responses, message=response_message)
