import asyncio
import logging
from typing import List, Optional, Sequence

import httpx

log = logging.getLogger("keepalive.endpoints")

# --------------------------------------------------------
# Sibling endpoint pings
#   - other keep-alive deployments (Vercel / Render / ...)
#   - one GET each, all at once, results in input order
# --------------------------------------------------------

NO_CACHE_HEADERS = {"Cache-Control": "no-store"}


async def _probe(client: httpx.AsyncClient, endpoint: str) -> str:
    try:
        res = await client.get(endpoint, headers=NO_CACHE_HEADERS)
    except Exception as e:
        # One bad endpoint never stops the others
        log.warning("[KEEPALIVE] Endpoint ping error %s: %s", endpoint, e)
        return f"{endpoint} - Failed: {e}"

    pass_or_fail = "Passed" if res.status_code == 200 else "Failed"
    if pass_or_fail == "Failed":
        log.warning("[KEEPALIVE] Endpoint ping failed %s (%d)", endpoint, res.status_code)
    return f"{endpoint} - {pass_or_fail}"


async def probe_endpoints(
    endpoints: Sequence[str],
    *,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[str]:
    """
    GET every endpoint concurrently and report "<url> - Passed" / "<url> - Failed".
    timeout=None waits as long as the remote takes.
    """
    if not endpoints:
        return []

    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        return list(await asyncio.gather(*(_probe(client, url) for url in endpoints)))
