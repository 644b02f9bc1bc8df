"""
One-off keep-alive run against the configured Supabase project.

    python -m scripts.keepalive_check

Reads .env.local (then .env) so it can be run from a dev checkout
without starting the API.
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

# env must be loaded before the config is built
load_dotenv(".env.local")

from apps.keepalive.config.keepalive_config import load_keepalive_config  # noqa: E402
from apps.keepalive.db import get_supabase  # noqa: E402
from apps.keepalive.services.keepalive.keepalive import run_keepalive  # noqa: E402

log = logging.getLogger("keepalive.check")


async def check_keepalive() -> bool:
    config = load_keepalive_config()
    supabase = get_supabase()

    result = await run_keepalive(supabase, config)

    print("Test Results:")
    print("Status:", "Success" if result.successful else "Failed")
    print("Response:\n", result.message)
    return result.successful


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s - %(message)s")
    try:
        return 0 if asyncio.run(check_keepalive()) else 1
    except Exception:
        log.exception("Keep-alive check crashed")
        return 2


if __name__ == "__main__":
    sys.exit(main())
