"""
Keep-Alive Configuration
========================

Purpose:
- Single source of truth for which table/column the keep-alive cycle touches
- Feature toggles for the liveness query and the insert/delete cycle
- Sibling endpoints to ping on every call

Loaded once at process start from the environment (a local .env is honored).
The resulting object is frozen and handed to every helper explicitly.

Recommended dedicated table:

    create table public."keep-alive" (
      id bigint generated by default as identity primary key,
      name text not null default ''
    );

Set KEEPALIVE_ALLOW_INSERTION_AND_DELETION=false unless the table is
dedicated to keep-alive traffic.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from apps.keepalive.flags import enabled, float_env, int_env, list_env
from apps.keepalive.utils.random_strings import DEFAULT_RANDOM_STRING_LENGTH

log = logging.getLogger("keepalive.config")

DEFAULT_TABLE = "keep-alive"
DEFAULT_COLUMN = "name"
DEFAULT_SIZE_BEFORE_DELETIONS = 50


@dataclass(frozen=True)
class KeepAliveConfig:
    table: str = DEFAULT_TABLE
    column: str = DEFAULT_COLUMN

    # Only enable on a keep-alive dedicated table.
    allow_insertion_and_deletion: bool = True
    # Should be true whenever allow_insertion_and_deletion is true.
    disable_random_string_query: bool = True
    # Max table size before deletions start.
    size_before_deletions: int = DEFAULT_SIZE_BEFORE_DELETIONS

    console_log_on_error: bool = True

    other_endpoints: Tuple[str, ...] = field(default_factory=tuple)

    random_string_length: int = DEFAULT_RANDOM_STRING_LENGTH
    # None means no timeout on sibling probes.
    endpoint_timeout_seconds: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.table:
            raise ValueError("KeepAliveConfig.table must not be empty")
        if not self.column:
            raise ValueError("KeepAliveConfig.column must not be empty")
        if self.size_before_deletions < 0:
            raise ValueError("KeepAliveConfig.size_before_deletions must be >= 0")
        if self.random_string_length <= 0:
            raise ValueError("KeepAliveConfig.random_string_length must be > 0")
        # Lists from callers are coerced so the config stays immutable.
        object.__setattr__(self, "other_endpoints", tuple(self.other_endpoints))

    def summary(self) -> dict:
        return {
            "table": self.table,
            "column": self.column,
            "allow_insertion_and_deletion": self.allow_insertion_and_deletion,
            "disable_random_string_query": self.disable_random_string_query,
            "size_before_deletions": self.size_before_deletions,
            "console_log_on_error": self.console_log_on_error,
            "other_endpoints": list(self.other_endpoints),
            "random_string_length": self.random_string_length,
            "endpoint_timeout_seconds": self.endpoint_timeout_seconds,
        }


def load_keepalive_config() -> KeepAliveConfig:
    load_dotenv()

    config = KeepAliveConfig(
        table=(os.getenv("KEEPALIVE_TABLE") or DEFAULT_TABLE).strip(),
        column=(os.getenv("KEEPALIVE_COLUMN") or DEFAULT_COLUMN).strip(),
        allow_insertion_and_deletion=enabled("KEEPALIVE_ALLOW_INSERTION_AND_DELETION", "true"),
        disable_random_string_query=enabled("KEEPALIVE_DISABLE_RANDOM_STRING_QUERY", "true"),
        size_before_deletions=int_env("KEEPALIVE_SIZE_BEFORE_DELETIONS", DEFAULT_SIZE_BEFORE_DELETIONS),
        console_log_on_error=enabled("KEEPALIVE_CONSOLE_LOG_ON_ERROR", "true"),
        other_endpoints=tuple(list_env("KEEPALIVE_OTHER_ENDPOINTS")),
        random_string_length=int_env("KEEPALIVE_RANDOM_STRING_LENGTH", DEFAULT_RANDOM_STRING_LENGTH),
        endpoint_timeout_seconds=float_env("KEEPALIVE_ENDPOINT_TIMEOUT_SECONDS"),
    )

    if config.allow_insertion_and_deletion and not config.disable_random_string_query:
        log.warning(
            "[KEEPALIVE] Both the random string query and insertion/deletion are enabled; "
            "both will run on every call"
        )

    log.info(
        "[KEEPALIVE] Config loaded: table=%s column=%s endpoints=%d",
        config.table,
        config.column,
        len(config.other_endpoints),
    )
    return config
