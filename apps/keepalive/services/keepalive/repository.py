"""
Keep-Alive Repository (Supabase/Postgres Adapter)
=================================================

Purpose:
- DB-facing helpers for the keep-alive cycle.
- Every remote call is wrapped so the caller only ever sees a QueryResponse.

Expected table (names come from KeepAliveConfig):

    public."keep-alive"
      - id bigint identity primary key
      - name text

Works with the synchronous supabase-py client. Client-side retries are
turned off on every call: a failure is reported on the first response.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError

from apps.keepalive.config.keepalive_config import KeepAliveConfig
from apps.keepalive.services.keepalive.results import (
    QueryResponse,
    QueryResponseWithData,
    RowValue,
    as_rows,
)
from apps.keepalive.utils.random_strings import generate_random_string

log = logging.getLogger("keepalive.repository")

RemoteError = (APIError, httpx.HTTPError)


def _error_text(exc: Exception) -> str:
    message = getattr(exc, "message", None)
    return str(message) if message else str(exc)


def _dump(data: Any) -> str:
    return json.dumps(data, default=str)


class KeepAliveRepository:
    def __init__(self, supabase_client: Any, config: KeepAliveConfig) -> None:
        self.sb = supabase_client
        self.config = config

    def _fail(self, message_info: str, exc: Exception) -> str:
        error_info = f"{message_info}: {_error_text(exc)}"
        if self.config.console_log_on_error:
            log.error(error_info)
        return error_info

    # -----------------------------
    # Liveness query
    # -----------------------------
    def query_random_string(self) -> QueryResponse:
        """
        Select rows matching a fresh random string. Expected to match
        nothing; the round trip itself is the activity.
        """
        table, column = self.config.table, self.config.column
        current = generate_random_string(self.config.random_string_length)
        message_info = f"Results for retrieving\n'{current}' from '{table}' at column '{column}'"

        try:
            r = self.sb.table(table).select("*").eq(column, current).retry(False).execute()
        except RemoteError as e:
            return QueryResponse(successful=False, message=self._fail(message_info, e))

        return QueryResponse(
            successful=True,
            message=f"{message_info}: {_dump(getattr(r, 'data', None))}",
        )

    # -----------------------------
    # Retrieve / upsert / delete
    # -----------------------------
    def retrieve_entries(self) -> QueryResponseWithData:
        table, column = self.config.table, self.config.column
        message_info = f"Results for retrieving entries from '{table}' - '{column}' column"

        try:
            r = self.sb.table(table).select(column).retry(False).execute()
        except RemoteError as e:
            return QueryResponseWithData(
                successful=False,
                message=self._fail(message_info, e),
                data=None,
            )

        data = as_rows(getattr(r, "data", None))
        return QueryResponseWithData(
            successful=True,
            message=f"{message_info}: {_dump(data)}",
            data=data,
        )

    def insert_random(self, random_string: str) -> QueryResponse:
        table, column = self.config.table, self.config.column
        payload = {column: random_string}
        message_info = f"Results for upserting\n'{random_string}' from '{table}' at column '{column}'"

        try:
            # upsert returns the affected rows (returning=representation)
            r = self.sb.table(table).upsert(payload).retry(False).execute()
        except RemoteError as e:
            return QueryResponse(successful=False, message=self._fail(message_info, e))

        return QueryResponse(
            successful=True,
            message=f"{message_info}: {_dump(getattr(r, 'data', None))}",
        )

    def delete_random(self, entry_to_delete: RowValue) -> QueryResponse:
        """
        Delete every row whose column equals entry_to_delete.
        Equality match, so duplicates are removed together.
        """
        table, column = self.config.table, self.config.column
        message_info = f"Results for deleting\n'{entry_to_delete}' from '{table}' at column '{column}'"

        try:
            self.sb.table(table).delete().eq(column, entry_to_delete).retry(False).execute()
        except RemoteError as e:
            return QueryResponse(successful=False, message=self._fail(message_info, e))

        return QueryResponse(successful=True, message=f"{message_info}: success")

    # -----------------------------
    # Insert vs delete decision
    # -----------------------------
    def determine_action(self) -> QueryResponse:
        """
        Keep the table hovering around size_before_deletions:
        - above the threshold, delete the last row returned
        - otherwise, upsert a fresh random string

        Row order is whatever the query returned; no ORDER BY is applied.
        """
        table = self.config.table
        retrieval = self.retrieve_entries()

        if not retrieval.successful:
            return QueryResponse(
                successful=False,
                message=f"Failed to retrieve entries from {table}\n{retrieval.message}",
            )

        entries = retrieval.data
        if entries is None:
            return QueryResponse(
                successful=False,
                message=f"Received 'null' data result when retrieving entries from {table}\n{retrieval.message}",
            )

        if len(entries) > self.config.size_before_deletions:
            last = entries[-1]
            entry_to_delete = last.get(self.config.column) if isinstance(last, dict) else last
            result = self.delete_random(entry_to_delete)
        else:
            result = self.insert_random(generate_random_string(self.config.random_string_length))

        return QueryResponse(
            successful=result.successful,
            message=f"{retrieval.message}\n\n{result.message}",
        )
