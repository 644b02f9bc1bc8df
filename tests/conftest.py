from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from postgrest.exceptions import APIError

from apps.keepalive.config.keepalive_config import KeepAliveConfig


class FakeResponse:
    def __init__(self, data: Any) -> None:
        self.data = data


class FakeQuery:
    """Just enough of the supabase-py builder: select/upsert/delete + eq + execute."""

    def __init__(self, db: "FakeSupabase", table: str) -> None:
        self.db = db
        self.table = table
        self.op: Optional[str] = None
        self.columns = "*"
        self.payload: Optional[Dict[str, Any]] = None
        self.filters: List[tuple] = []
        self.retry_enabled = True

    def select(self, columns: str = "*") -> "FakeQuery":
        self.op = "select"
        self.columns = columns
        return self

    def upsert(self, payload: Dict[str, Any]) -> "FakeQuery":
        self.op = "upsert"
        self.payload = payload
        return self

    def delete(self) -> "FakeQuery":
        self.op = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append((column, value))
        return self

    def retry(self, enabled: bool) -> "FakeQuery":
        self.retry_enabled = enabled
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        return all(row.get(c) == v for c, v in self.filters)

    def execute(self) -> FakeResponse:
        self.db.calls.append(
            (self.op, self.table, self.columns, list(self.filters), self.payload, self.retry_enabled)
        )

        error = self.db.errors.get(self.op)
        if error is not None:
            raise error

        rows = self.db.tables.setdefault(self.table, [])

        if self.op == "select":
            if self.db.null_data:
                return FakeResponse(None)
            found = [r for r in rows if self._matches(r)]
            if self.columns == "*":
                return FakeResponse([dict(r) for r in found])
            cols = [c.strip() for c in self.columns.split(",")]
            return FakeResponse([{c: r.get(c) for c in cols} for r in found])

        if self.op == "upsert":
            row = {"id": len(rows) + 1, **(self.payload or {})}
            rows.append(row)
            return FakeResponse([row])

        if self.op == "delete":
            removed = [r for r in rows if self._matches(r)]
            self.db.tables[self.table] = [r for r in rows if not self._matches(r)]
            return FakeResponse(removed)

        raise AssertionError(f"unexpected op {self.op}")


class FakeSupabase:
    def __init__(self) -> None:
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.calls: List[tuple] = []
        self.errors: Dict[str, Exception] = {}
        self.null_data = False

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def seed(self, table: str, column: str, count: int) -> None:
        self.tables[table] = [{"id": i + 1, column: f"row{i + 1:03d}"} for i in range(count)]

    def ops(self, op: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == op]


@pytest.fixture
def api_error():
    def make(message: str = "relation does not exist") -> APIError:
        return APIError({"message": message, "code": "42P01", "hint": None, "details": None})

    return make


@pytest.fixture
def fake_sb() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def config() -> KeepAliveConfig:
    return KeepAliveConfig(
        table="keep-alive",
        column="name",
        allow_insertion_and_deletion=True,
        disable_random_string_query=True,
        size_before_deletions=50,
        console_log_on_error=True,
    )
