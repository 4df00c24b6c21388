from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from core.db import StoreError
from main import create_app

_NOW = object()

# Column defaults the real schema fills in (see api/core/schema.sql).
TABLE_DEFAULTS: dict[str, dict[str, Any]] = {
    "tasks": {"completed": False, "created_at": _NOW},
    "questions": {"image_data": None, "next_review": None, "review_interval": 1},
    "diary": {"completed": False},
    "finance": {"transaction_date": _NOW},
    "events": {},
    "notes": {"last_modified": _NOW},
}

_SELECT = re.compile(r"^SELECT (?P<cols>.+) FROM (?P<table>\w+) ORDER BY (?P<order>.+)$")
_INSERT = re.compile(
    r"^INSERT INTO (?P<table>\w+) \((?P<cols>[^)]+)\) VALUES \((?P<vals>[^)]+)\) RETURNING (?P<ret>.+)$"
)
_UPDATE = re.compile(r"^UPDATE (?P<table>\w+) SET (?P<sets>.+) WHERE id = \$(?P<idx>\d+)$")
_DELETE = re.compile(r"^DELETE FROM (?P<table>\w+) WHERE id = \$(?P<idx>\d+)$")


def _split(text: str) -> list[str]:
    return [part.strip() for part in text.split(",")]


def _param(placeholder: str, args: tuple) -> Any:
    return args[int(placeholder.lstrip("$")) - 1]


class FakeStore:
    """
    In-memory stand-in for `core.db.Store`.

    Understands exactly the statement shapes the repositories issue:
    ordered SELECT, INSERT ... RETURNING, UPDATE ... WHERE id and
    DELETE ... WHERE id.
    """

    def __init__(self) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = {name: [] for name in TABLE_DEFAULTS}
        self.calls: list[tuple[str, tuple]] = []
        self.fail_with: str | None = None
        self.closed = False
        self._next_ids = {name: 1 for name in TABLE_DEFAULTS}
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def _record(self, sql: str, args: tuple) -> str:
        statement = " ".join(sql.split())
        self.calls.append((statement, args))
        if self.fail_with is not None:
            raise StoreError(self.fail_with)
        return statement

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        statement = self._record(sql, args)
        match = _SELECT.match(statement)
        assert match, f"unsupported query: {statement}"
        rows = list(self.tables[match["table"]])
        for term in reversed(_split(match["order"])):
            column, _, direction = term.partition(" ")
            rows.sort(key=lambda row: row[column], reverse=direction.upper() == "DESC")
        columns = _split(match["cols"])
        return [{column: row[column] for column in columns} for row in rows]

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        statement = self._record(sql, args)
        match = _INSERT.match(statement)
        assert match, f"unsupported query: {statement}"
        table = match["table"]
        row: dict[str, Any] = {"id": self._next_ids[table]}
        self._next_ids[table] += 1
        for column, default in TABLE_DEFAULTS[table].items():
            row[column] = self.now() if default is _NOW else default
        for column, placeholder in zip(_split(match["cols"]), _split(match["vals"])):
            row[column] = _param(placeholder, args)
        self.tables[table].append(row)
        return {column: row[column] for column in _split(match["ret"])}

    async def execute(self, sql: str, *args: Any) -> str:
        statement = self._record(sql, args)
        match = _UPDATE.match(statement)
        if match:
            row_id = _param(match["idx"], args)
            matched = [row for row in self.tables[match["table"]] if row["id"] == row_id]
            for row in matched:
                for assignment in _split(match["sets"]):
                    column, _, value = (part.strip() for part in assignment.partition("="))
                    row[column] = self.now() if value == "now()" else _param(value, args)
            return f"UPDATE {len(matched)}"

        match = _DELETE.match(statement)
        assert match, f"unsupported statement: {statement}"
        row_id = _param(match["idx"], args)
        rows = self.tables[match["table"]]
        kept = [row for row in rows if row["id"] != row_id]
        deleted = len(rows) - len(kept)
        self.tables[match["table"]] = kept
        return f"DELETE {deleted}"

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(max_body_bytes=64 * 1024)


@pytest.fixture
def app(store: FakeStore, settings: Settings):
    application = create_app(settings)
    application.state.store = store
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def frozen_now(monkeypatch) -> datetime:
    from questions import service

    now = datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)
    monkeypatch.setattr(service, "_utc_now", lambda: now)
    return now
