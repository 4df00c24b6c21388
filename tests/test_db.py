import asyncio

import asyncpg
import pytest
from fastapi import FastAPI
from starlette.requests import Request

from core import db
from core.config import Settings


class ExplodingPool:
    def __init__(self, exc: BaseException) -> None:
        self.exc = exc

    async def fetch(self, sql, *args):
        raise self.exc

    async def fetchrow(self, sql, *args):
        raise self.exc

    async def execute(self, sql, *args):
        raise self.exc


class RecordingPool:
    def __init__(self) -> None:
        self.closed = False

    async def fetch(self, sql, *args):
        return [{"id": 1}, {"id": 2}]

    async def fetchrow(self, sql, *args):
        return None

    async def execute(self, sql, *args):
        return "DELETE 2"

    async def close(self):
        self.closed = True


@pytest.mark.parametrize(
    ("status", "expected"),
    [("UPDATE 3", 3), ("DELETE 0", 0), ("INSERT 0 1", 1), ("CREATE TABLE", 0), (None, 0)],
)
def test_affected_rows(status, expected):
    assert db.affected_rows(status) == expected


def test_database_url_drops_sslmode():
    settings = Settings(database_url="postgresql://u@h/db?sslmode=require&application_name=kit")

    assert db.database_url(settings) == "postgresql://u@h/db?application_name=kit"


def test_database_url_is_required():
    with pytest.raises(RuntimeError):
        db.database_url(Settings())


@pytest.mark.parametrize(
    ("exc", "message"),
    [
        (asyncpg.InterfaceError("pool is closed"), "pool is closed"),
        (ConnectionRefusedError("connection refused"), "connection refused"),
        (asyncio.TimeoutError(), "TimeoutError"),
    ],
)
def test_driver_failures_become_store_errors(exc, message):
    store = db.Store(ExplodingPool(exc))

    for call in (store.fetch_all("SELECT 1"), store.fetch_one("SELECT 1"), store.execute("SELECT 1")):
        with pytest.raises(db.StoreError) as info:
            asyncio.run(call)
        assert message in str(info.value)


def test_store_returns_plain_values():
    pool = RecordingPool()
    store = db.Store(pool)

    assert asyncio.run(store.fetch_all("SELECT id FROM tasks")) == [{"id": 1}, {"id": 2}]
    assert asyncio.run(store.fetch_one("SELECT id FROM tasks WHERE id = $1", 9)) is None
    assert asyncio.run(store.execute("DELETE FROM tasks")) == "DELETE 2"

    asyncio.run(store.close())
    assert pool.closed


def test_get_store_requires_startup():
    app = FastAPI()
    request = Request({"type": "http", "app": app})

    with pytest.raises(RuntimeError):
        db.get_store(request)


def test_ssl_context_only_when_required():
    assert db._ssl_context(Settings()) is None
    assert db._ssl_context(Settings(require_tls=True)) is not None
