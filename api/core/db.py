"""
Async database access helpers (raw SQL) using asyncpg.

`Store` owns the connection pool. FastAPI creates it on startup, hands it to
route handlers through `get_store`, and closes it on shutdown
(see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
import ssl
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from .config import Settings

SCHEMA_PATH = Path(__file__).with_name("schema.sql")

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """
    Any failure raised by the persistence layer.

    The message is the driver's own text; it is returned to the caller as-is.
    """


@contextmanager
def _store_errors() -> Iterator[None]:
    try:
        yield
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError) as exc:
        raise StoreError(str(exc) or exc.__class__.__name__) from exc


def _sanitize_database_url(url: str) -> str:
    # TLS is configured through an SSLContext, not the libpq query parameter.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url(settings: Settings) -> str:
    url = settings.database_url.strip()
    if not url:
        raise RuntimeError("DATABASE_URL (or DB_HOST/DB_NAME) is not set.")
    return _sanitize_database_url(url)


def _ssl_context(settings: Settings) -> ssl.SSLContext | None:
    if not settings.require_tls:
        return None
    # Verifies the server certificate and host name.
    return ssl.create_default_context()


def affected_rows(status: str | None) -> int:
    """
    Row count from an asyncpg command status such as "UPDATE 3" or "INSERT 0 1".
    """
    tail = (status or "").rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Store:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        with _store_errors():
            row = await self._pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        with _store_errors():
            rows = await self._pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL) and return its command status.
        """
        with _store_errors():
            return await self._pool.execute(sql, *args)

    async def close(self) -> None:
        # Waits for connections that are still running a statement.
        await self._pool.close()


async def connect(settings: Settings) -> Store:
    with _store_errors():
        pool = await asyncpg.create_pool(
            dsn=database_url(settings),
            min_size=min(settings.pool_min_size, settings.pool_max_size),
            max_size=settings.pool_max_size,
            command_timeout=settings.command_timeout,
            ssl=_ssl_context(settings),
        )
    logger.info(
        "Connected to database (pool max_size=%s, tls=%s).",
        settings.pool_max_size,
        settings.require_tls,
    )
    return Store(pool)


async def apply_schema(store: Store, path: Path = SCHEMA_PATH) -> None:
    await store.execute(path.read_text(encoding="utf-8"))
    logger.info("Applied schema from %s.", path.name)


def get_store(request: Request) -> Store:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store is not initialized. It is created on application startup.")
    return store
