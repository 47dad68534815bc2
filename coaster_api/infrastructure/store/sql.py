"""
Relational coaster store backed by SQLAlchemy.

Every store operation runs in its own transaction (``engine.begin()``), which
gives the same per-operation atomicity the in-memory store gets from its lock.
Queries are plain SQL so the table layout stays obvious:

    coasters(id PRIMARY KEY, name, manufacturer, in_park, height)

Production targets MySQL (``mysql+pymysql://...``); SQLite works for local
development and tests.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager, nullcontext
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from ...core.coasters.errors import CoasterNotFoundError, StorageError
from ...core.coasters.models import Coaster

logger = logging.getLogger(__name__)


SQL_CREATE_TABLE = text("""
    CREATE TABLE IF NOT EXISTS coasters (
        id VARCHAR(64) NOT NULL PRIMARY KEY,
        name VARCHAR(255) NOT NULL,
        manufacturer VARCHAR(255) NOT NULL,
        in_park VARCHAR(255) NOT NULL,
        height BIGINT NOT NULL
    )
""")
SQL_LIST_COASTERS = text(
    "SELECT id, name, manufacturer, in_park, height FROM coasters"
)
SQL_LIST_IDS = text("SELECT id FROM coasters")
SQL_GET_COASTER = text(
    "SELECT id, name, manufacturer, in_park, height FROM coasters WHERE id = :id"
)
SQL_INSERT_COASTER = text("""
    INSERT INTO coasters (id, name, manufacturer, in_park, height)
    VALUES (:id, :name, :manufacturer, :in_park, :height)
""")
SQL_UPDATE_COASTER = text("""
    UPDATE coasters
    SET name = :name,
        manufacturer = :manufacturer,
        in_park = :in_park,
        height = :height
    WHERE id = :id
""")
SQL_DELETE_COASTER = text("DELETE FROM coasters WHERE id = :id")


def create_sql_engine(url: str) -> Engine:
    """
    Build an Engine for ``url``.

    In-memory SQLite gets a ``StaticPool`` so every session in the process
    sees the same database.
    """
    kwargs: dict = {"pool_pre_ping": True}
    if url.startswith("sqlite") and ":memory:" in url:
        kwargs.update({
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        })
    return create_engine(url, **kwargs)


def _row_to_coaster(row) -> Coaster:
    mapping = row._mapping
    return Coaster(
        id=mapping["id"],
        name=mapping["name"],
        manufacturer=mapping["manufacturer"],
        in_park=mapping["in_park"],
        height=int(mapping["height"]),
    )


class SqlCoasterStore:
    """
    ``CoasterStore`` on top of a SQL database.

    Backend errors are raised as ``StorageError`` carrying the driver's
    message, which the service may pass on to the client.
    """

    def __init__(self, engine: Engine, create_schema: bool = True) -> None:
        self._engine = engine
        # A StaticPool hands every thread the same DBAPI connection, so
        # transactions on it must not overlap.
        self._serialize = isinstance(engine.pool, StaticPool)
        self._lock = threading.Lock()
        if create_schema:
            self.ensure_schema()

    def ensure_schema(self) -> None:
        """Create the coasters table if it is missing."""
        with self._transaction("ensure_schema") as conn:
            conn.execute(SQL_CREATE_TABLE)
        logger.info("Coaster table ready", extra={"dialect": self._engine.dialect.name})

    def list(self) -> list[Coaster]:
        with self._transaction("list") as conn:
            rows = conn.execute(SQL_LIST_COASTERS).fetchall()
        return [_row_to_coaster(row) for row in rows]

    def ids(self) -> list[str]:
        with self._transaction("ids") as conn:
            return list(conn.execute(SQL_LIST_IDS).scalars())

    def get(self, coaster_id: str) -> Coaster:
        with self._transaction("get") as conn:
            row = conn.execute(SQL_GET_COASTER, {"id": coaster_id}).fetchone()
        if row is None:
            raise CoasterNotFoundError(coaster_id)
        return _row_to_coaster(row)

    def put(self, coaster_id: str, coaster: Coaster) -> None:
        params = coaster.with_id(coaster_id).to_dict()
        with self._transaction("put") as conn:
            result = conn.execute(SQL_UPDATE_COASTER, params)
            if result.rowcount == 0:
                conn.execute(SQL_INSERT_COASTER, params)

    def replace(self, coaster_id: str, coaster: Coaster) -> None:
        params = coaster.with_id(coaster_id).to_dict()
        with self._transaction("replace") as conn:
            result = conn.execute(SQL_UPDATE_COASTER, params)
            if result.rowcount == 0:
                raise CoasterNotFoundError(coaster_id)

    def delete(self, coaster_id: str) -> bool:
        with self._transaction("delete") as conn:
            result = conn.execute(SQL_DELETE_COASTER, {"id": coaster_id})
            return result.rowcount > 0

    def close(self) -> None:
        self._engine.dispose()

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[Connection]:
        """
        Run one store operation in a transaction.

        Commits on success, rolls back on any exception. On a single shared
        connection the whole transaction runs under the store lock. SQLAlchemy errors
        are converted to ``StorageError``; everything else propagates as-is.
        """
        guard = self._lock if self._serialize else nullcontext()
        try:
            with guard, self._engine.begin() as conn:
                yield conn
        except SQLAlchemyError as e:
            logger.error(
                "SQL coaster store operation failed",
                extra={"operation": operation, "error": str(e)},
            )
            raise StorageError(str(e)) from e
