"""
Coaster store backends.

``create_coaster_store`` picks the backend named by the ``coaster_store``
setting. Callers only ever see the ``CoasterStore`` protocol.
"""

import logging

from ...config.settings import Settings
from ...core.coasters.store import CoasterStore
from .memory import InMemoryCoasterStore
from .sql import SqlCoasterStore, create_sql_engine

logger = logging.getLogger(__name__)


def create_coaster_store(settings: Settings) -> CoasterStore:
    """
    Create the store configured by ``settings``.

    Args:
        settings: application settings (``coaster_store``, ``database_url``)

    Returns:
        CoasterStore implementation (in-memory or SQL)
    """
    if settings.coaster_store == "memory":
        return InMemoryCoasterStore()

    if settings.coaster_store == "sql":
        engine = create_sql_engine(settings.database_url)
        logger.info(
            "Using SQL coaster store",
            extra={"dialect": engine.dialect.name},
        )
        return SqlCoasterStore(engine)

    raise ValueError(f"Unknown coaster store: {settings.coaster_store}")


__all__ = [
    "InMemoryCoasterStore",
    "SqlCoasterStore",
    "create_coaster_store",
    "create_sql_engine",
]
