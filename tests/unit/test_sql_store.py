"""
Tests specific to the SQLAlchemy-backed store.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy import text

from coaster_api.core.coasters.errors import StorageError
from coaster_api.core.coasters.ids import TimeOrderedIdGenerator
from coaster_api.core.coasters.models import HEIGHT_MAX, Coaster
from coaster_api.infrastructure.store.sql import SqlCoasterStore, create_sql_engine


@pytest.fixture
def engine():
    engine = create_sql_engine("sqlite+pysqlite:///:memory:")
    yield engine
    engine.dispose()


class TestSqlCoasterStore:
    """Schema handling and error translation."""

    def test_ensure_schema_is_repeatable(self, engine):
        store = SqlCoasterStore(engine)
        store.put("1", Coaster(id="1", name="Loop"))

        store.ensure_schema()

        assert store.get("1").name == "Loop"

    def test_rows_are_written_to_coasters_table(self, engine):
        store = SqlCoasterStore(engine)
        store.put("1", Coaster(name="Loop", manufacturer="Acme", in_park="Park", height=50))

        with engine.connect() as conn:
            row = conn.execute(text("SELECT * FROM coasters WHERE id = '1'")).fetchone()

        assert tuple(row) == ("1", "Loop", "Acme", "Park", 50)

    def test_backend_errors_become_storage_errors(self, engine):
        """Without the table every query fails inside the driver."""
        store = SqlCoasterStore(engine, create_schema=False)

        with pytest.raises(StorageError, match="coasters"):
            store.list()

    def test_failed_write_does_not_leak_sqlalchemy_errors(self, engine):
        store = SqlCoasterStore(engine, create_schema=False)

        with pytest.raises(StorageError):
            store.put("1", Coaster(name="Loop"))

    def test_in_memory_engine_is_shared_between_stores(self, engine):
        first = SqlCoasterStore(engine)
        second = SqlCoasterStore(engine)

        first.put("1", Coaster(name="Loop"))

        assert second.get("1").name == "Loop"

    def test_single_connection_engine_serializes_transactions(self, engine):
        """
        Overlapping transactions on one shared SQLite connection would fail
        with "cannot start a transaction within a transaction".
        """
        store = SqlCoasterStore(engine)
        generator = TimeOrderedIdGenerator()

        def create(i):
            store.put(generator.next_id(), Coaster(name=f"c{i}", height=i))

        with ThreadPoolExecutor(max_workers=8) as pool:
            for future in [pool.submit(create, i) for i in range(1600)]:
                future.result()

        assert len(store.list()) == 1600

    def test_height_column_holds_64_bit_values(self, engine):
        store = SqlCoasterStore(engine)

        store.put("1", Coaster(name="Tall", height=HEIGHT_MAX))

        assert store.get("1").height == HEIGHT_MAX
