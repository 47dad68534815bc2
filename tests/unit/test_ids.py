"""
Unit tests for coaster id generation.
"""

import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from coaster_api.core.coasters.ids import (
    SequentialIdGenerator,
    TimeOrderedIdGenerator,
    UuidIdGenerator,
    create_id_generator,
)


class TestTimeOrderedIdGenerator:
    """Tests for the default timestamp-based generator."""

    def test_id_format(self):
        generator = TimeOrderedIdGenerator(clock=lambda: 1_700_000_000_000_000_000)

        assert re.fullmatch(r"1700000000000000000-[0-9a-f]{8}", generator.next_id())

    def test_frozen_clock_still_yields_unique_ids(self):
        """A clock that never advances must not produce repeats."""
        generator = TimeOrderedIdGenerator(clock=lambda: 1000)

        ids = [generator.next_id() for _ in range(1000)]
        stamps = [int(i.split("-")[0]) for i in ids]

        assert len(set(ids)) == 1000
        assert stamps == list(range(1000, 2000))

    def test_clock_going_backwards_keeps_increasing(self):
        ticks = iter([500, 400, 300])
        generator = TimeOrderedIdGenerator(clock=lambda: next(ticks))

        stamps = [int(generator.next_id().split("-")[0]) for _ in range(3)]

        assert stamps == [500, 501, 502]

    def test_unique_under_concurrent_calls(self):
        generator = TimeOrderedIdGenerator()

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: generator.next_id(), range(5000)))

        assert len(set(ids)) == 5000


class TestOtherGenerators:
    """Tests for the uuid and sequential generators."""

    def test_uuid_ids_are_hex(self):
        generator = UuidIdGenerator()

        value = generator.next_id()

        assert re.fullmatch(r"[0-9a-f]{32}", value)
        assert value != generator.next_id()

    def test_sequential_ids_are_predictable(self):
        generator = SequentialIdGenerator()

        assert [generator.next_id() for _ in range(3)] == [
            "coaster-1",
            "coaster-2",
            "coaster-3",
        ]

    def test_sequential_prefix_and_start(self):
        generator = SequentialIdGenerator(prefix="c", start=10)

        assert generator.next_id() == "c10"


class TestCreateIdGenerator:
    """Tests for the settings-driven factory."""

    def test_time_strategy(self):
        assert isinstance(create_id_generator("time"), TimeOrderedIdGenerator)

    def test_uuid_strategy(self):
        assert isinstance(create_id_generator("uuid"), UuidIdGenerator)

    def test_unknown_strategy_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown id strategy"):
            create_id_generator("clock")
