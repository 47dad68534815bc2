"""
Shared fixtures for HTTP-level tests.

Each test gets its own application (and therefore its own store), built
with deterministic ids and explicit settings so the environment and any
``.env`` file don't leak in.
"""

import pytest
from fastapi.testclient import TestClient

from coaster_api.config.settings import Settings
from coaster_api.core.coasters.ids import SequentialIdGenerator
from coaster_api.main import create_app

ADMIN_PASSWORD = "s3cret"


def make_settings(**overrides) -> Settings:
    fields = {"admin_password": ADMIN_PASSWORD, "coaster_store": "memory"}
    fields.update(overrides)
    return Settings(_env_file=None, **fields)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings=settings, id_generator=SequentialIdGenerator())


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
