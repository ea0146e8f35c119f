from __future__ import annotations

from collections.abc import Generator

import fakeredis
import pytest
from fastapi.testclient import TestClient

from tictactoe.api.deps import get_redis
from tictactoe.main import app


@pytest.fixture()
def fake_redis() -> fakeredis.FakeRedis:
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture()
def client_and_redis(fake_redis: fakeredis.FakeRedis) -> Generator[tuple[TestClient, fakeredis.FakeRedis], None, None]:
    """FastAPI TestClient wired to a fakeredis instance the test can inspect."""

    def _override() -> Generator[fakeredis.FakeRedis, None, None]:
        yield fake_redis

    app.dependency_overrides[get_redis] = _override
    with TestClient(app) as c:
        yield c, fake_redis
    app.dependency_overrides.clear()


@pytest.fixture()
def archive_app(fake_redis: fakeredis.FakeRedis) -> Generator[object, None, None]:
    """The archive app with Redis overridden, for use behind httpx.ASGITransport."""

    def _override() -> Generator[fakeredis.FakeRedis, None, None]:
        yield fake_redis

    app.dependency_overrides[get_redis] = _override
    yield app
    app.dependency_overrides.clear()
