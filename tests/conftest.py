"""
pytest fixtures shared by the tvkit tests.

No network and no redis server: HTTP sessions are mocks and the store
runs on an in-memory stand-in for the redis client.
"""

import io
from typing import Dict, Optional, Set, Tuple

import pytest
import redis
import requests

import tvkit.logging as tvlog
from tvkit.store import RedisStore


class FakeRedisClient:
    """Implements the get/set/delete subset of `redis.Redis` used by RedisStore."""

    def __init__(self) -> None:
        self.data: Dict[str, str] = {}
        self.fail_on: Set[Tuple[str, str]] = set()
        self.calls = []

    def _maybe_fail(self, op: str, key: str) -> None:
        self.calls.append((op, key))
        if (op, key) in self.fail_on:
            raise redis.ConnectionError(f"{op} {key} refused")

    def get(self, key: str) -> Optional[str]:
        self._maybe_fail("get", key)
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        self._maybe_fail("set", key)
        self.data[key] = value
        return True

    def delete(self, key: str) -> int:
        self._maybe_fail("delete", key)
        return 1 if self.data.pop(key, None) is not None else 0


@pytest.fixture
def fake_redis():
    return FakeRedisClient()


@pytest.fixture
def store(fake_redis):
    return RedisStore(client=fake_redis, key_prefix="")


@pytest.fixture
def restore_log():
    """Put the process-wide log handle back however a test left it."""
    original = tvlog.LOG
    yield
    tvlog.LOG = original


@pytest.fixture
def make_response():
    """Factory for real `requests.Response` objects with a canned body."""

    def _make(status: int, body: bytes = b"", url: str = "http://example.com/api") -> requests.Response:
        resp = requests.Response()
        resp.status_code = status
        resp._content = body
        resp.raw = io.BytesIO(body)
        resp.url = url
        return resp

    return _make
