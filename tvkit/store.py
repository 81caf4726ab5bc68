"""
store.py – redis-backed key/value store
=======================================

• `KeyValueStore` is the shape every store collaborator must have:
  `get` (raises `KeyNotFoundError` when absent), `set`, `delete`.
• `RedisStore` implements it on top of a lazily connected client; the
  first command triggers the connect, retried a bounded number of times.
• Keys and values are opaque strings; an optional prefix namespaces them.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Protocol

import redis

from .config import STORE_ATTEMPTS, STORE_KEY_PREFIX, STORE_URL
from .errors import KeyNotFoundError, StoreError
from .logging import get_logger

log = get_logger("tvkit.store")

RETRY_DELAY_SEC = 2


class KeyValueStore(Protocol):
    def get(self, key: str) -> str: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


# ───── LAZY CLIENT ─────────────────────────────────────────────────────
class _LazyRedis:
    """Proxy object that connects on first attribute access."""

    def __init__(self, url: str = STORE_URL, attempts: int = STORE_ATTEMPTS) -> None:
        self.url = url
        self.attempts = max(1, attempts)
        self._client: Optional[redis.Redis] = None

    def __getattr__(self, name: str) -> Callable[..., Any]:  # noqa: D401
        if self._client is None:
            self._connect()
        return getattr(self._client, name)

    def _connect(self) -> None:
        for attempt in range(1, self.attempts + 1):
            try:
                client = redis.Redis.from_url(
                    self.url,
                    decode_responses=True,
                    socket_timeout=2,
                )
                client.ping()
                self._client = client
                log.info("Connected to store at %s", self.url)
                return
            except redis.RedisError as exc:
                if attempt == self.attempts:
                    raise StoreError(f"store unavailable at {self.url}: {exc}") from exc
                log.warning("Store unavailable – retrying in %d s (%s)", RETRY_DELAY_SEC, exc)
                time.sleep(RETRY_DELAY_SEC)


# ───── STORE ───────────────────────────────────────────────────────────
class RedisStore:
    """`KeyValueStore` over redis; any client with get/set/delete works."""

    def __init__(self, client: Any = None, key_prefix: str = STORE_KEY_PREFIX) -> None:
        self.client = client if client is not None else _LazyRedis()
        self.key_prefix = key_prefix

    def _k(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def get(self, key: str) -> str:
        try:
            val = self.client.get(self._k(key))
        except redis.RedisError as exc:
            raise StoreError(f"get {key}: {exc}") from exc
        if val is None:
            raise KeyNotFoundError(key)
        if isinstance(val, bytes):
            val = val.decode("utf-8")
        return val

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(self._k(key), value)
        except redis.RedisError as exc:
            raise StoreError(f"set {key}: {exc}") from exc

    def delete(self, key: str) -> None:
        # deleting a missing key is a no-op for redis
        try:
            self.client.delete(self._k(key))
        except redis.RedisError as exc:
            raise StoreError(f"delete {key}: {exc}") from exc


_default: Optional[RedisStore] = None


def default_store() -> RedisStore:
    """Process-wide store built from `STORE_URL`; created on first use."""
    global _default
    if _default is None:
        _default = RedisStore()
    return _default
