"""
errors.py – error types shared by every tvkit helper
====================================================

Transport problems raised by `requests` (connection refused, bad URL,
timeouts) are *not* wrapped; they reach the caller as-is.  Everything
tvkit itself decides is a failure derives from `TvkitError`.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .logging import safe_logf


class TvkitError(Exception):
    """Base class for errors raised by tvkit."""


class ContextError(TvkitError):
    """An error annotated with caller context; `original` is the wrapped one."""

    def __init__(self, context: str, original: BaseException) -> None:
        super().__init__(f"{context}: {original}")
        self.context = context
        self.original = original


class PayloadEncodeError(TvkitError):
    """Request payload could not be serialised to JSON; nothing was sent."""


class HTTPStatusError(TvkitError):
    def __init__(self, status_code: int, url: Optional[str] = None) -> None:
        msg = f"unexpected status code {status_code}"
        if url:
            msg += f" from {url}"
        super().__init__(msg)
        self.status_code = status_code
        self.url = url


class ResponseDecodeError(TvkitError):
    """Response body was not valid JSON or did not fit the target."""


class StoreError(TvkitError):
    pass


class KeyNotFoundError(StoreError):
    def __init__(self, key: str) -> None:
        super().__init__(f"key not found: {key}")
        self.key = key


class BatchStoreError(StoreError):
    """
    Raised after a batch finished with at least one failed operation.

    The message and `__cause__` describe the *first* failure; `failures`
    lists every ``(op, key, exc)`` that failed, in the order attempted.
    """

    def __init__(self, failures: List[Tuple[str, str, BaseException]]) -> None:
        op, key, exc = failures[0]
        msg = f"failed to {op} key {key}: {exc}"
        if len(failures) > 1:
            msg += f" (+{len(failures) - 1} more failed)"
        super().__init__(msg)
        self.failures = failures


def log_and_return_error(err: BaseException, context: str) -> ContextError:
    """
    Log *err* with *context* and return it wrapped, ready to be raised.

        raise log_and_return_error(exc, "refreshing token") from exc
    """
    safe_logf("%s: %s", context, err)
    wrapped = ContextError(context, err)
    wrapped.__cause__ = err
    return wrapped
