"""
config.py – environment-driven settings
=======================================

• Loads the first `.env` file it finds (cwd or /app) exactly **once**;
  real environment variables always win.
• `env(key, default=None, cast=None)` reads one variable with optional
  int/float/bool casting; unset, empty or uncastable values give *default*.
• Module-level settings below are read at import time.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

for candidate in (Path.cwd() / ".env", Path("/app/.env")):
    if candidate.is_file():
        load_dotenv(dotenv_path=candidate, override=False)
        break

_TRUTHY = ("1", "true", "yes", "y")


def env(key: str, default: Any = None, cast: Optional[type] = None) -> Any:
    val = os.getenv(key)
    if val is None or val == "":
        return default
    if cast is bool:
        return val.lower() in _TRUTHY
    if cast is not None:
        try:
            return cast(val)
        except (ValueError, TypeError):
            return default
    return val


# ───── settings ───────────────────────────────────────────────────────
LOG_LEVEL        = env("LOG_LEVEL", "INFO").upper()
STORE_URL        = env("STORE_URL", "redis://localhost:6379/0")
STORE_KEY_PREFIX = env("STORE_KEY_PREFIX", "")
STORE_ATTEMPTS   = env("STORE_CONNECT_ATTEMPTS", 5, cast=int)
HTTP_TIMEOUT     = env("HTTP_TIMEOUT", 10.0, cast=float)
HTTP_PROXY_URL   = env("HTTP_PROXY_URL")
USER_AGENT       = env("TVKIT_USER_AGENT", "okhttp/4.2.2")


__all__ = [
    "env",
    "LOG_LEVEL", "STORE_URL", "STORE_KEY_PREFIX", "STORE_ATTEMPTS",
    "HTTP_TIMEOUT", "HTTP_PROXY_URL", "USER_AGENT",
]
