"""
device.py – stable device id kept in the store
"""

from __future__ import annotations

import secrets

from .constants import DEVICE_ID_BYTES, KEY_DEVICE_ID
from .errors import KeyNotFoundError
from .logging import get_logger
from .store import KeyValueStore

log = get_logger("tvkit.device")


def generate_device_id() -> str:
    """16 lowercase hex chars."""
    return secrets.token_hex(DEVICE_ID_BYTES)


def get_device_id(store: KeyValueStore) -> str:
    """Return the stored device id, generating and persisting one on first use."""
    try:
        return store.get(KEY_DEVICE_ID)
    except KeyNotFoundError:
        pass
    device_id = generate_device_id()
    store.set(KEY_DEVICE_ID, device_id)
    log.info("generated new device id")
    return device_id
