"""
credentials.py – login state persisted in the key/value store
=============================================================

Each credential field lives under its own key.  Writes and logouts go
through a single best-effort batch, so a failing key never stops the
others from being written or removed.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Optional

from .batch import BatchStoreOperations, execute_batch_store_operations
from .constants import (
    KEY_ACCESS_TOKEN, KEY_CRM, KEY_LAST_SSO_REFRESH, KEY_LAST_TOKEN_REFRESH,
    KEY_REFRESH_TOKEN, KEY_SSO_TOKEN, KEY_UNIQUE_ID,
)
from .errors import KeyNotFoundError, StoreError, log_and_return_error
from .store import KeyValueStore


@dataclass
class Credentials:
    sso_token: str = ""
    crm: str = ""
    unique_id: str = ""
    access_token: str = ""
    refresh_token: str = ""
    last_token_refresh: str = ""        # unix seconds, as stored
    last_sso_refresh: str = ""


# field name → store key
STORE_KEYS: Dict[str, str] = {
    "sso_token":          KEY_SSO_TOKEN,
    "crm":                KEY_CRM,
    "unique_id":          KEY_UNIQUE_ID,
    "access_token":       KEY_ACCESS_TOKEN,
    "refresh_token":      KEY_REFRESH_TOKEN,
    "last_token_refresh": KEY_LAST_TOKEN_REFRESH,
    "last_sso_refresh":   KEY_LAST_SSO_REFRESH,
}


def write_credentials(creds: Credentials, store: Optional[KeyValueStore] = None) -> None:
    """Persist every non-empty field; empty fields leave stored values alone."""
    sets = {
        STORE_KEYS[f.name]: getattr(creds, f.name)
        for f in fields(creds)
        if getattr(creds, f.name)
    }
    try:
        execute_batch_store_operations(BatchStoreOperations(sets=sets), store)
    except StoreError as exc:
        raise log_and_return_error(exc, "failed to write credentials") from exc


def get_credentials(store: KeyValueStore) -> Credentials:
    """Load whatever is stored; missing keys come back as empty strings."""
    creds = Credentials()
    for name, key in STORE_KEYS.items():
        try:
            setattr(creds, name, store.get(key))
        except KeyNotFoundError:
            continue
    return creds


def clear_credentials(store: Optional[KeyValueStore] = None) -> None:
    """Logout: drop every credential key."""
    try:
        execute_batch_store_operations(BatchStoreOperations(deletes=list(STORE_KEYS.values())), store)
    except StoreError as exc:
        raise log_and_return_error(exc, "failed to clear credentials") from exc


def check_logged_in(store: KeyValueStore) -> bool:
    """Logged in means an SSO token *or* an access token is stored."""
    creds = get_credentials(store)
    return bool(creds.sso_token or creds.access_token)
