"""
headers.py – identity headers required by the remote API
--------------------------------------------------------
Works on anything with a mutable ``headers`` mapping: `requests.Request`,
`requests.PreparedRequest`, or a whole `requests.Session`.  Values are
passed through verbatim; setting twice just overwrites.

`identity_headers()` carries no Content-Type, so it can be handed to
`make_json_request` as ``extra_headers`` without relabelling the body.
"""

from __future__ import annotations

from typing import Any, Dict

from .config import USER_AGENT
from .constants import (
    APP_KEY, CONTENT_FORM, DEVICE_HEADERS,
    HDR_APP_KEY, HDR_CONTENT_TYPE, HDR_CRM_ID, HDR_DEVICE_ID,
    HDR_SUBSCRIBER_ID, HDR_UNIQUE_ID, HDR_USER_AGENT, HDR_USER_ID,
)


def identity_headers(device_id: str, crm_id: str, unique_id: str) -> Dict[str, str]:
    hdrs = dict(DEVICE_HEADERS)
    hdrs.update({
        HDR_USER_AGENT:    USER_AGENT,
        HDR_APP_KEY:       APP_KEY,
        HDR_DEVICE_ID:     device_id,
        HDR_CRM_ID:        crm_id,
        HDR_USER_ID:       crm_id,
        HDR_SUBSCRIBER_ID: crm_id,
        HDR_UNIQUE_ID:     unique_id,
    })
    return hdrs


def apply_identity_headers(request: Any, device_id: str, crm_id: str, unique_id: str) -> None:
    """
    Set the identity + device headers on *request* (last write wins).
    A request without a Content-Type gets the form type the API expects;
    one that already has a Content-Type keeps it.
    """
    if request.headers is None:
        request.headers = {}
    request.headers.update(identity_headers(device_id, crm_id, unique_id))
    if not any(k.lower() == HDR_CONTENT_TYPE.lower() for k in request.headers):
        request.headers[HDR_CONTENT_TYPE] = CONTENT_FORM
