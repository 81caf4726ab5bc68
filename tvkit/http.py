"""
http.py – request executor, JSON request builder, response decoder
==================================================================

Flow used by the API client code:

    resp = make_json_request(url, "POST", payload, extra_headers, session)
    try:
        channels = parse_json_response(resp, ChannelList)
    finally:
        resp.close()

• The HTTP client is always injected (a `requests.Session` or anything
  with the same `request()` signature); nothing here pools connections,
  retries or overrides timeouts.  `build_session()` is the stock client.
• Responses come back with ``stream=True``: the body is still open and
  the caller closes it.
• Transport errors from `requests` propagate untouched.
• Typed decoding goes through pydantic: targets are models, dataclasses,
  or any type `TypeAdapter` understands.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Dict, List, Mapping, MutableMapping, Optional

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError
from requests.structures import CaseInsensitiveDict

from .config import HTTP_PROXY_URL, HTTP_TIMEOUT, USER_AGENT
from .constants import CONTENT_JSON, HDR_CONTENT_TYPE, HDR_USER_AGENT
from .errors import HTTPStatusError, PayloadEncodeError, ResponseDecodeError
from .logging import null_logger


@dataclass(frozen=True)
class HTTPRequestConfig:
    url: str
    method: str
    headers: Optional[Mapping[str, str]] = None
    body: Optional[bytes] = None


# ───── CLIENT ──────────────────────────────────────────────────────────
class TimeoutSession(requests.Session):
    """`requests.Session` with a default per-request timeout."""

    def __init__(self, timeout: Optional[float] = HTTP_TIMEOUT) -> None:
        super().__init__()
        self.timeout = timeout

    def request(self, method, url, **kwargs):  # noqa: D401
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, **kwargs)


def build_session(
    timeout: Optional[float] = HTTP_TIMEOUT,
    proxy_url: Optional[str] = HTTP_PROXY_URL,
    user_agent: str = USER_AGENT,
) -> TimeoutSession:
    session = TimeoutSession(timeout=timeout)
    session.headers[HDR_USER_AGENT] = user_agent
    if proxy_url:
        session.proxies.update({"http": proxy_url, "https": proxy_url})
    return session


# ───── DECODING ────────────────────────────────────────────────────────
def _decode_into(target: Any, payload: Any) -> Any:
    """
    Validate *payload* against *target* and return the decoded value.

    A class (model, dataclass, ``List[Item]`` …) yields a new instance.
    An instance is filled in place, only after the whole document has
    validated, and only with the fields present in the document.
    """
    if isinstance(target, type) and issubclass(target, BaseModel):
        return target.model_validate(payload)
    if isinstance(target, BaseModel):
        model = type(target)
        if model.model_config.get("frozen"):
            raise TypeError(f"decode target {model.__name__} is frozen")
        decoded = model.model_validate(payload)
        for name in decoded.model_fields_set:
            setattr(target, name, getattr(decoded, name))
        return target
    if is_dataclass(target) and not isinstance(target, type):
        if target.__dataclass_params__.frozen:
            raise TypeError(f"decode target {type(target).__name__} is frozen")
        decoded = TypeAdapter(type(target)).validate_python(payload)
        for f in fields(target):
            if f.name in payload:
                setattr(target, f.name, getattr(decoded, f.name))
        return target
    if isinstance(target, MutableMapping):
        target.update(TypeAdapter(Dict[str, Any]).validate_python(payload))
        return target
    if isinstance(target, list):
        target[:] = TypeAdapter(List[Any]).validate_python(payload)
        return target
    if isinstance(target, type) or getattr(target, "__origin__", None) is not None:
        return TypeAdapter(target).validate_python(payload)
    raise TypeError(f"unsupported decode target {type(target).__name__}")


def parse_json_response(response: requests.Response, target: Any = None) -> Any:
    """
    Validate the status and decode the JSON body into *target*.

    Status outside 200–299 raises `HTTPStatusError` without reading the
    body.  Malformed JSON, or JSON that does not fit *target*, raises
    `ResponseDecodeError` chained to the underlying error.  Returns the
    decoded value (the raw document when *target* is None).  The
    response is consumed but not closed.
    """
    status = response.status_code
    if not 200 <= status < 300:
        raise HTTPStatusError(status, getattr(response, "url", None))
    try:
        payload = response.json()
    except ValueError as exc:
        raise ResponseDecodeError(f"invalid JSON body: {exc}") from exc
    if target is None:
        return payload
    try:
        return _decode_into(target, payload)
    except ValidationError as exc:
        raise ResponseDecodeError(f"response does not match target: {exc}") from exc


# ───── EXECUTOR ────────────────────────────────────────────────────────
class RequestExecutor:
    """Sends requests through an injected client and decodes JSON replies."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self.session = session if session is not None else build_session()
        self.log = log or null_logger()

    def execute(self, config: HTTPRequestConfig) -> requests.Response:
        if not config.url:
            raise ValueError("request url is empty")
        if not config.method:
            raise ValueError("request method is empty")
        method = config.method.upper()
        self.log.debug("%s %s", method, config.url)
        return self.session.request(
            method,
            config.url,
            headers=dict(config.headers) if config.headers else None,
            data=config.body,
            stream=True,
        )

    def send_json(
        self,
        url: str,
        method: str,
        payload: Any,
        extra_headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        try:
            body = json.dumps(payload, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise PayloadEncodeError(f"cannot encode payload as JSON: {exc}") from exc

        headers: CaseInsensitiveDict = CaseInsensitiveDict({HDR_CONTENT_TYPE: CONTENT_JSON})
        if extra_headers:
            headers.update(extra_headers)
        return self.execute(HTTPRequestConfig(url=url, method=method, headers=headers, body=body))

    def decode(self, response: requests.Response, target: Any = None) -> Any:
        try:
            return parse_json_response(response, target)
        except (HTTPStatusError, ResponseDecodeError) as exc:
            self.log.warning("decode %s failed – %s", getattr(response, "url", "?"), exc)
            raise

    def fetch_json(
        self,
        url: str,
        method: str,
        payload: Any = None,
        target: Any = None,
        extra_headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """
        Build, send and decode in one go; the response is always closed.
        Without a payload the request goes out bodyless.
        """
        if payload is None:
            resp = self.execute(HTTPRequestConfig(url=url, method=method, headers=extra_headers))
        else:
            resp = self.send_json(url, method, payload, extra_headers)
        try:
            return self.decode(resp, target)
        finally:
            resp.close()


# ───── FUNCTIONAL FORMS ────────────────────────────────────────────────
def make_http_request(config: HTTPRequestConfig, session: requests.Session) -> requests.Response:
    return RequestExecutor(session).execute(config)


def make_json_request(
    url: str,
    method: str,
    payload: Any,
    extra_headers: Optional[Mapping[str, str]],
    session: requests.Session,
) -> requests.Response:
    return RequestExecutor(session).send_json(url, method, payload, extra_headers)


__all__ = [
    "HTTPRequestConfig", "TimeoutSession", "build_session",
    "RequestExecutor", "make_http_request", "make_json_request",
    "parse_json_response",
]
