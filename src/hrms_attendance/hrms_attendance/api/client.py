from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import requests

from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = 10.0


def flatten_error_messages(payload: Any) -> str:
    """Join every message of a field-error body into one line.

    ``{"email": ["Enter a valid email."], "employeeId": ["Already exists."]}``
    becomes ``"Enter a valid email. Already exists."``.
    """
    if isinstance(payload, dict):
        values = list(payload.values())
    elif isinstance(payload, list):
        values = payload
    else:
        return str(payload) if payload else ""

    parts: list[str] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            parts.extend(str(v) for v in value)
        else:
            parts.append(str(value))
    return " ".join(parts)


class ApiClient:
    """JSON client for the HRMS REST backend.

    Note: We open a short-lived ``requests.Session`` per request, so one client
    can serve several threads. Paths are relative to the base URL
    (``employees/``, ``attendance/``).
    """

    def __init__(
        self,
        config: ApiConfig,
        *,
        session_factory: Optional[Callable[[], requests.Session]] = None,
    ):
        self._config = config
        self._base_url = config.base_url if config.base_url.endswith("/") else config.base_url + "/"
        self._session_factory = session_factory or requests.Session

    def url_for(self, path: str) -> str:
        return self._base_url + path.lstrip("/")

    def get(self, path: str) -> Any:
        return self._request("GET", path)

    def post(self, path: str, payload: dict) -> Any:
        return self._request("POST", path, json=payload)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = self.url_for(path)
        logger.debug("%s %s", method, url)
        try:
            with self._session_factory() as session:
                session.headers.update({"Content-Type": "application/json"})
                resp = session.request(method, url, timeout=self._config.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("Request %s %s failed: %s", method, url, e)
            raise ApiError(f"Could not reach the HRMS backend ({e.__class__.__name__})") from e

        if resp.status_code >= 400:
            body = _decode_json(resp)
            field_errors = body if isinstance(body, dict) else None
            message = flatten_error_messages(body) or f"HRMS backend returned HTTP {resp.status_code}"
            logger.warning("%s %s -> %s: %s", method, url, resp.status_code, message)
            raise ApiError(message, status_code=resp.status_code, field_errors=field_errors)

        return _decode_json(resp)


def _decode_json(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return None


def expect_object_list(payload: Any, path: str) -> list[dict]:
    """The body of a collection endpoint, which must be a JSON array of objects."""
    if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
        logger.error("Unexpected response from %s: %.200r", path, payload)
        raise ApiError(f"Unexpected response from the HRMS backend for {path}")
    return payload
