"""GET + JSON decoding shared by every endpoint.

Turns the three ways a call can go wrong into typed errors:
- no response at all -> TransportError
- a body that is not a JSON object -> ResponseDecodeError
- a non-200 status -> ApiError carrying the ``error`` object of the body
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from ...domain.errors import ApiError, ResponseDecodeError, TransportError
from ...ports.http import HttpClientPort

logger = logging.getLogger(__name__)


def join_url(base_url: str, *paths: str) -> str:
    """Append path segments to a base URL, with exactly one slash between parts."""
    parts = [base_url.rstrip("/")]
    parts.extend(path.strip("/") for path in paths if path.strip("/"))
    return "/".join(parts)


def make_get_request(
    client: HttpClientPort,
    base_url: str,
    path: str,
    params: Optional[Mapping[str, str]] = None,
    headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """Send a GET request and return the decoded JSON object.

    Args:
        client: Transport to send the request with.
        base_url: Base URL, e.g. ``https://api.what3words.com/v3``.
        path: Endpoint path appended to the base URL.
        params: Query parameters.
        headers: Request headers.
        timeout: Seconds to wait for the server.

    Returns:
        The JSON body of a 200 response.

    Raises:
        TransportError: If the request could not be completed.
        ResponseDecodeError: If the body is not a JSON object.
        ApiError: If the status code is not 200.
    """
    url = join_url(base_url, path)
    logger.debug("GET request", extra={"url": url, "params": dict(params or {})})

    try:
        response = client.get(url, params=params, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("Request failed", extra={"url": url, "error": str(e)})
        raise TransportError(f"Request to {url} failed", cause=e, url=url) from e

    status = response.status_code
    try:
        body = response.json()
    except ValueError as e:
        raise ResponseDecodeError(
            f"Response from {url} is not valid JSON", cause=e, status_code=status
        ) from e
    if not isinstance(body, dict):
        raise ResponseDecodeError(
            f"Response from {url} is not a JSON object", status_code=status
        )

    if status != 200:
        error = body.get("error")
        if not isinstance(error, dict):
            error = {}
        logger.info(
            "API error response",
            extra={"url": url, "status": status, "code": error.get("code")},
        )
        raise ApiError(
            error.get("message") or f"unexpected HTTP status {status}",
            code=error.get("code", ""),
            status_code=status,
        )

    return body
