"""Webhook client - posts the payload and interprets Fleep's answer."""

from __future__ import annotations

import http.client
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass

from fleep_notify.config import CONTENT_TYPE_JSON, EXPECTED_BODY, EXPECTED_STATUS
from fleep_notify.errors import RequestTransportError, WebhookRejected

logger = logging.getLogger(__name__)

TRANSPORT_ERRORS = (urllib.error.URLError, http.client.HTTPException, OSError, ValueError)


@dataclass
class WebhookResponse:
    status_code: int
    body: str


def _read_text(response) -> str:
    return response.read().decode("utf-8", errors="replace")


def post_json(url: str, body: bytes, timeout: float | None = None) -> WebhookResponse:
    """POST ``body`` to ``url`` once and return the status and full body.

    HTTP error statuses come back as a normal response; only failures that
    leave us without any response raise :class:`RequestTransportError`.
    ``timeout`` of ``None`` keeps the socket default.
    """
    headers = {"Content-Type": CONTENT_TYPE_JSON}

    try:
        req = urllib.request.Request(url, data=body, headers=headers, method="POST")
    except ValueError as e:
        raise RequestTransportError(url, e) from e

    kwargs = {}
    if timeout is not None:
        kwargs["timeout"] = timeout

    logger.debug(f"POST {url}")

    try:
        with urllib.request.urlopen(req, **kwargs) as response:
            return WebhookResponse(status_code=response.status, body=_read_text(response))
    except urllib.error.HTTPError as e:
        error = e
    except TRANSPORT_ERRORS as e:
        raise RequestTransportError(url, e) from e

    # The error body is still on the wire and can fail just like a 2xx one.
    try:
        with error:
            return WebhookResponse(status_code=error.code, body=_read_text(error))
    except TRANSPORT_ERRORS as e:
        raise RequestTransportError(url, e) from e


def check_response(response: WebhookResponse) -> None:
    """Accept only ``200`` with an ``ok`` body."""
    if response.status_code != EXPECTED_STATUS or response.body.strip() != EXPECTED_BODY:
        raise WebhookRejected(response.status_code, response.body)
