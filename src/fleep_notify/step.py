"""Runs the Fleep step from validated input to accepted response."""

from __future__ import annotations

import logging
from typing import Callable

from fleep_notify.client import WebhookResponse, check_response, post_json
from fleep_notify.models import StepConfig
from fleep_notify.payload import build_payload

logger = logging.getLogger(__name__)

Transport = Callable[..., WebhookResponse]


def run_step(
    config: StepConfig,
    timeout: float | None = None,
    transport: Transport = post_json,
) -> WebhookResponse:
    """Send the configured message once.

    Raises a :class:`~fleep_notify.errors.StepError` subclass on any failure.
    Nothing is sent when the configuration is incomplete.
    """
    config.check_required()

    payload = build_payload(config)
    body = payload.to_json()
    logger.debug(f"JSON payload: {body.decode('utf-8')}")

    response = transport(config.webhook_url, body, timeout=timeout)
    check_response(response)

    logger.debug(f"Response from Fleep: {response.body}")
    return response
