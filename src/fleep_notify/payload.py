"""Builds the Fleep webhook payload from the step configuration."""

from __future__ import annotations

import logging

from fleep_notify.models import Payload, StepConfig

logger = logging.getLogger(__name__)


def ensure_newline_escape_char(text: str) -> str:
    """Replace literal backslash-n sequences with real newlines."""
    return text.replace("\\" + "n", "\n")


def _select_message(config: StepConfig) -> str:
    if not config.is_build_failed:
        return config.message
    if not config.message_on_error:
        logger.warning("Build failed but no message_on_error defined, using default.")
        return config.message
    return config.message_on_error


def _select_username(config: StepConfig) -> str | None:
    username = config.from_username or None
    if config.is_build_failed:
        if config.from_username_on_error:
            username = config.from_username_on_error
        else:
            logger.warning("Build failed but no from_username_on_error defined, using default.")
    return username


def build_payload(config: StepConfig) -> Payload:
    """Resolve the message text and sender name for this run."""
    payload = Payload(
        message=ensure_newline_escape_char(_select_message(config)),
        username=_select_username(config),
    )
    logger.debug(f"Parameters: {payload!r}")
    return payload
