"""Fleep notify - send a CI build message to a Fleep conversation."""

__version__ = "0.1.0"

from fleep_notify.models import StepConfig, Payload
from fleep_notify.payload import build_payload
from fleep_notify.client import WebhookResponse, post_json, check_response
from fleep_notify.step import run_step
from fleep_notify.errors import (
    StepError,
    ConfigError,
    MissingWebhookURL,
    MissingMessage,
    PayloadBuildError,
    RequestTransportError,
    WebhookRejected,
)

__all__ = [
    "StepConfig",
    "Payload",
    "build_payload",
    "WebhookResponse",
    "post_json",
    "check_response",
    "run_step",
    "StepError",
    "ConfigError",
    "MissingWebhookURL",
    "MissingMessage",
    "PayloadBuildError",
    "RequestTransportError",
    "WebhookRejected",
]
