"""Errors raised while running the Fleep step."""

from __future__ import annotations


class StepError(Exception):
    """Base class for every failure that ends a step run."""


class ConfigError(StepError):
    pass


class MissingWebhookURL(ConfigError):
    def __init__(self) -> None:
        super().__init__("No Webhook URL parameter specified")


class MissingMessage(ConfigError):
    def __init__(self) -> None:
        super().__init__("No Message parameter specified")


class PayloadBuildError(StepError):
    pass


class RequestTransportError(StepError):
    """The request never produced an HTTP response."""

    def __init__(self, url: str, reason: Exception) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")


class WebhookRejected(StepError):
    """The webhook answered, but not with ``200 ok``."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Webhook responded with status {status_code}: {body}")
