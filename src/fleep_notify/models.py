"""Data models for the Fleep step."""

from __future__ import annotations

from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import PydanticSerializationError

from fleep_notify.config import (
    BUILD_STATUS_SUCCESS,
    DEBUG_MODE_ENABLED,
    ENV_BUILD_STATUS,
    ENV_DEBUG_MODE,
    ENV_FROM_USERNAME,
    ENV_FROM_USERNAME_ON_ERROR,
    ENV_MESSAGE,
    ENV_MESSAGE_ON_ERROR,
    ENV_WEBHOOK_URL,
)
from fleep_notify.errors import MissingMessage, MissingWebhookURL, PayloadBuildError


class StepConfig(BaseModel):
    """Step inputs, read once at startup and never changed afterwards."""

    model_config = ConfigDict(frozen=True)

    # Fleep inputs
    webhook_url: str = ""
    from_username: str = ""
    from_username_on_error: str = ""
    message: str = ""
    message_on_error: str = ""
    # Other inputs
    is_debug_mode: bool = False
    # Derived from the CI environment
    is_build_failed: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> StepConfig:
        return cls(
            webhook_url=environ.get(ENV_WEBHOOK_URL, ""),
            from_username=environ.get(ENV_FROM_USERNAME, ""),
            from_username_on_error=environ.get(ENV_FROM_USERNAME_ON_ERROR, ""),
            message=environ.get(ENV_MESSAGE, ""),
            message_on_error=environ.get(ENV_MESSAGE_ON_ERROR, ""),
            is_debug_mode=environ.get(ENV_DEBUG_MODE) == DEBUG_MODE_ENABLED,
            is_build_failed=environ.get(ENV_BUILD_STATUS) != BUILD_STATUS_SUCCESS,
        )

    def check_required(self) -> None:
        """Raise for the first required input that is empty."""
        if not self.webhook_url:
            raise MissingWebhookURL()
        if not self.message:
            raise MissingMessage()


class Payload(BaseModel):
    message: str
    username: str | None = Field(default=None, serialization_alias="user")

    def to_json(self) -> bytes:
        """Serialize to the webhook body; ``user`` is left out when unset."""
        try:
            return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        except (PydanticSerializationError, ValidationError, UnicodeEncodeError) as e:
            raise PayloadBuildError(str(e)) from e
