"""Configuration and constants for the Fleep step."""

ENV_WEBHOOK_URL = "webhook_url"
ENV_FROM_USERNAME = "from_username"
ENV_FROM_USERNAME_ON_ERROR = "from_username_on_error"
ENV_MESSAGE = "message"
ENV_MESSAGE_ON_ERROR = "message_on_error"
ENV_DEBUG_MODE = "is_debug_mode"
ENV_BUILD_STATUS = "STEPLIB_BUILD_STATUS"
ENV_REQUEST_TIMEOUT = "request_timeout"

DEBUG_MODE_ENABLED = "yes"
BUILD_STATUS_SUCCESS = "0"

CONTENT_TYPE_JSON = "application/json"
EXPECTED_STATUS = 200
EXPECTED_BODY = "ok"
