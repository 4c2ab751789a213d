"""Tests for the step orchestrator."""

import json
import logging

import pytest

from fleep_notify.client import WebhookResponse
from fleep_notify.errors import MissingMessage, MissingWebhookURL, WebhookRejected
from fleep_notify.models import StepConfig
from fleep_notify.step import run_step


class RecordingTransport:
    def __init__(self, response: WebhookResponse) -> None:
        self.response = response
        self.calls = []
    
    def __call__(self, url, body, timeout=None):
        self.calls.append((url, body, timeout))
        return self.response


class TestRunStep:
    def test_sends_payload(self):
        transport = RecordingTransport(WebhookResponse(200, "ok"))
        config = StepConfig(
            webhook_url="https://fleep.io/hook/x",
            message="done\\nfine",
            from_username="bot",
        )
        
        response = run_step(config, timeout=3, transport=transport)
        
        assert response.status_code == 200
        url, body, timeout = transport.calls[0]
        assert url == "https://fleep.io/hook/x"
        assert json.loads(body) == {"message": "done\nfine", "user": "bot"}
        assert timeout == 3
    
    def test_missing_url_sends_nothing(self):
        transport = RecordingTransport(WebhookResponse(200, "ok"))
        
        with pytest.raises(MissingWebhookURL):
            run_step(StepConfig(message="hi"), transport=transport)
        
        assert transport.calls == []
    
    def test_missing_message_sends_nothing(self):
        transport = RecordingTransport(WebhookResponse(200, "ok"))
        
        with pytest.raises(MissingMessage):
            run_step(StepConfig(webhook_url="https://fleep.io/hook/x"), transport=transport)
        
        assert transport.calls == []
    
    def test_rejected(self):
        transport = RecordingTransport(WebhookResponse(200, "error: invalid token"))
        config = StepConfig(webhook_url="https://fleep.io/hook/x", message="hi")
        
        with pytest.raises(WebhookRejected):
            run_step(config, transport=transport)
        
        assert len(transport.calls) == 1
    
    def test_debug_logs_json_and_response(self, caplog):
        transport = RecordingTransport(WebhookResponse(200, "ok"))
        config = StepConfig(webhook_url="https://fleep.io/hook/x", message="hi", is_debug_mode=True)
        
        with caplog.at_level(logging.DEBUG, logger="fleep_notify"):
            run_step(config, transport=transport)
        
        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("JSON payload:") for m in messages)
        assert any(m.startswith("Response from Fleep:") for m in messages)
