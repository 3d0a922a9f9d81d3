"""Tests for the FastAPI messages server.

Tests server initialization, the /api/messages endpoint for both delivery
modes, turn error handling, and request validation.
"""

import os
import tempfile
import textwrap
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from questbot.http import ERROR_MESSAGES
from questbot.server import create_app


@pytest.fixture()
def client():
    """Create a test client with a temporary handlers file."""
    log_dir = tempfile.mkdtemp()
    handlers_code = textwrap.dedent(f"""\
        from questbot.core.app import App

        app = App(log_dir="{log_dir}")

        @app.handler
        def message(runner, activity):
            if activity.text == "explode":
                raise RuntimeError("kaboom")
            if activity.text == "give up":
                runner.fail("Not today.")
            runner.reply(f"echo: {{activity.text}}")
    """)
    with tempfile.NamedTemporaryFile(mode="w", suffix=".py", delete=False) as f:
        f.write(handlers_code)
        f.flush()
        handlers_path = f.name

    try:
        api = create_app(handlers_path)
        yield TestClient(api)
    finally:
        os.unlink(handlers_path)


def _activity(text="hello", **fields):
    """Helper to build an inbound message activity payload."""
    return {
        "type": "message",
        "id": "act-1",
        "channelId": "emulator",
        "serviceUrl": "http://connector.test",
        "conversation": {"id": "conv-1"},
        "from": {"id": "user-1"},
        "recipient": {"id": "bot-1"},
        "text": text,
        **fields,
    }


class TestMessagesEndpoint:
    """Test suite for the /api/messages endpoint."""

    def test_expect_replies_returns_activities(self, client):
        """Test that replies are returned in the body for expectReplies delivery."""
        response = client.post("/api/messages", json=_activity(deliveryMode="expectReplies"))
        assert response.status_code == 200
        [reply] = response.json()["activities"]
        assert reply["text"] == "echo: hello"
        assert reply["from"] == {"id": "bot-1"}
        assert reply["recipient"] == {"id": "user-1"}
        assert reply["replyToId"] == "act-1"

    @patch("questbot.channels.activity.httpx.Client")
    def test_normal_delivery_posts_to_connector(self, mock_client_cls, client):
        """Test that replies are posted to the connector and the body is empty."""
        mock_client = MagicMock()
        mock_client_cls.return_value.__enter__ = MagicMock(return_value=mock_client)
        mock_client_cls.return_value.__exit__ = MagicMock(return_value=False)

        response = client.post("/api/messages", json=_activity())
        assert response.status_code == 200
        assert response.content == b""
        url = mock_client.post.call_args[0][0]
        assert url == "http://connector.test/v3/conversations/conv-1/activities/act-1"
        assert mock_client.post.call_args[1]["json"]["text"] == "echo: hello"

    def test_handler_error_reported_to_user(self, client):
        """Test that unexpected handler errors produce a trace and apology."""
        response = client.post("/api/messages", json=_activity("explode", deliveryMode="expectReplies"))
        assert response.status_code == 200
        trace, *messages = response.json()["activities"]
        assert trace["type"] == "trace"
        assert trace["value"] == "kaboom"
        assert [m["text"] for m in messages] == list(ERROR_MESSAGES)

    def test_turn_failure_message_sent(self, client):
        """Test that Runner.fail messages reach the user."""
        response = client.post("/api/messages", json=_activity("give up", deliveryMode="expectReplies"))
        assert [a["text"] for a in response.json()["activities"]] == ["Not today."]

    def test_unhandled_activity_type_acknowledged(self, client):
        """Test that activity types without a handler are acknowledged."""
        response = client.post("/api/messages", json=_activity(type="typing", deliveryMode="expectReplies"))
        assert response.status_code == 200
        assert response.json() == {"activities": []}

    def test_invalid_body_returns_422(self, client):
        """Test that a body without an activity type is rejected."""
        response = client.post("/api/messages", json={})
        assert response.status_code == 422

    def test_healthz(self, client):
        assert client.get("/healthz").json() == {"status": "ok"}


def test_handlers_file_from_environment(monkeypatch):
    """Test that QUESTBOT_HANDLERS_FILE selects the handlers file."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".py", delete=False) as f:
        f.write(f"from questbot.core.app import App\napp = App(log_dir={tempfile.mkdtemp()!r})\n")
        handlers_path = f.name
    try:
        monkeypatch.setenv("QUESTBOT_HANDLERS_FILE", handlers_path)
        client = TestClient(create_app())
        assert client.get("/healthz").status_code == 200
    finally:
        os.unlink(handlers_path)
