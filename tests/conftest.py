"""Shared pytest fixtures and test utilities.

This module provides test doubles and factory fixtures for testing questbot
handlers without I/O side effects.
"""

import tempfile

import pytest

from questbot.core.activity import Activity, ChannelAccount, ConversationAccount
from questbot.core.app import App
from questbot.core.runner import Runner


def make_activity(text: str | None = "hello", type: str = "message", **fields) -> Activity:
    """Build an inbound activity as a Bot Framework channel would send it."""
    defaults = {
        "id": "act-1",
        "channel_id": "emulator",
        "service_url": "http://connector.test",
        "conversation": ConversationAccount(id="conv-1"),
        "from_": ChannelAccount(id="user-1", name="User"),
        "recipient": ChannelAccount(id="bot-1", name="Bot"),
    }
    return Activity(type=type, text=text, **{**defaults, **fields})


class TestChannel:
    """In-memory test double for turn channels.

    Captures outbound activities without performing I/O, enabling
    verification of framework behavior in tests.
    """
    __test__ = False

    def __init__(self, activity: Activity) -> None:
        self.type = "test"
        self.activity = activity
        self.sent: list[Activity] = []

    def send_activity(self, turn_id: str, activity: Activity) -> None:
        """Capture an outbound activity.

        Args:
            turn_id: Unique identifier for the turn.
            activity: Activity to capture.
        """
        self.sent.append(activity)

    @property
    def texts(self) -> list[str | None]:
        """Text of every captured message activity."""
        return [a.text for a in self.sent if a.type == "message"]


@pytest.fixture
def app():
    """Provide a fresh App with logs directed to a temp directory.

    Returns:
        App: A configured App instance with an isolated log directory.
    """
    return App(log_dir=tempfile.mkdtemp())


@pytest.fixture
def runner_factory(app):
    """Factory fixture for creating test runners with capturing channels.

    Returns a factory function that creates a Runner with a TestChannel,
    allowing tests to exercise handlers and inspect captured activities.

    Args:
        app: The App fixture providing the test application instance.

    Returns:
        Callable: Factory function that creates (Runner, TestChannel) tuples.
    """

    def _create(test_app: App | None = None, activity: Activity | None = None):
        """Create a Runner and TestChannel pair for testing.

        Args:
            test_app: Optional App instance to use (defaults to fixture app).
            activity: Inbound activity (defaults to a "hello" message).

        Returns:
            tuple: (Runner, TestChannel) pair for testing.
        """
        channel = TestChannel(activity or make_activity())
        runner = Runner(test_app or app, channel)
        return runner, channel
    return _create
