"""questbot core framework components.

This module provides the core building blocks for bots that answer Bot
Framework activities with registered handlers.

The core framework consists of:
- App: Handler registry and decorator-based handler registration
- Runner: Per-turn execution with logging and reply utilities
- Activity: Bot Framework activity model
- Channel: Protocol for turn I/O boundaries
- TurnFailedError: Exception for ending a turn with a user-facing message

Typical usage:
    from questbot.core import App

    app = App()

    @app.handler
    def message(runner, activity):
        runner.reply(f"You said: {activity.text}")
"""

from questbot.core.activity import Activity, ChannelAccount, ConversationAccount
from questbot.core.app import App, handler_name
from questbot.core.domain import Channel, TurnFailedError
from questbot.core.runner import Runner

__all__ = [
    "Activity",
    "App",
    "Channel",
    "ChannelAccount",
    "ConversationAccount",
    "Runner",
    "TurnFailedError",
    "handler_name",
]
