"""Core domain types and protocols for questbot.

This module defines the fundamental types used throughout the framework:
- TurnFailedError: raised by Runner.fail() to end a turn with a message
- Channel: Protocol for delivering the bot's outbound activities

These types form the foundation for handler signatures and runner operations.
"""
from typing import Protocol

from questbot.core.activity import Activity


class TurnFailedError(Exception):
    """Raised by Runner.fail() to signal that a turn cannot be completed.

    The message is shown to the user as-is, unlike unexpected exceptions which
    are reported through the generic turn error handler.
    """


class Channel(Protocol):
    """Protocol for channels that carry one turn's inbound and outbound activities.

    Channels serve as I/O boundaries for bot turns: they hold the inbound
    activity being processed and decide how replies reach the user.
    Implementations adapt handlers to different environments like the Bot
    Framework connector or a local terminal.

    Attributes:
        type: The channel type identifier (e.g., "activity", "cli").
        activity: The inbound activity this turn processes.
    """
    type: str
    activity: Activity

    def send_activity(self, turn_id: str, activity: Activity) -> None:
        """Deliver an outbound activity.

        Args:
            turn_id: Unique identifier for the turn.
            activity: The activity to deliver.
        """
        ...
