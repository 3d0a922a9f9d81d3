"""CLI channel implementation for questbot.

Prints the bot's replies for turns driven from the command line.
"""
import json
import logging
import sys

from questbot.core.activity import Activity, ChannelAccount, ConversationAccount

logger = logging.getLogger("questbot.channels.cli")


class CliChannel:
    """Channel adapter for turns run from a terminal.

    Message replies are written to stdout and trace activities to stderr.
    """

    def __init__(self, text: str, activity_type: str = "message") -> None:
        """Initialize CLI channel with a synthetic inbound activity.

        Args:
            text: Text of the inbound message.
            activity_type: Type of the inbound activity. Defaults to "message".
        """
        self.type = "cli"
        self.activity = Activity(
            type=activity_type,
            id="cli-1",
            channel_id="cli",
            conversation=ConversationAccount(id="cli"),
            from_=ChannelAccount(id="user", name="User"),
            recipient=ChannelAccount(id="bot", name="Bot"),
            text=text,
        )
        logger.debug(f"CliChannel initialized: activity_type={activity_type}")

    def send_activity(self, turn_id: str, activity: Activity) -> None:
        """Print an outbound activity.

        Args:
            turn_id: Unique identifier for the turn.
            activity: The activity to print.
        """
        logger.debug(f"Activity [{turn_id}]: {activity.type}")
        if activity.type == "trace":
            print(f"[trace, {turn_id}] {activity.name}: {json.dumps(activity.value)}", file=sys.stderr, flush=True)
        else:
            print(f"[{activity.type}, {turn_id}] {activity.text or ''}", flush=True)
