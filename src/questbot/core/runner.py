"""Turn execution engine.

The Runner brings together an App (handler registry) and a Channel (the
inbound activity plus a way to send replies). It manages one turn:
- Generates a unique turn ID
- Sets up per-turn file logging
- Invokes the handler registered for the activity type
- Provides reply, trace and error reporting utilities
- Handles turn failures

Each Runner instance represents a single turn.
"""
from __future__ import annotations

import logging
import os
import uuid

from datetime import datetime
from typing import Any, NoReturn

from questbot.core.activity import Activity
from questbot.core.app import App, Handler, handler_name
from questbot.core.domain import Channel, TurnFailedError


class Runner:
    """Executes a turn by invoking the handler for the inbound activity.

    Each Runner instance is specific to a single turn and includes:
    - A unique 8-character hex ID for tracking
    - A dedicated file logger writing to app.log_dir
    - Methods for replying to the user that delegate to the channel
    - A fail() method for ending the turn with a message to the user

    Attributes:
        id: Unique 8-character hex identifier for this turn.
        channel: The Channel holding the inbound activity and delivering replies.
        app: The App containing registered turn handlers.
        logger: Per-turn file logger instance.
    """
    def __init__(self, app: App, channel: Channel) -> None:
        """Initialize a new Runner instance.

        Creates a unique turn ID, sets up a dedicated file logger in
        app.log_dir, and stores references to the app and channel.

        Args:
            app: The App instance containing registered handlers.
            channel: The Channel carrying the activity to process.
        """
        self.id: str = uuid.uuid4().hex[:8]
        self.channel = channel
        self.app = app

        timestamp = datetime.now().strftime('%Y%m%d%H%M%S')

        # Set up per-turn file logger
        os.makedirs(app.log_dir, exist_ok=True)
        log_path = os.path.join(app.log_dir, f"{timestamp}-{self.id}.log")
        self.logger = logging.getLogger(f"questbot.turn.{self.id}")
        self.logger.setLevel(logging.DEBUG)
        self._file_handler = logging.FileHandler(log_path)
        self._file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s"))
        self.logger.addHandler(self._file_handler)
        self.logger.propagate = False

        self.logger.info(f"Runner initialized: turn_id={self.id}, activity_type={self.activity.type}")
        self.logger.debug(f"Log file: {log_path}")
        self.logger.debug(f"Channel type: {self.channel.type}")

    @property
    def activity(self) -> Activity:
        """Get the inbound activity from the channel."""
        return self.channel.activity

    @property
    def handler(self) -> Handler:
        """Get the handler for the inbound activity's type from the app."""
        return self.app.get_handler(handler_name(self.activity.type))

    def run(self) -> None:
        """Execute the turn handler.

        Any exception raised by the handler is logged and re-raised.
        """
        self.logger.info(f"Turn started: {self.activity.type}")
        self.logger.debug(f"Inbound activity: {self.activity.to_wire()}")
        try:
            self.handler(self, self.activity)
        except Exception as e:
            self.logger.error(f"Turn failed: {self.activity.type} - {type(e).__name__}: {e}")
            raise
        finally:
            self.logger.info(f"Turn finished: {self.activity.type}")

    def close(self) -> None:
        """Detach and close the per-turn log file and unregister the turn logger."""
        self.logger.removeHandler(self._file_handler)
        self._file_handler.close()
        logging.Logger.manager.loggerDict.pop(self.logger.name, None)

    def send_activity(self, activity: Activity) -> None:
        """Send an outbound activity through the channel.

        Args:
            activity: The activity to send.
        """
        self.logger.debug(f"Sending activity: {activity.to_wire()}")
        self.channel.send_activity(self.id, activity)

    def reply(self, text: str) -> None:
        """Reply to the user with a message.

        Args:
            text: Message text.
        """
        self.logger.info(f"Reply: {text}")
        self.send_activity(self.activity.create_reply(text=text))

    def send_trace(self, name: str, value: Any = None, value_type: str | None = None, label: str | None = None) -> None:
        """Send a trace activity, which is only displayed by developer tools such as the Emulator.

        Args:
            name: Trace name.
            value: Trace payload.
            value_type: Type URI describing the payload.
            label: Short description of the trace.
        """
        self.send_activity(self.activity.create_reply(
            type="trace", name=name, value=value, value_type=value_type, label=label,
        ))

    def report_error(self, message: str) -> None:
        """Report an error to the user.

        Args:
            message: Error message to send.
        """
        self.logger.error(f"Error reported: {message}")
        self.send_activity(self.activity.create_reply(text=message))

    def fail(self, message: str) -> NoReturn:
        """Fail the turn by raising TurnFailedError.

        Args:
            message: Message describing the failure, shown to the user.

        Raises:
            TurnFailedError: Always raised to signal turn failure.
        """
        self.logger.error(f"Turn fatal error: {message}")
        raise TurnFailedError(message)
