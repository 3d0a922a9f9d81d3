"""Application framework for registering and managing turn handlers.

This module provides:
- App: Central registry for turn handlers with decorator-based registration
- handler_name: Maps an activity type to the name of the handler that serves it

The App class is the main entry point for defining a bot. Use the @app.handler
decorator to register turn functions, then pass the app to the server or CLI.
"""
from __future__ import annotations

import functools
import re
from typing import Callable, TYPE_CHECKING

from questbot.core.activity import Activity

if TYPE_CHECKING:
    from questbot.core.runner import Runner


type Handler = Callable[[Runner, Activity], None]


def handler_name(activity_type: str) -> str:
    """Convert an activity type to its handler name.

    Args:
        activity_type: Bot Framework activity type, e.g. "conversationUpdate".

    Returns:
        The snake_case handler name, e.g. "conversation_update".
    """
    return re.sub(r"(?<!^)(?=[A-Z])", "_", activity_type).lower()


class App:
    """Central registry for turn handlers.

    Each incoming activity is routed to the handler whose name matches the
    activity type in snake_case: "message" activities go to a handler named
    `message`, "conversationUpdate" to `conversation_update`.

    Typical usage:
        app = App(log_dir="logs/")

        @app.handler
        def message(runner: Runner, activity: Activity) -> None:
            runner.reply(f"You said: {activity.text}")

    Attributes:
        handlers: Dictionary mapping handler names to their functions.
        log_dir: Directory path where Runner instances will write log files.
    """
    def __init__(self, log_dir: str = "bot/logs/") -> None:
        """Initialize a new App instance with an empty handler registry.

        Args:
            log_dir: Directory for per-turn log files. Defaults to "bot/logs/".
        """
        self.handlers: dict[str, Handler] = {}
        self.log_dir = log_dir

    def handler(self, fn: Handler) -> Handler:
        """Register a function as a turn handler.

        The handler's name becomes its registry key for lookup by runners.

        Args:
            fn: A callable that accepts a Runner and the inbound Activity.

        Returns:
            The wrapped handler function.
        """
        @functools.wraps(fn)
        def wrapper(runner: Runner, activity: Activity) -> None:
            return fn(runner, activity)

        name: str = fn.__name__  # type: ignore[attr-defined]
        self.handlers[name] = fn
        return wrapper

    def get_handler(self, name: str) -> Handler:
        """Retrieve a registered handler by name.

        Args:
            name: The handler function name to retrieve.

        Returns:
            The handler callable that accepts a Runner and Activity.

        Raises:
            ValueError: If no handler with the given name is registered.
        """
        try:
            return self.handlers[name]
        except KeyError:
            raise ValueError(f"Unknown handler: {name}")

    def handles(self, activity: Activity) -> bool:
        """Check whether a handler is registered for the activity's type."""
        return handler_name(activity.type) in self.handlers
