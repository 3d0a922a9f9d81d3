"""HTTP package for the questbot server.

Provides the adapter logic shared by HTTP route handlers and the CLI: running
one turn and reporting errors that escape the handler.
"""
import logging

from questbot.core.app import App
from questbot.core.domain import Channel, TurnFailedError
from questbot.core.runner import Runner

logger = logging.getLogger("questbot.http")

ERROR_TRACE_VALUE_TYPE = "https://www.botframework.com/schemas/error"
ERROR_MESSAGES = (
    "The bot encountered an error or bug.",
    "To continue to run this bot, please fix the bot source code.",
)


def on_turn_error(runner: Runner, error: Exception) -> None:
    """Report an unexpected turn error to the logs and to the user.

    Sends a trace activity, displayed in the Bot Framework Emulator, followed
    by a generic apology to the user.

    Args:
        runner: The Runner whose handler raised.
        error: The exception raised by the handler.
    """
    logger.error(f"[on_turn_error] unhandled error: {error}", exc_info=error)
    runner.send_trace("OnTurnError Trace", str(error), ERROR_TRACE_VALUE_TYPE, "TurnError")
    for message in ERROR_MESSAGES:
        runner.reply(message)


def process_activity(app: App, channel: Channel) -> bool:
    """Run the turn for a channel's inbound activity.

    Activities with no registered handler are acknowledged and ignored.
    TurnFailedError messages are sent to the user as-is; any other exception
    goes through on_turn_error. Nothing is raised.

    Args:
        app: The App instance with registered handlers.
        channel: The Channel carrying the inbound activity.

    Returns:
        True if the turn completed (or was ignored), False if it failed.
    """
    if not app.handles(channel.activity):
        logger.info(f"No handler for activity type {channel.activity.type!r}, ignoring")
        return True

    runner = Runner(app, channel)
    try:
        runner.run()
        return True
    except TurnFailedError as e:
        runner.report_error(str(e))
        return False
    except Exception as e:
        on_turn_error(runner, e)
        return False
    finally:
        runner.close()
