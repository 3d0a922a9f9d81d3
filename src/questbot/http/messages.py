"""Messages endpoint logic for Bot Framework activities."""
import asyncio

from fastapi import Response
from fastapi.responses import JSONResponse

from questbot.channels.activity import ActivityChannel
from questbot.core.activity import Activity
from questbot.core.app import App
from questbot.http import process_activity


async def handle_activity(activity: Activity, questbot_app: App) -> Response:
    """Handle an incoming activity posted by a Bot Framework channel.

    Runs the turn in a worker thread so blocking handler code does not stall
    the event loop. When the channel asked for "expectReplies" the replies are
    returned in the response body; otherwise they have already been posted to
    the connector service and the body is empty.

    Args:
        activity: The inbound activity.
        questbot_app: The questbot application instance with registered handlers.

    Returns:
        A 200 response, with {"activities": [...]} for expectReplies.
    """
    channel = ActivityChannel(activity)
    await asyncio.to_thread(process_activity, questbot_app, channel)
    if channel.expects_replies:
        return JSONResponse({"activities": channel.replies})
    return Response(status_code=200)
