"""Bot Framework channel implementation.

Delivers replies either in the HTTP response (delivery mode "expectReplies")
or by posting them to the channel's connector service via synchronous
httpx.Client calls.
"""
import logging
from urllib.parse import quote

import httpx

from questbot.core.activity import Activity

logger = logging.getLogger("questbot.channels.activity")


class ActivityChannel:
    """Channel implementation for activities received from a Bot Framework channel.

    Uses synchronous httpx because handler code runs in a threadpool via
    asyncio.to_thread.

    Attributes:
        type: Channel type identifier ("activity").
        activity: The inbound activity this turn processes.
        replies: Serialized replies buffered for the HTTP response.
    """

    def __init__(self, activity: Activity) -> None:
        """Initialize an ActivityChannel instance.

        Args:
            activity: The inbound activity this turn processes.
        """
        self.type = "activity"
        self.activity = activity
        self.replies: list[dict] = []
        logger.debug(f"ActivityChannel initialized: channel_id={activity.channel_id}, expects_replies={self.expects_replies}")

    @property
    def expects_replies(self) -> bool:
        """Whether replies are returned in the HTTP response instead of posted."""
        return self.activity.delivery_mode == "expectReplies"

    def _reply_url(self) -> str | None:
        activity = self.activity
        if not activity.service_url or activity.conversation is None:
            return None
        url = f"{activity.service_url.rstrip('/')}/v3/conversations/{quote(activity.conversation.id, safe='')}/activities"
        if activity.id:
            url += f"/{quote(activity.id, safe='')}"
        return url

    def _post(self, payload: dict) -> None:
        """Post an activity to the connector service.

        Logs errors but does not raise exceptions.

        Args:
            payload: Serialized activity to post.
        """
        url = self._reply_url()
        if url is None:
            logger.warning("Inbound activity has no serviceUrl or conversation, dropping reply")
            return
        try:
            with httpx.Client() as client:
                response = client.post(url, json=payload)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error(f"Failed to post activity to {url}: {exc}")

    def send_activity(self, turn_id: str, activity: Activity) -> None:
        """Deliver an outbound activity.

        Args:
            turn_id: Unique identifier for the turn.
            activity: The activity to deliver.
        """
        payload = activity.to_wire()
        if self.expects_replies:
            self.replies.append(payload)
            return
        logger.debug(f"[{turn_id}] posting {activity.type} activity")
        self._post(payload)
