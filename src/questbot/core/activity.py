"""Bot Framework activity models.

Activities are the JSON envelopes exchanged with a Bot Framework channel.
Only the fields the bot reads or writes are declared; everything else is
kept as extra data so that round-tripping an activity does not lose it.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChannelAccount(BaseModel):
    """A user or bot taking part in a conversation."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    name: str | None = None


class ConversationAccount(BaseModel):
    """The conversation an activity belongs to."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    name: str | None = None


class Activity(BaseModel):
    """A Bot Framework activity.

    Attributes:
        type: Activity type, e.g. "message", "conversationUpdate" or "trace".
        id: Channel-assigned activity ID.
        channel_id: Channel the activity came from ("msteams", "emulator", ...).
        service_url: Base URL of the channel's connector service.
        conversation: Conversation the activity belongs to.
        from_: Sender of the activity.
        recipient: Receiver of the activity.
        text: Message text.
        delivery_mode: "expectReplies" when the channel wants replies in the HTTP response.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str
    id: str | None = None
    timestamp: str | None = None
    channel_id: str | None = Field(default=None, alias="channelId")
    service_url: str | None = Field(default=None, alias="serviceUrl")
    conversation: ConversationAccount | None = None
    from_: ChannelAccount | None = Field(default=None, alias="from")
    recipient: ChannelAccount | None = None
    text: str | None = None
    name: str | None = None
    label: str | None = None
    value: Any = None
    value_type: str | None = Field(default=None, alias="valueType")
    reply_to_id: str | None = Field(default=None, alias="replyToId")
    delivery_mode: str | None = Field(default=None, alias="deliveryMode")
    members_added: list[ChannelAccount] | None = Field(default=None, alias="membersAdded")

    def create_reply(self, type: str = "message", **fields: Any) -> "Activity":
        """Create an outbound activity addressed back to the sender of this one.

        Args:
            type: Type of the reply activity.
            **fields: Additional activity fields, by attribute name (e.g. text, value_type).

        Returns:
            A new Activity with conversation, from/recipient and replyToId filled in.
        """
        return Activity(
            type=type,
            channel_id=self.channel_id,
            service_url=self.service_url,
            conversation=self.conversation,
            from_=self.recipient,
            recipient=self.from_,
            reply_to_id=self.id,
            **fields,
        )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON shape expected by Bot Framework channels."""
        return self.model_dump(by_alias=True, exclude_none=True)
