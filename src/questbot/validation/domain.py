"""Types shared by response validators.

This module defines:
- TextMessage / StructuredMessage: the two shapes an LLM reply arrives in
- PromptResponse: a completed prompt as handed to a validator
- Valid / Invalid: the outcome of validating a response
- SchemaErrorDescriptor / SchemaCheck: schema adapter output
- ResponseValidator: protocol implemented by validators
"""
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class TextMessage:
    """A reply that is plain text."""
    text: str


@dataclass(frozen=True)
class StructuredMessage:
    """A chat message with a role and optional content.

    A content of None means the model deliberately returned nothing, which is
    different from returning text that cannot be parsed.
    """
    role: str
    content: str | None


type Message = TextMessage | StructuredMessage


def message_text(message: Message) -> tuple[str, bool]:
    """Resolve a message into its text and whether it carried explicit null content.

    Args:
        message: The message to resolve.

    Returns:
        Tuple of (text, is_explicit_null_content). Null content resolves to "".
    """
    if isinstance(message, StructuredMessage):
        if message.content is None:
            return "", True
        return message.content, False
    return message.text, False


@dataclass(frozen=True)
class PromptResponse:
    """The result of sending a prompt to an agent.

    Attributes:
        message: The reply produced by the model.
        status: Outcome reported by the agent, "success" when a reply was produced.
    """
    message: Message
    status: str = "success"


@dataclass(frozen=True)
class Valid:
    """Successful validation carrying the parsed value (None for explicit empty replies)."""
    value: Any = None

    @property
    def valid(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """Failed validation carrying feedback to replay to the model."""
    feedback: str

    @property
    def valid(self) -> bool:
        return False


type ValidationResult = Valid | Invalid


@dataclass(frozen=True)
class SchemaErrorDescriptor:
    """One schema violation reported by a schema checker.

    Attributes:
        property: Dotted path of the offending instance ("$" for the root).
        kind: The schema keyword that failed (e.g. "type", "required").
        argument: Keyword-specific detail, such as the expected type or the
            missing property name.
        message: The checker's own human-readable message.
    """
    property: str
    kind: str
    argument: Any
    message: str


@dataclass(frozen=True)
class SchemaCheck:
    """Outcome of checking a value against a schema."""
    valid: bool
    errors: list[SchemaErrorDescriptor] = field(default_factory=list)


class ResponseValidator(Protocol):
    """Protocol for validators consumed by the prompt repair loop.

    Implementations inspect a PromptResponse and either accept it, returning
    the value to hand back to the caller, or reject it with feedback that will
    be sent back to the model.
    """

    def validate_response(self, response: PromptResponse, remaining_attempts: int) -> ValidationResult:
        """Validate a response.

        Args:
            response: The response to validate.
            remaining_attempts: Number of repair attempts the caller has left.

        Returns:
            Valid with the accepted value, or Invalid with feedback.
        """
        ...
