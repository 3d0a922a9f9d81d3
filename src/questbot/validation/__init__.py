"""Response validation for LLM output.

Validators turn a raw model reply into either a structured value or feedback
that tells the model how to repair its answer:
- JSONResponseValidator: extracts JSON objects and checks them against a schema
- SchemaChecker: jsonschema adapter producing SchemaErrorDescriptor values
- error_fix: translates one schema error into a repair instruction
"""

from questbot.validation.domain import (
    Invalid,
    Message,
    PromptResponse,
    ResponseValidator,
    SchemaCheck,
    SchemaErrorDescriptor,
    StructuredMessage,
    TextMessage,
    Valid,
    ValidationResult,
)
from questbot.validation.feedback import error_fix
from questbot.validation.schema import SchemaChecker
from questbot.validation.validator import JSONResponseValidator

__all__ = [
    "Invalid",
    "JSONResponseValidator",
    "Message",
    "PromptResponse",
    "ResponseValidator",
    "SchemaCheck",
    "SchemaChecker",
    "SchemaErrorDescriptor",
    "StructuredMessage",
    "TextMessage",
    "Valid",
    "ValidationResult",
    "error_fix",
]
