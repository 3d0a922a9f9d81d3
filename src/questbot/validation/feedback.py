"""Translate schema errors into repair instructions for a language model."""
import json
from typing import Any

from questbot.validation.domain import SchemaErrorDescriptor


def stringify_argument(argument: Any) -> str:
    """Render an error argument for inclusion in feedback.

    Sequences render as comma-joined elements, mappings as JSON text and
    everything else through str().

    Args:
        argument: The argument attached to a schema error.

    Returns:
        The argument as a string.
    """
    if isinstance(argument, (list, tuple)):
        return ",".join(str(item) for item in argument)
    if isinstance(argument, dict):
        return json.dumps(argument)
    return str(argument)


ENUM_MESSAGE_PREFIX = "is not one of enum values:"


def _enum_values(error: SchemaErrorDescriptor) -> str:
    # Only messages of the form "is not one of enum values: a,b" carry the list;
    # anything else may quote the instance, which can itself contain colons.
    if error.message.startswith(ENUM_MESSAGE_PREFIX):
        return error.message[len(ENUM_MESSAGE_PREFIX):].strip()
    return stringify_argument(error.argument)


def error_fix(error: SchemaErrorDescriptor) -> str:
    """Build a single repair instruction for a schema error.

    Args:
        error: The schema error to describe.

    Returns:
        An imperative sentence telling the model how to fix the error.

    Example:
        >>> error_fix(SchemaErrorDescriptor("age", "type", "number", "'x' is not of type 'number'"))
        'convert "age" to a number'
    """
    arg = stringify_argument(error.argument)
    match error.kind:
        case "type":
            return f'convert "{error.property}" to a {arg}'
        case "anyOf":
            return f'convert "{error.property}" to one of the allowed types: {arg}'
        case "additionalProperties":
            return f'remove the "{arg}" property from "{error.property}"'
        case "required":
            return f'add the "{arg}" property to "{error.property}"'
        case "format":
            return f'change the "{error.property}" property to be a {arg}'
        case "uniqueItems":
            return f'remove all duplicate items from "{error.property}"'
        case "enum":
            return f'change the "{error.property}" property to be one of these values: {_enum_values(error)}'
        case "const":
            return f'change the "{error.property}" property to be {arg}'
        case _:
            return f'"{error.property}" {error.message}. Fix that'


def build_feedback(header: str, errors: list[SchemaErrorDescriptor]) -> str:
    """Join a feedback header and one repair instruction per error, one per line."""
    return "\n".join([header, *(error_fix(e) for e in errors)])
