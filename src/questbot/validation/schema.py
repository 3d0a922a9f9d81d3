"""jsonschema adapter.

Wraps the jsonschema library behind SchemaChecker.check so that the rest of
the validation package only deals with SchemaErrorDescriptor values.
"""
import logging
import re
from collections.abc import Iterable, Iterator
from typing import Any

from jsonschema import ValidationError
from jsonschema.validators import validator_for

from questbot.validation.domain import SchemaCheck, SchemaErrorDescriptor

logger = logging.getLogger("questbot.validation.schema")


def property_path(path: Iterable[str | int]) -> str:
    """Render an instance path as a dotted property path.

    Args:
        path: Path elements from the root to the offending instance.

    Returns:
        "$" for the root, otherwise a path such as "owner.tags[1]".

    Example:
        >>> property_path(["owner", "tags", 1])
        'owner.tags[1]'
    """
    rendered = ""
    for elem in path:
        if isinstance(elem, int):
            rendered += f"[{elem}]"
        else:
            rendered += f".{elem}" if rendered else elem
    return rendered or "$"


def _branch_types(branches: list[Any]) -> list[Any]:
    return [
        branch.get("type", branch) if isinstance(branch, dict) else branch
        for branch in branches
    ]


def _missing_property(error: ValidationError) -> str:
    for name in error.validator_value:
        if name not in error.instance and error.message.startswith(repr(name)):
            return name
    return error.message


def _extra_properties(error: ValidationError) -> list[str]:
    declared = error.schema.get("properties", {})
    patterns = error.schema.get("patternProperties", {})
    return [
        name for name in error.instance
        if name not in declared and not any(re.search(p, name) for p in patterns)
    ]


def describe(error: ValidationError) -> Iterator[SchemaErrorDescriptor]:
    """Convert a jsonschema ValidationError into error descriptors.

    An additionalProperties failure yields one descriptor per unexpected
    property; every other failure yields exactly one.

    Args:
        error: The error reported by jsonschema.

    Yields:
        SchemaErrorDescriptor values for the error.
    """
    path = property_path(error.absolute_path)
    kind = str(error.validator)
    if kind == "additionalProperties" and isinstance(error.instance, dict):
        extras = _extra_properties(error)
        if extras:
            for name in extras:
                yield SchemaErrorDescriptor(path, kind, name, error.message)
            return
    if kind == "required":
        argument = _missing_property(error)
    elif kind == "anyOf":
        argument = _branch_types(error.validator_value)
    else:
        argument = error.validator_value
    yield SchemaErrorDescriptor(path, kind, argument, error.message)


class SchemaChecker:
    """Checks values against a JSON schema.

    The validator class is chosen from the schema's "$schema" declaration
    (latest draft when absent) and format assertions are enabled.

    Attributes:
        schema: The JSON schema values are checked against.
    """

    def __init__(self, schema: dict[str, Any]) -> None:
        """Initialize the checker.

        Args:
            schema: JSON schema to check values against.

        Raises:
            jsonschema.SchemaError: If the schema itself is invalid.
        """
        self.schema = schema
        cls = validator_for(schema)
        cls.check_schema(schema)
        self._validator = cls(schema, format_checker=cls.FORMAT_CHECKER)
        logger.debug(f"SchemaChecker initialized: validator={cls.__name__}")

    def check(self, value: Any) -> SchemaCheck:
        """Check a value against the schema.

        Args:
            value: The value to check.

        Returns:
            SchemaCheck with valid=True and no errors, or valid=False and the
            descriptors in the order jsonschema reported them.
        """
        errors = [
            descriptor
            for error in self._validator.iter_errors(value)
            for descriptor in describe(error)
        ]
        return SchemaCheck(valid=not errors, errors=errors)
