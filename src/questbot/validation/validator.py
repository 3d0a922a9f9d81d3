"""JSON response validation.

Parses any JSON objects returned by a model and optionally verifies them
against a JSON schema. Failures are returned as feedback text meant to be
sent back to the model, never raised.
"""
import logging
from typing import Any

from questbot.helpers.json import parse_all_objects, remove_empty_values
from questbot.validation.domain import (
    Invalid,
    PromptResponse,
    SchemaErrorDescriptor,
    Valid,
    ValidationResult,
    message_text,
)
from questbot.validation.feedback import build_feedback
from questbot.validation.schema import SchemaChecker

logger = logging.getLogger("questbot.validation.validator")

DEFAULT_MISSING_JSON_FEEDBACK = "No valid JSON objects were found in the response. Return a valid JSON object."
DEFAULT_ERROR_FEEDBACK = "The JSON returned had errors. Apply these fixes:"


class JSONResponseValidator:
    """Validates that a model response contains JSON, optionally matching a schema.

    When a response contains several objects the later ones win: without a
    schema the last object is returned, and with a schema objects are tried
    from last to first and the first one that passes is returned.

    Typical usage:
        validator = JSONResponseValidator({"type": "object", "required": ["id"]})
        result = validator.validate('Sure: {"id": 7}')
        if result.valid:
            use(result.value)

    Attributes:
        schema: Optional JSON schema responses are checked against.
        missing_json_feedback: Feedback returned when no JSON object is found.
        error_feedback: Header placed before the list of schema fixes.
    """

    def __init__(
        self,
        schema: dict[str, Any] | None = None,
        missing_json_feedback: str | None = None,
        error_feedback: str | None = None,
    ) -> None:
        """Initialize the validator.

        Args:
            schema: Optional JSON schema to validate responses against.
            missing_json_feedback: Optional override for the no-JSON feedback.
            error_feedback: Optional override for the schema error header.

        Raises:
            jsonschema.SchemaError: If the schema itself is invalid.
        """
        self.schema = schema
        self.missing_json_feedback = DEFAULT_MISSING_JSON_FEEDBACK if missing_json_feedback is None else missing_json_feedback
        self.error_feedback = DEFAULT_ERROR_FEEDBACK if error_feedback is None else error_feedback
        self._checker = SchemaChecker(schema) if schema is not None else None

    def validate(self, text: str, is_explicit_null_content: bool = False) -> ValidationResult:
        """Validate response text.

        Args:
            text: The response text, possibly mixing prose and JSON.
            is_explicit_null_content: True when the model reply carried null
                content on purpose rather than unparsable text.

        Returns:
            Valid with the selected object (or None for explicit null content),
            or Invalid with feedback describing how to fix the response.
        """
        candidates = parse_all_objects(text)
        logger.debug(f"Found {len(candidates)} JSON object(s) in response")
        if not candidates:
            if is_explicit_null_content:
                return Valid(None)
            return Invalid(self.missing_json_feedback)

        if self._checker is None:
            return Valid(candidates[-1])

        errors: list[SchemaErrorDescriptor] | None = None
        for candidate in reversed(candidates):
            cleaned = remove_empty_values(candidate)
            check = self._checker.check(cleaned)
            if check.valid:
                return Valid(cleaned)
            if errors is None:
                errors = check.errors

        logger.debug(f"No candidate matched the schema, reporting {len(errors or [])} error(s)")
        return Invalid(build_feedback(self.error_feedback, errors or []))

    def validate_response(self, response: PromptResponse, remaining_attempts: int) -> ValidationResult:
        """Validate a prompt response.

        Args:
            response: The response to validate.
            remaining_attempts: Number of repair attempts the caller has left.
                Informational only.

        Returns:
            The result of validate() for the response's message.
        """
        text, explicit_null = message_text(response.message)
        logger.debug(f"Validating response (remaining_attempts={remaining_attempts})")
        return self.validate(text, explicit_null)
