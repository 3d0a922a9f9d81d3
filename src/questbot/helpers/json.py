"""JSON extraction from LLM responses.

This module provides utilities for pulling JSON objects out of text that may
be wrapped in markdown code fences or surrounded by prose, which is common in
LLM outputs. A single response can carry several objects (for example a draft
followed by a corrected answer), so extraction returns all of them in order.
"""

import json as _json
from typing import Any

_decoder = _json.JSONDecoder()


def parse_all_objects(text: str) -> list[dict]:
    """Extract every complete JSON object literal embedded in text.

    Scans for each '{' and tries to decode a JSON value starting there. A
    successful decode is recorded and scanning resumes after the end of the
    decoded span, so objects nested inside an accepted object are not reported
    separately. Spans that fail to decode, including ones nested too deeply or holding
    integers too long to convert, are skipped and scanning moves on to
    the next '{'.

    Args:
        text: Raw text potentially containing JSON objects mixed with prose.

    Returns:
        The parsed objects in order of appearance. Empty if none were found.

    Example:
        >>> parse_all_objects('first {"a": 1} then {"a": 2}')
        [{'a': 1}, {'a': 2}]
    """
    objects: list[dict] = []
    pos = text.find("{")
    while pos != -1:
        try:
            value, end = _decoder.raw_decode(text, pos)
        except (ValueError, RecursionError):
            pos = text.find("{", pos + 1)
            continue
        objects.append(value)
        pos = text.find("{", end)
    return objects


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, dict, list)) and len(value) == 0)


def remove_empty_values(obj: dict) -> dict:
    """Return a shallow copy of obj without properties holding empty values.

    None, empty strings, empty objects and empty arrays are dropped. Models
    that stop part way through a generation often leave such placeholders
    behind for optional properties.

    Args:
        obj: A parsed JSON object.

    Returns:
        A new dictionary containing only the non-empty properties.
    """
    return {key: value for key, value in obj.items() if not _is_empty(value)}

