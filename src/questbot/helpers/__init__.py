"""Helper utilities for questbot.

This module provides utility functions for common tasks in bot handlers,
including JSON extraction from LLM responses.

Exports:
    parse_all_objects: Extract every JSON object embedded in text.
    remove_empty_values: Drop empty-valued properties from an object.
"""

from questbot.helpers.json import parse_all_objects, remove_empty_values

__all__ = ["parse_all_objects", "remove_empty_values"]
