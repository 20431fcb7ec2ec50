"""
Normalization of list fields the Gamma API serializes inconsistently.

``outcomes``, ``outcomePrices`` and ``clobTokenIds`` arrive either as a JSON
array or as a string holding JSON array text, e.g. ``'["Yes", "No"]'``.
"""
import json
from typing import Annotated, Any

import structlog
from pydantic import BeforeValidator

from utils.formatting import format_scalar

logger = structlog.get_logger(__name__)


class UnparsableArray(ValueError):
    pass


def _parse_strict(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [format_scalar(item) for item in value]
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError as e:
            raise UnparsableArray(str(e)) from e
        if not isinstance(decoded, list):
            raise UnparsableArray(f"expected a JSON array, got {type(decoded).__name__}")
        if not all(isinstance(item, str) for item in decoded):
            raise UnparsableArray("expected a JSON array of strings")
        return decoded
    return [format_scalar(value)]


def parse_string_array(value: Any) -> list[str]:
    """Return value as an ordered list of strings; never raises."""
    try:
        return _parse_strict(value)
    except UnparsableArray:
        return []


def _validate_string_array(value: Any) -> list[str]:
    try:
        return _parse_strict(value)
    except UnparsableArray as e:
        logger.warning("polymorphic_field_unparsable", error=str(e), raw=str(value)[:100])
        return []


StringArray = Annotated[list[str], BeforeValidator(_validate_string_array)]
