"""
Decoding of response bodies into typed entities.

Bodies are validated in one pass straight into the target type. Polymorphic
list fields (outcomes, outcomePrices, clobTokenIds) are normalized by the
StringArray validator on the model, including markets nested in events.
"""
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from core.errors import DecodeError


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _summarize(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{error.error_count()} validation error(s), first at {location}: {first['msg']}"


def decode_as(body: bytes, target: Any, operation: str) -> Any:
    try:
        return _adapter(target).validate_json(body)
    except ValidationError as e:
        raise DecodeError(_summarize(e), operation) from e
