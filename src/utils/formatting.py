import json
from datetime import date, datetime
from enum import Enum
from typing import Any


def format_scalar(value: Any) -> str:
    """Render a scalar the way the Polymarket APIs spell it.

    Booleans are lowercase, integral floats drop the trailing ``.0`` and
    containers fall back to compact JSON.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_scalar(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple, set, dict)):
        return len(value) == 0
    return False
