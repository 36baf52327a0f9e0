"""
Compliance Utilities

Helpers shared by the result model and the payload layer.
"""

from __future__ import annotations
import json
import math
import re
from typing import Any, Dict, Union

_NON_NUMERIC = re.compile(r"[^\d.]")


def determinize_dict(data: Dict[str, Any], precision: int = 6) -> Dict[str, Any]:
    """
    Make a dictionary deterministic for hashing and caching.

    Operations:
    - Sorts all keys recursively
    - Rounds floats to consistent precision
    - Converts enums to their values

    Args:
        data: Dictionary to determinize
        precision: Float rounding precision (default: 6)

    Returns:
        Deterministic dictionary with sorted keys and rounded floats
    """
    def _process(obj: Any) -> Any:
        if isinstance(obj, bool) or obj is None or isinstance(obj, (int, str)):
            return obj
        elif isinstance(obj, float):
            return round(obj, precision)
        elif isinstance(obj, dict):
            return {str(k): _process(v) for k, v in sorted(obj.items())}
        elif isinstance(obj, (list, tuple)):
            return [_process(item) for item in obj]
        elif hasattr(obj, "value"):
            return _process(obj.value)
        else:
            return str(obj)

    processed = _process(data)
    return json.loads(json.dumps(processed, sort_keys=True))


def parse_weight(value: Union[str, int, float, None]) -> float:
    """
    Parse a weight reading into pounds.

    Accepts numbers or ticket strings such as "32,500 lbs". Everything except
    digits and the decimal point is discarded; empty or unparseable input
    yields 0.0.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise TypeError("weight must be a number or string, not bool")
    if isinstance(value, (int, float)):
        return float(value)

    numeric = _NON_NUMERIC.sub("", str(value))
    try:
        parsed = float(numeric)
    except ValueError:
        return 0.0
    return parsed if math.isfinite(parsed) else 0.0


_NEGATIVE_READING = re.compile(r"-\s*[\d.]")


def parse_weight_reading(value: str) -> float:
    """
    Strict form of parse_weight for ticket strings at the payload boundary.

    Raises:
        ValueError: if the reading is negative or holds no parseable number
    """
    text = str(value).strip()
    if _NEGATIVE_READING.search(text):
        raise ValueError(f"weight reading {text!r} must not be negative")

    numeric = _NON_NUMERIC.sub("", text)
    try:
        parsed = float(numeric)
    except ValueError:
        raise ValueError(f"weight reading {text!r} is not a number") from None
    if not math.isfinite(parsed):
        raise ValueError(f"weight reading {text!r} is not a finite number")
    return parsed
