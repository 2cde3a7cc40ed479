"""
Coercion helpers for loosely typed request values
"""
import math
import re
from typing import Any, Optional, Union

from .exceptions import ValidationException

Number = Union[int, float]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def to_number(value: Any, field: str) -> Number:
    """
    Convert a JSON or query-string value to a number.
    
    Integral values come back as ``int`` so they can be used in document ids.
    
    Raises:
        ValidationException: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValidationException(f"{field} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationException(f"{field} must be a number")
    if not math.isfinite(number):
        raise ValidationException(f"{field} must be a number")
    return int(number) if number.is_integer() else number


def optional_number(value: Any, field: str) -> Optional[Number]:
    """Falsy values mean "not provided" and map to None"""
    if not value:
        return None
    return to_number(value, field)


def leading_int(value: Any, field: str) -> int:
    """
    Read the integer a value starts with, ignoring anything after it
    (``"2.7"`` and ``"2abc"`` both give 2).
    
    Raises:
        ValidationException: If the value does not start with digits
    """
    match = _LEADING_INT.match(str(value)) if not isinstance(value, bool) else None
    if not match:
        raise ValidationException(f"{field} must be a number")
    return int(match.group(1))
