from __future__ import annotations

import math
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_number(value: Any, field_name: str) -> Optional[float]:
    """Parse a form/JSON number. Empty values become None; inf and NaN are rejected."""

    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(result):
        raise ValidationError(f"{field_name} must be a number")
    return result


def optional_int(value: Any, field_name: str) -> Optional[int]:
    number = optional_number(value, field_name)
    if number is None:
        return None
    if not number.is_integer():
        raise ValidationError(f"{field_name} must be a whole number")
    return int(number)
