from __future__ import annotations

import math
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(str(value).strip()) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return str(value).strip()


def optional_non_negative(value: Any, field_name: str) -> Optional[float]:
    """Coerce an optional numeric form value; blank means "not set"."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number
