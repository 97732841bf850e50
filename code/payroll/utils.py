import math
from typing import Any, Optional


def finite_or_none(value: Any) -> Optional[float]:
    # bool is an int subclass but never a money amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def or_zero(value: Any) -> float:
    number = finite_or_none(value)
    return 0.0 if number is None else number
