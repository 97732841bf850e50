from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from .utils import finite_or_none, or_zero

RUPEE = "₹"
NOT_AVAILABLE = "N/A"
RUPEES_PER_LAKH = 100000
MONTHS_PER_YEAR = 12


def group_indian(digits: str) -> str:
    """Insert lakh/crore separators: 1234567 -> 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount: Any) -> str:
    if amount is None:
        return NOT_AVAILABLE
    number = finite_or_none(amount)
    if number is None:
        return NOT_AVAILABLE
    # to_integral_value is exact regardless of the context precision
    whole = int(Decimal(repr(number)).to_integral_value(rounding=ROUND_HALF_UP))
    sign = "-" if number < 0 else ""
    return f"{sign}{RUPEE}{group_indian(str(abs(whole)))}"


def lpa_to_monthly(lpa: Any) -> float:
    return or_zero(lpa) * RUPEES_PER_LAKH / MONTHS_PER_YEAR


def format_lpa(lpa: Any) -> str:
    number = finite_or_none(lpa)
    if number is None:
        return NOT_AVAILABLE
    text = str(int(number)) if number.is_integer() else str(number)
    return f"{text} LPA"
