from typing import Any, Mapping, Optional

from .utils import or_zero

# Summation order is fixed so totals are reproducible.
DEDUCTION_FIELDS = ("pf", "tax_monthly", "professional_tax", "esi", "other_deductions")

DEDUCTION_LABELS = {
    "pf": "PF (Provident Fund)",
    "tax_monthly": "Tax (TDS - Monthly)",
    "professional_tax": "Professional Tax",
    "esi": "ESI (Employee State Insurance)",
    "other_deductions": "Other Deductions",
}

# Rows shown only when the service reports a non-zero figure.
CONDITIONAL_FIELDS = ("esi", "other_deductions")


def _get(deductions: Any, field: str) -> Any:
    if deductions is None:
        return None
    if isinstance(deductions, Mapping):
        return deductions.get(field)
    return getattr(deductions, field, None)


def total_deductions(deductions: Optional[Any]) -> float:
    total = 0.0
    for field in DEDUCTION_FIELDS:
        total += or_zero(_get(deductions, field))
    return total
