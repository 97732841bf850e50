from dataclasses import dataclass
from typing import Optional, Tuple

from payroll.deductions import CONDITIONAL_FIELDS, DEDUCTION_FIELDS, DEDUCTION_LABELS

from .models import BreakdownResult, Deductions, MismatchResult, Result


@dataclass(frozen=True)
class DeductionRow:
    key: str
    label: str
    amount: Optional[float]


@dataclass(frozen=True)
class RenderPlan:
    """Which panels of the result view apply to a service response."""

    mismatch: bool
    research: bool
    breakdown: bool
    notes: bool
    deduction_rows: Tuple[DeductionRow, ...] = ()


def deduction_rows(deductions: Optional[Deductions]) -> Tuple[DeductionRow, ...]:
    rows = []
    for key in DEDUCTION_FIELDS:
        amount = getattr(deductions, key, None) if deductions is not None else None
        if key in CONDITIONAL_FIELDS and not amount:
            continue
        rows.append(DeductionRow(key=key, label=DEDUCTION_LABELS[key], amount=amount))
    return tuple(rows)


def interpret(result: Result) -> RenderPlan:
    if isinstance(result, MismatchResult):
        return RenderPlan(mismatch=True, research=False, breakdown=False, notes=False)
    if not isinstance(result, BreakdownResult):
        raise TypeError(f"Cannot interpret {type(result).__name__}")

    breakdown = result.monthly_breakdown
    rows: Tuple[DeductionRow, ...] = ()
    if breakdown is not None:
        rows = deduction_rows(breakdown.deductions)
    return RenderPlan(
        mismatch=False,
        research=result.research_findings is not None,
        breakdown=breakdown is not None,
        notes=bool(result.notes and result.notes.strip()),
        deduction_rows=rows,
    )
