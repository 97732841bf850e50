from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from payroll.utils import finite_or_none


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class FormInput(BaseModel):
    company: str
    position: str
    ctc: str
    location: str


class Deductions(BaseModel):
    model_config = ConfigDict(extra="allow")

    pf: Optional[float] = None
    tax_monthly: Optional[float] = None
    professional_tax: Optional[float] = None
    esi: Optional[float] = None
    other_deductions: Optional[float] = None

    @field_validator("pf", "tax_monthly", "professional_tax", "esi", "other_deductions", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> Optional[float]:
        return finite_or_none(value)


class MonthlyBreakdown(BaseModel):
    model_config = ConfigDict(extra="allow")

    gross_monthly_cash: Optional[float] = None
    deductions: Optional[Deductions] = None
    final_in_hand_salary: Optional[float] = None

    @field_validator("gross_monthly_cash", "final_in_hand_salary", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> Optional[float]:
        return finite_or_none(value)


class ResearchFindings(BaseModel):
    """Compensation split researched by the service; figures are in LPA."""

    model_config = ConfigDict(extra="allow")

    company_policy: str = ""
    estimated_base_salary: Optional[float] = None
    estimated_stock_component: Optional[float] = None
    estimated_bonus: Optional[float] = None

    @field_validator("company_policy", mode="before")
    @classmethod
    def coerce_policy(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("estimated_base_salary", "estimated_stock_component", "estimated_bonus", mode="before")
    @classmethod
    def coerce_lpa(cls, value: Any) -> Optional[float]:
        return finite_or_none(value)


class _EchoedInput(BaseModel):
    model_config = ConfigDict(extra="allow")

    company: str = ""
    position: str = ""
    ctc: str = ""
    location: str = ""

    @field_validator("company", "position", "ctc", "location", mode="before")
    @classmethod
    def coerce_echo(cls, value: Any) -> str:
        return _as_text(value)


class MismatchResult(_EchoedInput):
    status: Literal["mismatch"] = "mismatch"
    analysis: str = ""

    @field_validator("analysis", mode="before")
    @classmethod
    def coerce_analysis(cls, value: Any) -> str:
        return _as_text(value)


class BreakdownResult(_EchoedInput):
    status: Optional[str] = None
    research_findings: Optional[ResearchFindings] = None
    monthly_breakdown: Optional[MonthlyBreakdown] = None
    notes: Optional[str] = None

    @field_validator("status", "notes", mode="before")
    @classmethod
    def coerce_optional_text(cls, value: Any) -> Optional[str]:
        return None if value is None else _as_text(value)


Result = Union[MismatchResult, BreakdownResult]


def parse_result(payload: Any) -> Result:
    if not isinstance(payload, dict):
        raise ValueError(f"Unexpected response from salary service: {type(payload).__name__}")
    if payload.get("status") == "mismatch":
        return MismatchResult.model_validate(payload)
    return BreakdownResult.model_validate(payload)
