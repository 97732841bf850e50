import pytest

from inhand.core.models import BreakdownResult, MismatchResult, parse_result
from inhand.core.sample_payloads import SAMPLE_BREAKDOWN, SAMPLE_MISMATCH


def test_mismatch_status_selects_mismatch_variant():
    result = parse_result(SAMPLE_MISMATCH)
    assert isinstance(result, MismatchResult)
    assert result.analysis.startswith("A 2 Cr CTC")


def test_any_other_status_is_a_breakdown():
    result = parse_result(SAMPLE_BREAKDOWN)
    assert isinstance(result, BreakdownResult)
    assert result.monthly_breakdown.final_in_hand_salary == 65000
    assert result.research_findings.estimated_base_salary == 12
    assert isinstance(parse_result({"company": "Acme"}), BreakdownResult)


def test_bad_numbers_become_absent():
    result = parse_result(
        {
            "status": "success",
            "monthly_breakdown": {"gross_monthly_cash": "lots", "deductions": {"pf": None, "esi": "n/a"}},
        }
    )
    assert result.monthly_breakdown.gross_monthly_cash is None
    assert result.monthly_breakdown.deductions.esi is None
    assert result.research_findings is None


def test_zero_is_kept():
    result = parse_result({"monthly_breakdown": {"final_in_hand_salary": 0}})
    assert result.monthly_breakdown.final_in_hand_salary == 0


def test_echoed_ctc_number_becomes_text():
    result = parse_result({"status": "mismatch", "ctc": 1500000})
    assert result.ctc == "1500000"


def test_non_object_payload_rejected():
    with pytest.raises(ValueError):
        parse_result(["not", "an", "object"])
