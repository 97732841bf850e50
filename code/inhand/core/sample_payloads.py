SAMPLE_FORM = {
    "company": "Acme",
    "position": "SDE1",
    "ctc": "15,00,000",
    "location": "Bangalore",
}

SAMPLE_BREAKDOWN = {
    "status": "success",
    "company": "Acme",
    "position": "SDE1",
    "ctc": "15,00,000",
    "location": "Bangalore",
    "research_findings": {
        "company_policy": "Acme pays a fixed base with annual RSU grants and a performance bonus.",
        "estimated_base_salary": 12,
        "estimated_stock_component": 2,
        "estimated_bonus": 1,
    },
    "monthly_breakdown": {
        "gross_monthly_cash": 100000,
        "deductions": {
            "pf": 6000,
            "tax_monthly": 28800,
            "professional_tax": 200,
        },
        "final_in_hand_salary": 65000,
    },
    "notes": "Tax computed under the new regime with standard deduction.",
}

SAMPLE_MISMATCH = {
    "status": "mismatch",
    "company": "Acme",
    "position": "Intern",
    "ctc": "2 Cr",
    "location": "Bangalore",
    "analysis": "A 2 Cr CTC is far outside the reported range for interns at Acme.",
}
