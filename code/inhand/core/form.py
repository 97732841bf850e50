from typing import Dict, Optional

from .models import FormInput

FIELD_ORDER = ("company", "position", "ctc", "location")

FIELD_MESSAGES = {
    "company": "Please enter a company name",
    "position": "Please enter a job role/position",
    "ctc": "Please enter Annual CTC",
    "location": "Please enter work location",
}


class InputForm:
    """The four text fields of the calculator.

    CTC stays free text ("15,00,000", "15 LPA"); the service parses it.
    """

    def __init__(self, **values: str):
        self.values: Dict[str, str] = {field: "" for field in FIELD_ORDER}
        for field, value in values.items():
            self.update(field, value)

    def update(self, field: str, value: str) -> None:
        if field not in self.values:
            raise KeyError(f"Unknown form field: {field}")
        self.values[field] = value if value is not None else ""

    def validate(self) -> Optional[str]:
        for field in FIELD_ORDER:
            if not self.values[field].strip():
                return FIELD_MESSAGES[field]
        return None

    def trimmed(self) -> FormInput:
        return FormInput(**{field: self.values[field].strip() for field in FIELD_ORDER})
