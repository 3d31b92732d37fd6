from __future__ import annotations

import re
from dataclasses import dataclass, replace

# Whole-value masks; an edit is kept only if the full new value matches.
FIELD_MASKS: dict[str, re.Pattern[str]] = {
    "card_number": re.compile(r"^\d{0,16}$", re.ASCII),
    "expiry": re.compile(r"^\d{0,2}/\d{0,2}$", re.ASCII),
    "cvc": re.compile(r"^\d{0,3}$", re.ASCII),
}

# Ids used by the form inputs.
FIELD_ALIASES: dict[str, str] = {
    "cardNumber": "card_number",
    "card_number": "card_number",
    "expiry": "expiry",
    "cvc": "cvc",
}

CARD_NUMBER_LENGTH = 16
EXPIRY_LENGTH = 5
CVC_LENGTH = 3


def resolve_field(field_id: str) -> str | None:
    return FIELD_ALIASES.get(field_id)


def matches_mask(field: str, raw_input: str) -> bool:
    pattern = FIELD_MASKS.get(field)
    if pattern is None or not isinstance(raw_input, str):
        return False
    return pattern.fullmatch(raw_input) is not None


@dataclass(frozen=True)
class PaymentDraft:
    card_number: str = ""
    expiry: str = ""
    cvc: str = ""

    def with_field(self, field_id: str, raw_input: str) -> "PaymentDraft":
        """Return the draft with the edit applied, or self when the edit is masked out."""
        field = resolve_field(field_id)
        if field is None or not matches_mask(field, raw_input):
            return self
        return replace(self, **{field: raw_input})

    def is_complete(self) -> bool:
        # Length only: no Luhn check, no calendar check on expiry.
        return (
            len(self.card_number) == CARD_NUMBER_LENGTH
            and len(self.expiry) == EXPIRY_LENGTH
            and len(self.cvc) == CVC_LENGTH
        )

    def field_lengths(self) -> dict[str, int]:
        return {
            "card_number": len(self.card_number),
            "expiry": len(self.expiry),
            "cvc": len(self.cvc),
        }
