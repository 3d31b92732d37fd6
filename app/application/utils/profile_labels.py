from __future__ import annotations

from app.domain.entities.doctor_profile import DoctorProfile

VERIFIED_LABEL = "Verified Profile"
ABOUT_HEADING = "About Doctor:"


def _format_number(value: float | int | str) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def profile_labels(profile: DoctorProfile, currency_symbol: str = "₹") -> dict[str, str]:
    """Display strings for the profile card."""
    return {
        "contact": f"Call: {profile.contact}",
        "fee": f"Fees: {currency_symbol}{_format_number(profile.fee)}",
        "rating": f"{_format_number(profile.rating)} / 5",
        "review_count": f"({profile.review_count} reviews)",
        "image_alt": f"Image of {profile.name}",
        "verified": VERIFIED_LABEL,
        "about_heading": ABOUT_HEADING,
    }
