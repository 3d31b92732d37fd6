from __future__ import annotations

from app.domain.entities.booking_outcome import BookingOutcome
from app.domain.entities.notification import Notification, Severity

ACCEPTED_TITLE = "Appointment booked."
ACCEPTED_MESSAGE = "Your appointment has been successfully booked!"
REJECTED_TITLE = "Invalid Payment Details"
REJECTED_MESSAGE = "Please check your card details."

INVALID_PAYMENT_REASON = "Invalid Payment Details"


def notification_for(outcome: BookingOutcome, duration_ms: int = 5000) -> Notification:
    if outcome.accepted:
        return Notification(
            title=ACCEPTED_TITLE,
            message=ACCEPTED_MESSAGE,
            severity=Severity.SUCCESS,
            duration_ms=duration_ms,
        )
    return Notification(
        title=REJECTED_TITLE,
        message=REJECTED_MESSAGE,
        severity=Severity.ERROR,
        duration_ms=duration_ms,
    )
