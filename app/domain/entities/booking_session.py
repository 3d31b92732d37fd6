from __future__ import annotations

from enum import Enum


class BookingSessionState(str, Enum):
    VIEWING = "viewing"
    BOOKING_FORM_OPEN = "booking_form_open"


class PaymentModalState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class WidgetPhase(str, Enum):
    """Session and modal state folded together; the modal only exists inside an open form."""

    VIEWING = "viewing"
    BOOKING_FORM_OPEN = "booking_form_open"
    PAYMENT_OPEN = "payment_open"

    @staticmethod
    def combine(session: BookingSessionState, modal: PaymentModalState) -> "WidgetPhase":
        if session is BookingSessionState.VIEWING:
            return WidgetPhase.VIEWING
        if modal is PaymentModalState.OPEN:
            return WidgetPhase.PAYMENT_OPEN
        return WidgetPhase.BOOKING_FORM_OPEN
