from __future__ import annotations

import logging

from app.application.use_cases.payment_collector import PaymentCollector
from app.domain.entities.booking_session import BookingSessionState, PaymentModalState, WidgetPhase


class BookingController:
    """Toggle between viewing the doctor and filling the booking form."""

    def __init__(self, collector: PaymentCollector) -> None:
        self._collector = collector
        self._session = BookingSessionState.VIEWING
        self._logger = logging.getLogger(__name__)

    @property
    def session_state(self) -> BookingSessionState:
        return self._session

    @property
    def modal_state(self) -> PaymentModalState:
        return self._collector.state

    @property
    def phase(self) -> WidgetPhase:
        return WidgetPhase.combine(self._session, self._collector.state)

    def toggle_booking(self) -> BookingSessionState:
        if self._session is BookingSessionState.VIEWING:
            self._session = BookingSessionState.BOOKING_FORM_OPEN
            self._logger.info("Booking form opened")
        else:
            self._abandon()
        return self._session

    def close_booking(self) -> BookingSessionState:
        if self._session is BookingSessionState.BOOKING_FORM_OPEN:
            self._abandon()
        return self._session

    def request_payment(self) -> bool:
        """Open payment collection. Only valid while the booking form is open."""
        if self._session is not BookingSessionState.BOOKING_FORM_OPEN:
            self._logger.warning("Payment requested outside booking form", extra={"reason": self._session.value})
            return False
        return self._collector.open()

    def _abandon(self) -> None:
        # The sub-form and any draft in progress are dropped, not saved.
        self._collector.cancel()
        self._session = BookingSessionState.VIEWING
        self._logger.info("Booking form closed")
