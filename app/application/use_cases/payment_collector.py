from __future__ import annotations

import logging
import threading

from app.application.ports.navigator import NavigatorPort
from app.application.ports.notifier import NotifierPort
from app.application.ports.scheduler import ScheduledTask, SchedulerPort
from app.application.utils.outcome_notifications import INVALID_PAYMENT_REASON, notification_for
from app.domain.entities.booking_outcome import BookingOutcome
from app.domain.entities.booking_session import PaymentModalState
from app.domain.entities.payment_draft import PaymentDraft, matches_mask, resolve_field


class PaymentCollector:
    """
    Owns the payment modal and its draft.

    Closed --open()--> Open(empty draft)
    Open --update_field()--> Open (draft updated, or unchanged when masked out)
    Open --submit(), complete--> Closed + Accepted + navigation after the delay
    Open --submit(), incomplete--> Open + Rejected
    Open --cancel()--> Closed, nothing emitted
    """

    def __init__(
        self,
        notifier: NotifierPort,
        navigator: NavigatorPort,
        scheduler: SchedulerPort,
        navigation_delay_ms: int = 5000,
        notification_duration_ms: int = 5000,
        home_path: str = "/",
    ) -> None:
        self._notifier = notifier
        self._navigator = navigator
        self._scheduler = scheduler
        self._navigation_delay_ms = navigation_delay_ms
        self._notification_duration_ms = notification_duration_ms
        self._home_path = home_path
        self._state = PaymentModalState.CLOSED
        self._draft = PaymentDraft()
        self._pending: set[ScheduledTask] = set()
        self._lock = threading.RLock()
        self._disposed = False
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> PaymentModalState:
        return self._state

    @property
    def draft(self) -> PaymentDraft:
        return self._draft

    @property
    def pending_navigation(self) -> int:
        with self._lock:
            return sum(1 for task in self._pending if task.pending)

    def open(self) -> bool:
        if self._state is PaymentModalState.OPEN:
            return False
        self._state = PaymentModalState.OPEN
        self._draft = PaymentDraft()
        self._logger.info("Payment modal opened")
        return True

    def update_field(self, field_id: str, raw_input: str) -> bool:
        """Apply a masked edit. Returns True if the input passed the field's mask."""
        if self._state is not PaymentModalState.OPEN:
            self._logger.warning("Field update ignored, modal closed", extra={"field": field_id})
            return False
        field = resolve_field(field_id)
        if field is None:
            return False
        if not matches_mask(field, raw_input):
            self._logger.debug("Masked input discarded", extra={"field": field_id})
            return False
        self._draft = self._draft.with_field(field_id, raw_input)
        return True

    def is_complete(self) -> bool:
        return self._draft.is_complete()

    def submit(self) -> BookingOutcome | None:
        if self._state is not PaymentModalState.OPEN:
            self._logger.warning("Submit ignored, modal closed")
            return None

        if not self.is_complete():
            outcome = BookingOutcome.reject(INVALID_PAYMENT_REASON)
            self._logger.info(
                "Payment rejected",
                extra={"outcome": outcome.status.value, "reason": outcome.reason, "lengths": self._draft.field_lengths()},
            )
            self._notifier.notify(notification_for(outcome, self._notification_duration_ms))
            return outcome

        outcome = BookingOutcome.accept()
        self._close()
        self._logger.info("Payment accepted", extra={"outcome": outcome.status.value})
        self._notifier.notify(notification_for(outcome, self._notification_duration_ms))
        self._schedule_navigation()
        return outcome

    def cancel(self) -> None:
        if self._state is PaymentModalState.OPEN:
            self._logger.info("Payment cancelled")
        self._close()

    def dispose(self) -> None:
        """Drop the modal and release every pending navigation timer."""
        with self._lock:
            self._disposed = True
            tasks = list(self._pending)
            self._pending.clear()
        for task in tasks:
            task.cancel()
        self._close()

    def _close(self) -> None:
        self._state = PaymentModalState.CLOSED
        self._draft = PaymentDraft()

    def _schedule_navigation(self) -> None:
        holder: list[ScheduledTask] = []

        def _navigate() -> None:
            self._logger.info("Navigating after booking", extra={"path": self._home_path})
            # Held through navigate_to so a concurrent dispose() either wins or waits.
            with self._lock:
                if holder:
                    self._pending.discard(holder[0])
                if self._disposed:
                    return
                self._navigator.navigate_to(self._home_path)

        with self._lock:
            task = self._scheduler.schedule(self._navigation_delay_ms, _navigate)
            holder.append(task)
            if task.pending:
                self._pending.add(task)
        self._logger.info("Navigation scheduled", extra={"delay_ms": self._navigation_delay_ms, "path": self._home_path})
