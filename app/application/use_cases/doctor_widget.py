from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any

from app.application.exceptions import WidgetDisposedError
from app.application.ports.navigator import NavigatorPort
from app.application.ports.notifier import NotifierPort
from app.application.ports.scheduler import SchedulerPort
from app.application.use_cases.booking_controller import BookingController
from app.application.use_cases.payment_collector import PaymentCollector
from app.application.utils.profile_labels import profile_labels
from app.domain.entities.booking_outcome import BookingOutcome
from app.domain.entities.booking_session import BookingSessionState, PaymentModalState, WidgetPhase
from app.domain.entities.doctor_profile import DoctorProfile
from app.domain.entities.payment_draft import PaymentDraft


@dataclass(frozen=True)
class WidgetOptions:
    navigation_delay_ms: int = 5000
    notification_duration_ms: int = 5000
    home_path: str = "/"
    currency_symbol: str = "₹"


class DoctorDetailWidget:
    """One mounted doctor detail widget: profile, booking toggle and payment modal."""

    def __init__(
        self,
        profile: DoctorProfile,
        controller: BookingController,
        collector: PaymentCollector,
        options: WidgetOptions,
        widget_id: str | None = None,
    ) -> None:
        self.widget_id = widget_id or uuid.uuid4().hex
        self.profile = profile
        self._controller = controller
        self._collector = collector
        self._options = options
        self._disposed = False
        self._logger = logging.getLogger(__name__)

    @classmethod
    def mount(
        cls,
        profile: DoctorProfile,
        notifier: NotifierPort,
        navigator: NavigatorPort,
        scheduler: SchedulerPort,
        options: WidgetOptions | None = None,
        widget_id: str | None = None,
    ) -> "DoctorDetailWidget":
        options = options or WidgetOptions()
        collector = PaymentCollector(
            notifier=notifier,
            navigator=navigator,
            scheduler=scheduler,
            navigation_delay_ms=options.navigation_delay_ms,
            notification_duration_ms=options.notification_duration_ms,
            home_path=options.home_path,
        )
        widget = cls(
            profile=profile,
            controller=BookingController(collector),
            collector=collector,
            options=options,
            widget_id=widget_id,
        )
        widget._logger.info("Widget mounted", extra={"widget_id": widget.widget_id, "doctor": profile.name})
        return widget

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def phase(self) -> WidgetPhase:
        return self._controller.phase

    @property
    def session_state(self) -> BookingSessionState:
        return self._controller.session_state

    @property
    def modal_state(self) -> PaymentModalState:
        return self._controller.modal_state

    @property
    def draft(self) -> PaymentDraft:
        return self._collector.draft

    @property
    def pending_navigation(self) -> int:
        return self._collector.pending_navigation

    def toggle_booking(self) -> BookingSessionState:
        self._ensure_live()
        return self._controller.toggle_booking()

    def close_booking(self) -> BookingSessionState:
        self._ensure_live()
        return self._controller.close_booking()

    def request_payment(self) -> bool:
        self._ensure_live()
        return self._controller.request_payment()

    def update_field(self, field_id: str, raw_input: str) -> bool:
        self._ensure_live()
        return self._collector.update_field(field_id, raw_input)

    def is_complete(self) -> bool:
        return self._collector.is_complete()

    def submit(self) -> BookingOutcome | None:
        self._ensure_live()
        return self._collector.submit()

    def cancel_payment(self) -> None:
        self._ensure_live()
        self._collector.cancel()

    def teardown(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._collector.dispose()
        self._logger.info("Widget torn down", extra={"widget_id": self.widget_id})

    def view(self) -> dict[str, Any]:
        phase = self.phase
        draft = self._collector.draft
        modal_open = phase is WidgetPhase.PAYMENT_OPEN
        return {
            "widget_id": self.widget_id,
            "phase": phase.value,
            "session_state": self.session_state.value,
            "modal_state": self.modal_state.value,
            "show_book_button": phase is WidgetPhase.VIEWING,
            "show_booking_form": phase is not WidgetPhase.VIEWING,
            "profile": {
                "name": self.profile.name,
                "education": self.profile.education,
                "image": self.profile.image,
                "biography": self.profile.biography,
                "labels": profile_labels(self.profile, self._options.currency_symbol),
                "reviews": [
                    {"author": r.author, "rating": r.rating, "comment": r.comment}
                    for r in self.profile.reviews
                ],
            },
            "payment": {
                "open": modal_open,
                "card_number": draft.card_number if modal_open else "",
                "expiry": draft.expiry if modal_open else "",
                # password input
                "cvc": "*" * len(draft.cvc) if modal_open else "",
                "complete": draft.is_complete() if modal_open else False,
            },
            "pending_navigation": self.pending_navigation,
            "disposed": self._disposed,
        }

    def _ensure_live(self) -> None:
        if self._disposed:
            raise WidgetDisposedError(f"Widget {self.widget_id} has been torn down")
