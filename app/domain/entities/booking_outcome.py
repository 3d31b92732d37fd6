from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutcomeStatus(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class BookingOutcome:
    status: OutcomeStatus
    reason: str | None = None

    @property
    def accepted(self) -> bool:
        return self.status is OutcomeStatus.ACCEPTED

    @staticmethod
    def accept() -> "BookingOutcome":
        return BookingOutcome(status=OutcomeStatus.ACCEPTED)

    @staticmethod
    def reject(reason: str) -> "BookingOutcome":
        return BookingOutcome(status=OutcomeStatus.REJECTED, reason=reason)
