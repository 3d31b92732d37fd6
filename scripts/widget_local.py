from __future__ import annotations

#!/usr/bin/env python3
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

"""
Interactive local widget harness (no HTTP).

Usage:
  python3 scripts/widget_local.py

Drives one DoctorDetailWidget on a virtual clock so the post-booking
navigation can be stepped through with /wait.
"""

from app.application.use_cases.doctor_widget import DoctorDetailWidget
from app.domain.entities.doctor_profile import DoctorProfile
from app.infrastructure.navigation.recording_navigator import RecordingNavigator
from app.infrastructure.notifications.memory_notifier import InMemoryNotifier
from app.infrastructure.scheduling.manual_scheduler import ManualScheduler
from app.wiring.dependencies import get_widget_options


DEMO_DOCTOR = {
    "name": "Dr. Asha Rao",
    "education": "MBBS, MD (Cardiology)",
    "contact": "+91 98765 43210",
    "fee": 800,
    "rating": 4.5,
    "reviews": [{"author": "Ravi", "rating": 5, "comment": "Very patient and thorough."}],
    "about-doctor": "Consultant cardiologist.",
}

HELP = """Commands:
  /book              toggle the booking form
  /pay               request payment
  /set FIELD VALUE   update cardNumber | expiry | cvc
  /submit            submit payment
  /cancel            close the payment modal
  /wait MS           advance the clock
  /quit
"""


def parse_delay(text: str) -> int | None:
    try:
        delay_ms = int(text)
    except ValueError:
        return None
    return delay_ms if delay_ms >= 0 else None


def _print_view(widget: DoctorDetailWidget, notifier: InMemoryNotifier, navigator: RecordingNavigator) -> None:
    view = widget.view()
    payment = view["payment"]
    print(f"phase={view['phase']} pending_navigation={view['pending_navigation']}")
    if payment["open"]:
        print(f"  card={payment['card_number']!r} expiry={payment['expiry']!r} cvc={payment['cvc']!r}")
    for note in notifier.active:
        print(f"  [{note.severity.value}] {note.title} {note.message}")
    if navigator.history:
        print(f"  navigated: {navigator.history}")


def main() -> None:
    scheduler = ManualScheduler()
    notifier = InMemoryNotifier(scheduler=scheduler)
    navigator = RecordingNavigator()
    widget = DoctorDetailWidget.mount(
        profile=DoctorProfile.from_payload(DEMO_DOCTOR),
        notifier=notifier,
        navigator=navigator,
        scheduler=scheduler,
        options=get_widget_options(),
    )
    labels = widget.view()["profile"]["labels"]
    print(f"\n{widget.profile.name} | {labels['fee']} | {labels['rating']} {labels['review_count']}")
    print(HELP)

    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not line:
            continue
        cmd, *args = line.split(maxsplit=2)
        if cmd == "/quit":
            break
        elif cmd == "/book":
            widget.toggle_booking()
        elif cmd == "/pay":
            if not widget.request_payment():
                print("Open the booking form first.")
        elif cmd == "/set" and args:
            value = args[1] if len(args) > 1 else ""
            if not widget.update_field(args[0], value):
                print("(input discarded)")
        elif cmd == "/submit":
            outcome = widget.submit()
            print(f"outcome: {outcome.status.value if outcome else 'none'}")
        elif cmd == "/cancel":
            widget.cancel_payment()
        elif cmd == "/wait" and args:
            delay_ms = parse_delay(args[0])
            if delay_ms is None:
                print("Usage: /wait MS")
                continue
            scheduler.advance(delay_ms)
        else:
            print(HELP)
            continue
        _print_view(widget, notifier, navigator)

    widget.teardown()


if __name__ == "__main__":
    main()
