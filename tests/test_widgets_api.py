"""
Tests for the widget HTTP endpoints.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.infrastructure.scheduling.manual_scheduler import ManualScheduler
from app.infrastructure.store.widget_store import MemoryWidgetStore
from app.main import app
from app.infrastructure.scheduling.threading_scheduler import ThreadingScheduler
from app.wiring.dependencies import get_scheduler, get_widget_store


DOCTOR = {
    "name": "Dr. Vikram Shah",
    "education": "MBBS, MS (Orthopaedics)",
    "contact": "022 5555 0101",
    "fee": 600,
    "rating": 4,
    "reviews": [{"author": "Anil", "rating": 4, "comment": "Good experience."}],
    "image": "vikram.png",
    "about-doctor": "Orthopaedic surgeon.",
}


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def store():
    return MemoryWidgetStore()


@pytest.fixture
def client(scheduler, store):
    app.dependency_overrides[get_scheduler] = lambda: scheduler
    app.dependency_overrides[get_widget_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
    store.clear()


def _mount(client: TestClient) -> str:
    resp = client.post("/widgets", json=DOCTOR)
    assert resp.status_code == 201
    return resp.json()["widget_id"]


def _fill(client: TestClient, widget_id: str, card="4111111111111111", expiry="12/29", cvc="123") -> None:
    for field_id, value in (("cardNumber", card), ("expiry", expiry), ("cvc", cvc)):
        client.put(f"/widgets/{widget_id}/payment/fields/{field_id}", json={"value": value})


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_mount_returns_viewing_widget(client):
    resp = client.post("/widgets", json=DOCTOR)
    body = resp.json()
    assert resp.status_code == 201
    assert body["phase"] == "viewing"
    assert body["show_book_button"] is True
    assert body["profile"]["biography"] == "Orthopaedic surgeon."
    assert body["profile"]["labels"]["fee"] == "Fees: ₹600"
    assert body["profile"]["labels"]["review_count"] == "(1 reviews)"


def test_unknown_widget_is_404(client):
    assert client.get("/widgets/missing").status_code == 404
    assert client.post("/widgets/missing/booking/toggle").status_code == 404
    assert client.delete("/widgets/missing").status_code == 404


def test_payment_request_outside_form_is_conflict(client):
    widget_id = _mount(client)
    assert client.post(f"/widgets/{widget_id}/payment").status_code == 409


def test_accepted_flow(client, scheduler):
    widget_id = _mount(client)
    assert client.post(f"/widgets/{widget_id}/booking/toggle").json()["phase"] == "booking_form_open"
    assert client.post(f"/widgets/{widget_id}/payment").json()["phase"] == "payment_open"
    _fill(client, widget_id)

    resp = client.post(f"/widgets/{widget_id}/payment/submit")
    body = resp.json()
    assert resp.status_code == 200
    assert body["outcome"] == {"status": "accepted", "reason": None}
    assert body["widget"]["modal_state"] == "closed"
    assert body["widget"]["pending_navigation"] == 1

    notes = client.get(f"/widgets/{widget_id}/notifications").json()
    assert notes[0]["title"] == "Appointment booked."
    assert notes[0]["severity"] == "success"

    scheduler.advance(5000)
    nav = client.get(f"/widgets/{widget_id}/navigation").json()
    assert nav == {"current_path": "/", "history": ["/"], "pending": 0}
    assert client.get(f"/widgets/{widget_id}/notifications").json() == []


def test_masked_field_update_reports_not_accepted(client):
    widget_id = _mount(client)
    client.post(f"/widgets/{widget_id}/booking/toggle")
    client.post(f"/widgets/{widget_id}/payment")

    resp = client.put(f"/widgets/{widget_id}/payment/fields/cardNumber", json={"value": "abc123"})
    assert resp.json()["accepted"] is False
    assert resp.json()["widget"]["payment"]["card_number"] == ""


def test_rejected_flow_keeps_modal_open(client):
    widget_id = _mount(client)
    client.post(f"/widgets/{widget_id}/booking/toggle")
    client.post(f"/widgets/{widget_id}/payment")
    client.put(f"/widgets/{widget_id}/payment/fields/cardNumber", json={"value": "123"})

    body = client.post(f"/widgets/{widget_id}/payment/submit").json()
    assert body["outcome"] == {"status": "rejected", "reason": "Invalid Payment Details"}
    assert body["widget"]["modal_state"] == "open"
    assert body["widget"]["payment"]["card_number"] == "123"
    notes = client.get(f"/widgets/{widget_id}/notifications").json()
    assert notes[-1]["message"] == "Please check your card details."


def test_submit_without_modal_is_conflict(client):
    widget_id = _mount(client)
    assert client.post(f"/widgets/{widget_id}/payment/submit").status_code == 409


def test_cancel_payment(client):
    widget_id = _mount(client)
    client.post(f"/widgets/{widget_id}/booking/toggle")
    client.post(f"/widgets/{widget_id}/payment")
    body = client.post(f"/widgets/{widget_id}/payment/cancel").json()
    assert body["phase"] == "booking_form_open"
    assert client.get(f"/widgets/{widget_id}/notifications").json() == []


def test_close_booking(client):
    widget_id = _mount(client)
    client.post(f"/widgets/{widget_id}/booking/toggle")
    assert client.post(f"/widgets/{widget_id}/booking/close").json()["phase"] == "viewing"


def test_unmount_before_delay_suppresses_navigation(client, scheduler, store):
    widget_id = _mount(client)
    client.post(f"/widgets/{widget_id}/booking/toggle")
    client.post(f"/widgets/{widget_id}/payment")
    _fill(client, widget_id)
    session = store.get(widget_id)
    client.post(f"/widgets/{widget_id}/payment/submit")

    assert client.delete(f"/widgets/{widget_id}").status_code == 204
    scheduler.advance(5000)

    assert session.navigator.history == []
    assert client.get(f"/widgets/{widget_id}").status_code == 404


def test_unmount_cancels_notification_dismissal(client, scheduler, store):
    """Unmounting releases the notifier's display timer along with navigation."""
    widget_id = _mount(client)
    client.post(f"/widgets/{widget_id}/booking/toggle")
    client.post(f"/widgets/{widget_id}/payment")
    session = store.get(widget_id)
    client.post(f"/widgets/{widget_id}/payment/submit")
    assert session.notifier.pending_dismissals == 1

    client.delete(f"/widgets/{widget_id}")

    assert session.notifier.pending_dismissals == 0
    assert scheduler.pending == []
    scheduler.advance(5000)
    assert [n.title for n in session.notifier.active] == ["Invalid Payment Details"]


@pytest.mark.parametrize(
    "method, suffix",
    [
        ("post", "/booking/toggle"),
        ("post", "/booking/close"),
        ("post", "/payment"),
        ("post", "/payment/submit"),
        ("post", "/payment/cancel"),
    ],
)
def test_events_on_torn_down_widget_are_gone(client, store, method, suffix):
    widget_id = _mount(client)
    store.get(widget_id).widget.teardown()

    resp = getattr(client, method)(f"/widgets/{widget_id}{suffix}")

    assert resp.status_code == 410


def test_field_update_on_torn_down_widget_is_gone(client, store):
    widget_id = _mount(client)
    store.get(widget_id).widget.teardown()
    resp = client.put(f"/widgets/{widget_id}/payment/fields/cvc", json={"value": "1"})
    assert resp.status_code == 410


def test_server_scheduler_uses_real_timers():
    assert isinstance(get_scheduler(), ThreadingScheduler)
