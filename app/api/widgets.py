from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.v1.schemas import (
    DoctorProfileSchema,
    FieldUpdateResponseSchema,
    FieldUpdateSchema,
    NavigationSchema,
    NotificationSchema,
    OutcomeSchema,
    SubmitResponseSchema,
    WidgetViewSchema,
)
from app.application.exceptions import WidgetDisposedError, WidgetNotFoundError
from app.domain.entities.doctor_profile import DoctorProfile
from app.infrastructure.store.widget_store import MemoryWidgetStore, WidgetSession
from app.wiring.dependencies import WidgetFactory, get_widget_factory, get_widget_store


router = APIRouter(prefix="/widgets")
logger = logging.getLogger(__name__)


def _session(widget_id: str, store: MemoryWidgetStore) -> WidgetSession:
    try:
        return store.get(widget_id)
    except WidgetNotFoundError:
        raise HTTPException(status_code=404, detail="Widget not found")


def _view(session: WidgetSession) -> WidgetViewSchema:
    return WidgetViewSchema.model_validate(session.widget.view())


@router.post("", status_code=201, response_model=WidgetViewSchema)
def mount_widget(
    req: DoctorProfileSchema,
    store: MemoryWidgetStore = Depends(get_widget_store),
    factory: WidgetFactory = Depends(get_widget_factory),
):
    profile = DoctorProfile.from_payload(req.model_dump(mode="json", by_alias=True))
    session = factory.mount(profile)
    store.add(session)
    return _view(session)


@router.get("/{widget_id}", response_model=WidgetViewSchema)
def get_widget(widget_id: str, store: MemoryWidgetStore = Depends(get_widget_store)):
    return _view(_session(widget_id, store))


@router.delete("/{widget_id}", status_code=204)
def unmount_widget(widget_id: str, store: MemoryWidgetStore = Depends(get_widget_store)) -> Response:
    try:
        store.remove(widget_id)
    except WidgetNotFoundError:
        raise HTTPException(status_code=404, detail="Widget not found")
    logger.info("Widget unmounted", extra={"widget_id": widget_id})
    return Response(status_code=204)


@router.post("/{widget_id}/booking/toggle", response_model=WidgetViewSchema)
def toggle_booking(widget_id: str, store: MemoryWidgetStore = Depends(get_widget_store)):
    session = _session(widget_id, store)
    try:
        session.widget.toggle_booking()
    except WidgetDisposedError as e:
        raise HTTPException(status_code=410, detail=str(e))
    return _view(session)


@router.post("/{widget_id}/booking/close", response_model=WidgetViewSchema)
def close_booking(widget_id: str, store: MemoryWidgetStore = Depends(get_widget_store)):
    session = _session(widget_id, store)
    try:
        session.widget.close_booking()
    except WidgetDisposedError as e:
        raise HTTPException(status_code=410, detail=str(e))
    return _view(session)


@router.post("/{widget_id}/payment", response_model=WidgetViewSchema)
def request_payment(widget_id: str, store: MemoryWidgetStore = Depends(get_widget_store)):
    session = _session(widget_id, store)
    try:
        opened = session.widget.request_payment()
    except WidgetDisposedError as e:
        raise HTTPException(status_code=410, detail=str(e))
    if not opened:
        raise HTTPException(status_code=409, detail="Payment can only be requested from an open booking form")
    return _view(session)


@router.put("/{widget_id}/payment/fields/{field_id}", response_model=FieldUpdateResponseSchema)
def update_field(
    widget_id: str,
    field_id: str,
    req: FieldUpdateSchema,
    store: MemoryWidgetStore = Depends(get_widget_store),
):
    session = _session(widget_id, store)
    try:
        accepted = session.widget.update_field(field_id, req.value)
    except WidgetDisposedError as e:
        raise HTTPException(status_code=410, detail=str(e))
    return FieldUpdateResponseSchema(accepted=accepted, widget=_view(session))


@router.post("/{widget_id}/payment/submit", response_model=SubmitResponseSchema)
def submit_payment(widget_id: str, store: MemoryWidgetStore = Depends(get_widget_store)):
    session = _session(widget_id, store)
    try:
        outcome = session.widget.submit()
    except WidgetDisposedError as e:
        raise HTTPException(status_code=410, detail=str(e))
    if outcome is None:
        raise HTTPException(status_code=409, detail="Payment modal is not open")
    return SubmitResponseSchema(
        outcome=OutcomeSchema(status=outcome.status.value, reason=outcome.reason),
        widget=_view(session),
    )


@router.post("/{widget_id}/payment/cancel", response_model=WidgetViewSchema)
def cancel_payment(widget_id: str, store: MemoryWidgetStore = Depends(get_widget_store)):
    session = _session(widget_id, store)
    try:
        session.widget.cancel_payment()
    except WidgetDisposedError as e:
        raise HTTPException(status_code=410, detail=str(e))
    return _view(session)


@router.get("/{widget_id}/notifications", response_model=list[NotificationSchema])
def list_notifications(widget_id: str, store: MemoryWidgetStore = Depends(get_widget_store)):
    session = _session(widget_id, store)
    return [
        NotificationSchema(
            title=n.title,
            message=n.message,
            severity=n.severity.value,
            duration_ms=n.duration_ms,
            is_closable=n.is_closable,
        )
        for n in session.notifier.active
    ]


@router.get("/{widget_id}/navigation", response_model=NavigationSchema)
def navigation_history(widget_id: str, store: MemoryWidgetStore = Depends(get_widget_store)):
    session = _session(widget_id, store)
    return NavigationSchema(
        current_path=session.navigator.current_path,
        history=list(session.navigator.history),
        pending=session.widget.pending_navigation,
    )
