from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ReviewSchema(BaseModel):
    comment: str = ""
    author: str | None = None
    rating: float | None = None


class DoctorProfileSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    education: str = ""
    contact: str = ""
    fee: float | int | str = 0
    rating: float = 0.0
    reviews: list[ReviewSchema] = Field(default_factory=list)
    image: str | None = None
    biography: str = Field("", alias="about-doctor")


class FieldUpdateSchema(BaseModel):
    value: str


class OutcomeStatusSchema(str, Enum):
    accepted = "accepted"
    rejected = "rejected"


class OutcomeSchema(BaseModel):
    status: OutcomeStatusSchema
    reason: str | None = None


class NotificationSchema(BaseModel):
    title: str
    message: str
    severity: str
    duration_ms: int
    is_closable: bool = True


class WidgetViewSchema(BaseModel):
    widget_id: str
    phase: str
    session_state: str
    modal_state: str
    show_book_button: bool
    show_booking_form: bool
    profile: dict[str, Any]
    payment: dict[str, Any]
    pending_navigation: int
    disposed: bool


class FieldUpdateResponseSchema(BaseModel):
    accepted: bool
    widget: WidgetViewSchema


class SubmitResponseSchema(BaseModel):
    outcome: OutcomeSchema
    widget: WidgetViewSchema


class NavigationSchema(BaseModel):
    current_path: str | None = None
    history: list[str] = Field(default_factory=list)
    pending: int = 0
