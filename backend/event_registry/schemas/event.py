"""Pydantic schemas for Event registrations.

``EventRecord`` is the strongly-typed record, ``EventChanges`` the partial
update applied to it. JSON uses the camelCase field names the browser client
sends (``eventName``, ``contactNumber``...); Python code uses snake_case.
"""
from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from event_registry.errors import RecordValidationError


class TicketType(str, enum.Enum):
    regular = "Regular"
    vip = "VIP"
    student = "Student"


class PaymentStatus(str, enum.Enum):
    paid = "Paid"
    pending = "Pending"
    refunded = "Refunded"


class RegistrationStatus(str, enum.Enum):
    confirmed = "Confirmed"
    waitlisted = "Waitlisted"
    cancelled = "Cancelled"


REQUIRED_FIELDS = (
    "eventName",
    "attendeeFirstName",
    "attendeeLastName",
    "email",
    "contactNumber",
    "ticketType",
)

# Never taken from a create payload: the store assigns the id and the
# controller stamps the registration date.
_SERVER_ASSIGNED = ("id", "_id", "registrationDate")


class EventRecord(BaseModel):
    id: Optional[str] = None
    event_name: str = Field(min_length=1, max_length=255)
    attendee_first_name: str = Field(min_length=1, max_length=100)
    attendee_last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=255)
    contact_number: str = Field(min_length=1, max_length=10)
    address: Optional[str] = None
    ticket_type: TicketType = TicketType.regular
    registration_date: datetime
    payment_status: PaymentStatus = PaymentStatus.pending
    registration_status: RegistrationStatus = RegistrationStatus.confirmed
    special_requests: Optional[str] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "coerce_numbers_to_str": True,
        "json_schema_extra": {
            "example": {
                "id": "0b4d5c1e-8f7a-4b8e-9d6a-2f1c3e5a7b90",
                "eventName": "Film Screening",
                "attendeeFirstName": "Maleesha",
                "attendeeLastName": "Shashindi",
                "email": "maleeshas.2000@gmail.com",
                "contactNumber": "0713970808",
                "address": "Kandy, Sri Lanka",
                "ticketType": "Student",
                "registrationDate": "2024-04-13T12:28:32.619Z",
                "paymentStatus": "Pending",
                "registrationStatus": "Confirmed",
                "specialRequests": "Front Seat",
            }
        },
    }

    @field_validator("registration_date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without an offset; they are stored as UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class EventChanges(BaseModel):
    """Partial update: every field optional, only the fields sent are applied.

    Enumerated fields are accepted as plain strings here and checked when the
    merged record is validated, so a bad value is reported as a field error.
    """

    event_name: Optional[str] = None
    attendee_first_name: Optional[str] = None
    attendee_last_name: Optional[str] = None
    email: Optional[str] = None
    contact_number: Optional[str] = None
    address: Optional[str] = None
    ticket_type: Optional[str] = None
    registration_date: Optional[datetime] = None
    payment_status: Optional[str] = None
    registration_status: Optional[str] = None
    special_requests: Optional[str] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "coerce_numbers_to_str": True,
    }


class EventMessageOut(BaseModel):
    message: str
    event: EventRecord


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: str


class ValidationErrorOut(BaseModel):
    message: str = "Validation Error"
    errors: list[str]


def _field_message(error: dict[str, Any]) -> str:
    """Render one pydantic error the way the registration form displays it."""
    path = ".".join(str(part) for part in error["loc"]) or "body"
    kind = error["type"]
    value = error.get("input")
    if kind in ("missing", "string_too_short") or value is None:
        return f"Path `{path}` is required."
    if kind == "string_too_long":
        limit = error.get("ctx", {}).get("max_length")
        return f"Path `{path}` is longer than the maximum allowed length ({limit})."
    if kind == "enum":
        return f"`{value}` is not a valid enum value for path `{path}`."
    if kind == "string_type":
        return f"Cast to string failed for value `{value}` at path `{path}`."
    if kind.startswith("datetime"):
        return f"Cast to date failed for value `{value}` at path `{path}`."
    return f"Path `{path}`: {error['msg']}"


def _errors_from(exc: ValidationError) -> list[str]:
    return [_field_message(error) for error in exc.errors()]


def validate_record(document: dict[str, Any]) -> EventRecord:
    """Check a whole candidate record and return it typed, with defaults applied.

    Raises:
        RecordValidationError: one message per offending field.
    """
    try:
        return EventRecord.model_validate(document)
    except ValidationError as exc:
        raise RecordValidationError(_errors_from(exc)) from exc


def parse_changes(payload: dict[str, Any]) -> EventChanges:
    try:
        return EventChanges.model_validate(payload)
    except ValidationError as exc:
        raise RecordValidationError(_errors_from(exc)) from exc


def build_new_record(payload: dict[str, Any], now: datetime) -> EventRecord:
    """Build a record for insertion from a create payload.

    Optional fields that are absent or null take their schema defaults and
    the registration date is always the creation instant.
    """
    document = {
        key: value
        for key, value in payload.items()
        if key not in _SERVER_ASSIGNED and value is not None
    }
    document["registrationDate"] = now
    return validate_record(document)


def merge_changes(record: EventRecord, changes: EventChanges) -> dict[str, Any]:
    """Overwrite ``record`` field by field with the fields set in ``changes``.

    Returns the candidate document keyed by JSON name; ``record`` is untouched.
    """
    document = record.model_dump(by_alias=True)
    document.update(changes.model_dump(by_alias=True, exclude_unset=True))
    return document
