"""Error taxonomy for event registration operations.

Every failure the controller reports is one of these. Each carries the HTTP
status it maps to and a user-safe message; nothing from the underlying store
is ever exposed to the caller.
"""
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    missing_fields = "MissingFields"
    invalid_email = "InvalidEmail"
    invalid_contact_number = "InvalidContactNumber"
    validation_error = "ValidationError"
    not_found = "NotFound"
    internal_error = "InternalError"


class EventRegistryError(Exception):
    """Base error with code, HTTP status and user-safe message."""

    code: ErrorCode = ErrorCode.internal_error
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_response_body(self) -> dict[str, Any]:
        return {"error": self.message}


class MissingFieldsError(EventRegistryError):
    code = ErrorCode.missing_fields
    status_code = 400
    default_message = "Missing required fields"


class InvalidEmailError(EventRegistryError):
    code = ErrorCode.invalid_email
    status_code = 400
    default_message = "Invalid email address"


class InvalidContactNumberError(EventRegistryError):
    code = ErrorCode.invalid_contact_number
    status_code = 400
    default_message = "Invalid contact number"


class RecordValidationError(EventRegistryError):
    """Raised when a record fails the whole-schema check; one message per field."""

    code = ErrorCode.validation_error
    status_code = 400
    default_message = "Validation Error"

    def __init__(self, errors: list[str]) -> None:
        super().__init__()
        self.errors = list(errors)

    def to_response_body(self) -> dict[str, Any]:
        return {"message": self.message, "errors": self.errors}


class EventNotFoundError(EventRegistryError):
    code = ErrorCode.not_found
    status_code = 404
    default_message = "Event not found"

    def __init__(self, event_id: str) -> None:
        super().__init__()
        self.event_id = event_id


class InternalError(EventRegistryError):
    code = ErrorCode.internal_error
    status_code = 500
    default_message = "Internal server error"
