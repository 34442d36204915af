"""Event registration API routes: thin wrappers over EventController."""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status

from event_registry.dependencies import get_controller
from event_registry.schemas.event import (
    ErrorOut,
    EventMessageOut,
    EventRecord,
    MessageOut,
    ValidationErrorOut,
)
from event_registry.services.event_controller import EventController

logger = logging.getLogger(__name__)
router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorOut, "description": "Event not found"}}
_SERVER_ERROR = {500: {"model": ErrorOut, "description": "Internal server error"}}
_BAD_REQUEST = {
    400: {
        "model": ValidationErrorOut,
        "description": "Missing fields, invalid email, invalid contact number or validation error",
    }
}


@router.get(
    "",
    response_model=list[EventRecord],
    summary="Retrieve all events",
    responses={**_SERVER_ERROR},
)
async def list_events(controller: EventController = Depends(get_controller)):
    """Return every event registration."""
    return await controller.get_all()


@router.get(
    "/get/{event_id}",
    response_model=EventRecord,
    summary="Retrieve an event by ID",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def get_event(event_id: str, controller: EventController = Depends(get_controller)):
    return await controller.get_by_id(event_id)


@router.post(
    "/create",
    response_model=EventMessageOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new event registration",
    responses={**_BAD_REQUEST, **_SERVER_ERROR},
)
async def create_event(
    payload: dict[str, Any] = Body(..., examples=[{
        "eventName": "Tech Conference",
        "attendeeFirstName": "Jane",
        "attendeeLastName": "Doe",
        "email": "jane.doe@test.com",
        "contactNumber": "0712345678",
        "ticketType": "VIP",
    }]),
    controller: EventController = Depends(get_controller),
):
    """Register an attendee; optional fields take their defaults when omitted."""
    event = await controller.create(payload)
    return {"message": "Event registration created successfully", "event": event}


@router.put(
    "/update/{event_id}",
    response_model=EventMessageOut,
    summary="Update an event registration by ID",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
async def update_event(
    event_id: str,
    payload: dict[str, Any] = Body(..., examples=[{"ticketType": "Student"}]),
    controller: EventController = Depends(get_controller),
):
    """Update any subset of fields; the rest keep their stored values."""
    event = await controller.update(event_id, payload)
    return {"message": "Event registration updated successfully", "event": event}


@router.delete(
    "/delete/{event_id}",
    response_model=MessageOut,
    summary="Delete an event registration by ID",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def delete_event(event_id: str, controller: EventController = Depends(get_controller)):
    await controller.delete_by_id(event_id)
    return {"message": "Event registration deleted successfully"}
