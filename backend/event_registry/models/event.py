"""Event registration ORM model."""
import uuid
from sqlalchemy import Column, String, Text, DateTime, Enum as SAEnum
from sqlalchemy.sql import func

from event_registry.database import Base
from event_registry.schemas.event import TicketType, PaymentStatus, RegistrationStatus


def _enum_values(enum_cls):
    # Persist "VIP", not the member name "vip".
    return [member.value for member in enum_cls]


class Event(Base):
    __tablename__ = "events"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_name = Column(String(255), nullable=False)
    attendee_first_name = Column(String(100), nullable=False)
    attendee_last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    contact_number = Column(String(10), nullable=False)
    address = Column(Text, nullable=True)
    ticket_type = Column(
        SAEnum(TicketType, name="ticket_type", values_callable=_enum_values),
        nullable=False,
        default=TicketType.regular,
    )
    registration_date = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    payment_status = Column(
        SAEnum(PaymentStatus, name="payment_status", values_callable=_enum_values),
        nullable=False,
        default=PaymentStatus.pending,
    )
    registration_status = Column(
        SAEnum(RegistrationStatus, name="registration_status", values_callable=_enum_values),
        nullable=False,
        default=RegistrationStatus.confirmed,
    )
    special_requests = Column(Text, nullable=True)
