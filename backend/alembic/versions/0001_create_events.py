"""create_events

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Creates the events table holding one row per attendee registration.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "events",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("event_name", sa.String(255), nullable=False),
        sa.Column("attendee_first_name", sa.String(100), nullable=False),
        sa.Column("attendee_last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("contact_number", sa.String(10), nullable=False),
        sa.Column("address", sa.Text, nullable=True),
        sa.Column(
            "ticket_type",
            sa.Enum("Regular", "VIP", "Student", name="ticket_type"),
            nullable=False,
            server_default="Regular",
        ),
        sa.Column("registration_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column(
            "payment_status",
            sa.Enum("Paid", "Pending", "Refunded", name="payment_status"),
            nullable=False,
            server_default="Pending",
        ),
        sa.Column(
            "registration_status",
            sa.Enum("Confirmed", "Waitlisted", "Cancelled", name="registration_status"),
            nullable=False,
            server_default="Confirmed",
        ),
        sa.Column("special_requests", sa.Text, nullable=True),
    )


def downgrade() -> None:
    op.drop_table("events")
    sa.Enum(name="registration_status").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="payment_status").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="ticket_type").drop(op.get_bind(), checkfirst=True)
