"""Add transport settings to wedding events.

Revision ID: 8c4e5d2f9a61
Revises: 3f1c2a9b7d10
Create Date: 2026-10-06 15:30:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "8c4e5d2f9a61"
down_revision: str | None = "3f1c2a9b7d10"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

transport_mode_enum = sa.Enum("none", "all", "selected", "special_deal", name="transport_mode_enum")
flight_mode_enum = sa.Enum("none", "collect_requirements", "provide_flights", name="flight_mode_enum")

FLAG_COLUMNS = (
    "send_travel_updates",
    "notify_guests",
    "provides_airport_pickup",
    "provides_venue_transfers",
)


def upgrade() -> None:
    """Add transport wizard columns to wedding_events."""
    transport_mode_enum.create(op.get_bind(), checkfirst=True)
    flight_mode_enum.create(op.get_bind(), checkfirst=True)

    op.add_column(
        "wedding_events",
        sa.Column("transport_mode", transport_mode_enum, nullable=False, server_default="none"),
    )
    op.add_column("wedding_events", sa.Column("transport_provider_name", sa.String(255), nullable=True))
    op.add_column("wedding_events", sa.Column("transport_provider_phone", sa.String(50), nullable=True))
    op.add_column("wedding_events", sa.Column("transport_provider_email", sa.String(255), nullable=True))
    op.add_column("wedding_events", sa.Column("transport_instructions", sa.Text(), nullable=True))
    for column in FLAG_COLUMNS:
        op.add_column(
            "wedding_events",
            sa.Column(column, sa.Boolean(), nullable=False, server_default=sa.false()),
        )
    op.add_column(
        "wedding_events",
        sa.Column("flight_mode", flight_mode_enum, nullable=False, server_default="none"),
    )


def downgrade() -> None:
    """Remove transport wizard columns from wedding_events."""
    op.drop_column("wedding_events", "flight_mode")
    for column in reversed(FLAG_COLUMNS):
        op.drop_column("wedding_events", column)
    op.drop_column("wedding_events", "transport_instructions")
    op.drop_column("wedding_events", "transport_provider_email")
    op.drop_column("wedding_events", "transport_provider_phone")
    op.drop_column("wedding_events", "transport_provider_name")
    op.drop_column("wedding_events", "transport_mode")
    flight_mode_enum.drop(op.get_bind(), checkfirst=True)
    transport_mode_enum.drop(op.get_bind(), checkfirst=True)
