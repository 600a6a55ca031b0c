# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise EventResourceBooking in
# crm_core/models/event_resource_booking.py or attach behaviour through crm_core.hooks.
"""
EventResourceBooking generated base

Reservation of a resource for an event
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class EventResourceBookingGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for EventResourceBooking"""

    __abstract__ = True

    __entity_name__ = "EventResourceBooking"
    __entity_label__ = "Event Resource Booking"
    __plural_label__ = "Event Resource Bookings"
    __searchable_fields__ = (
        "status",
    )
    __sortable_fields__ = (
        "start_date_time",
        "end_date_time",
        "status",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "event_resource_id",
        "event_id",
        "start_date_time",
        "end_date_time",
        "status",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    event_resource_id = mapped_column(sa.Uuid, sa.ForeignKey("event_resource.id", ondelete="CASCADE"), nullable=False, index=True)
    event_id = mapped_column(sa.Uuid, sa.ForeignKey("event.id", ondelete="SET NULL"), index=True)
    start_date_time = mapped_column(sa.DateTime(timezone=True), nullable=False, index=True)
    end_date_time = mapped_column(sa.DateTime(timezone=True), nullable=False)
    status = mapped_column(sa.String(20), nullable=False, default="confirmed")
    notes = mapped_column(sa.Text)

    @declared_attr
    def event_resource(cls):
        return relationship("EventResource")

    @declared_attr
    def event(cls):
        return relationship("Event")
