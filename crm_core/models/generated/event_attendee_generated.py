# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise EventAttendee in
# crm_core/models/event_attendee.py or attach behaviour through crm_core.hooks.
"""
EventAttendee generated base

Person invited to an event
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class EventAttendeeGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for EventAttendee"""

    __abstract__ = True

    __entity_name__ = "EventAttendee"
    __entity_label__ = "Event Attendee"
    __plural_label__ = "Event Attendees"
    __searchable_fields__ = (
        "name",
        "email",
        "response_status",
    )
    __sortable_fields__ = (
        "name",
        "email",
        "response_status",
        "optional",
        "responded_at",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "event_id",
        "contact_id",
        "user_id",
        "name",
        "email",
        "response_status",
        "optional",
        "responded_at",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    event_id = mapped_column(sa.Uuid, sa.ForeignKey("event.id", ondelete="CASCADE"), nullable=False, index=True)
    contact_id = mapped_column(sa.Uuid, sa.ForeignKey("contact.id", ondelete="SET NULL"), index=True)
    user_id = mapped_column(sa.Uuid, index=True)
    name = mapped_column(sa.String(255))
    email = mapped_column(sa.String(255), index=True)
    response_status = mapped_column(sa.String(20), nullable=False, default="pending")
    optional = mapped_column(sa.Boolean, nullable=False, default=False)
    responded_at = mapped_column(sa.DateTime(timezone=True))

    @declared_attr
    def event(cls):
        return relationship("Event")

    @declared_attr
    def contact(cls):
        return relationship("Contact")
