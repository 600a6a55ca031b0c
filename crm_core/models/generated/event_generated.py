# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Event in
# crm_core/models/event.py or attach behaviour through crm_core.hooks.
"""
Event generated base

Scheduled event on a calendar
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin


class EventGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):
    """Generated mapping for Event"""

    __abstract__ = True

    __entity_name__ = "Event"
    __entity_label__ = "Event"
    __plural_label__ = "Events"
    __searchable_fields__ = (
        "title",
        "location",
        "meeting_url",
        "status",
        "recurrence_rule",
    )
    __sortable_fields__ = (
        "title",
        "start_date_time",
        "end_date_time",
        "all_day",
        "location",
        "meeting_url",
        "status",
        "recurrence_rule",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "title",
        "calendar_id",
        "event_category_id",
        "start_date_time",
        "end_date_time",
        "all_day",
        "location",
        "meeting_url",
        "status",
        "recurrence_rule",
        "deal_id",
        "contact_id",
        "organizer_id",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    title = mapped_column(sa.String(255), nullable=False)
    description = mapped_column(sa.Text)
    calendar_id = mapped_column(sa.Uuid, sa.ForeignKey("calendar.id", ondelete="SET NULL"), index=True)
    event_category_id = mapped_column(sa.Uuid, sa.ForeignKey("event_category.id", ondelete="SET NULL"), index=True)
    start_date_time = mapped_column(sa.DateTime(timezone=True), nullable=False, index=True)
    end_date_time = mapped_column(sa.DateTime(timezone=True))
    all_day = mapped_column(sa.Boolean, nullable=False, default=False)
    location = mapped_column(sa.String(255))
    meeting_url = mapped_column(sa.String(500))
    status = mapped_column(sa.String(20), nullable=False, default="scheduled")
    recurrence_rule = mapped_column(sa.String(255))
    deal_id = mapped_column(sa.Uuid, sa.ForeignKey("deal.id", ondelete="SET NULL"), index=True)
    contact_id = mapped_column(sa.Uuid, sa.ForeignKey("contact.id", ondelete="SET NULL"), index=True)
    organizer_id = mapped_column(sa.Uuid, index=True)

    @declared_attr
    def calendar(cls):
        return relationship("Calendar")

    @declared_attr
    def event_category(cls):
        return relationship("EventCategory")

    @declared_attr
    def deal(cls):
        return relationship("Deal")

    @declared_attr
    def contact(cls):
        return relationship("Contact")
