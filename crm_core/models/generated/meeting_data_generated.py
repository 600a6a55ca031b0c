# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise MeetingData in
# crm_core/models/meeting_data.py or attach behaviour through crm_core.hooks.
"""
MeetingData generated base

Agenda, minutes and recording details of a meeting
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class MeetingDataGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for MeetingData"""

    __abstract__ = True

    __entity_name__ = "MeetingData"
    __entity_label__ = "Meeting Data"
    __plural_label__ = "Meeting Data"
    __searchable_fields__ = (
        "recording_url",
    )
    __sortable_fields__ = (
        "recording_url",
        "duration_minutes",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "event_id",
        "recording_url",
        "duration_minutes",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    event_id = mapped_column(sa.Uuid, sa.ForeignKey("event.id", ondelete="CASCADE"), index=True)
    agenda = mapped_column(sa.Text)
    minutes = mapped_column(sa.Text)
    transcript = mapped_column(sa.Text)
    summary = mapped_column(sa.Text)
    recording_url = mapped_column(sa.String(500))
    action_items = mapped_column(sa.JSON)
    duration_minutes = mapped_column(sa.Integer)

    @declared_attr
    def event(cls):
        return relationship("Event")
