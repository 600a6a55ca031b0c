# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Reminder in
# crm_core/models/reminder.py or attach behaviour through crm_core.hooks.
"""
Reminder generated base

Alert scheduled ahead of a task or event
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class ReminderGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for Reminder"""

    __abstract__ = True

    __entity_name__ = "Reminder"
    __entity_label__ = "Reminder"
    __plural_label__ = "Reminders"
    __searchable_fields__ = (
        "title",
        "channel",
    )
    __sortable_fields__ = (
        "title",
        "remind_at",
        "minutes_before",
        "channel",
        "sent",
        "sent_at",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "title",
        "remind_at",
        "minutes_before",
        "task_id",
        "event_id",
        "recipient_id",
        "channel",
        "sent",
        "sent_at",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    title = mapped_column(sa.String(255), nullable=False)
    message = mapped_column(sa.Text)
    remind_at = mapped_column(sa.DateTime(timezone=True), nullable=False, index=True)
    minutes_before = mapped_column(sa.Integer)
    task_id = mapped_column(sa.Uuid, sa.ForeignKey("task.id", ondelete="CASCADE"), index=True)
    event_id = mapped_column(sa.Uuid, sa.ForeignKey("event.id", ondelete="CASCADE"), index=True)
    recipient_id = mapped_column(sa.Uuid, index=True)
    channel = mapped_column(sa.String(30), nullable=False, default="in_app")
    sent = mapped_column(sa.Boolean, nullable=False, default=False)
    sent_at = mapped_column(sa.DateTime(timezone=True))

    @declared_attr
    def task(cls):
        return relationship("Task")

    @declared_attr
    def event(cls):
        return relationship("Event")
