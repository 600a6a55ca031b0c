# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Notification in
# crm_core/models/notification.py or attach behaviour through crm_core.hooks.
"""
Notification generated base

Message addressed to a user
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class NotificationGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for Notification"""

    __abstract__ = True

    __entity_name__ = "Notification"
    __entity_label__ = "Notification"
    __plural_label__ = "Notifications"
    __searchable_fields__ = (
        "title",
        "channel",
        "priority",
        "status",
        "link_url",
    )
    __sortable_fields__ = (
        "title",
        "channel",
        "priority",
        "status",
        "link_url",
        "sent_at",
        "read_at",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "notification_type_id",
        "title",
        "recipient_id",
        "channel",
        "priority",
        "status",
        "link_url",
        "sent_at",
        "read_at",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    notification_type_id = mapped_column(sa.Uuid, sa.ForeignKey("notification_type.id", ondelete="SET NULL"), index=True)
    title = mapped_column(sa.String(255), nullable=False)
    message = mapped_column(sa.Text)
    recipient_id = mapped_column(sa.Uuid, index=True)
    channel = mapped_column(sa.String(30), nullable=False, default="in_app")
    priority = mapped_column(sa.String(20), nullable=False, default="normal")
    status = mapped_column(sa.String(20), nullable=False, default="pending")
    link_url = mapped_column(sa.String(500))
    data = mapped_column(sa.JSON)
    sent_at = mapped_column(sa.DateTime(timezone=True))
    read_at = mapped_column(sa.DateTime(timezone=True))

    @declared_attr
    def notification_type(cls):
        return relationship("NotificationType")
