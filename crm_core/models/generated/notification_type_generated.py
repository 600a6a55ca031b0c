# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise NotificationType in
# crm_core/models/notification_type.py or attach behaviour through crm_core.hooks.
"""
NotificationType generated base

Classification of notifications
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class NotificationTypeGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for NotificationType"""

    __abstract__ = True

    __entity_name__ = "NotificationType"
    __entity_label__ = "Notification Type"
    __plural_label__ = "Notification Types"
    __searchable_fields__ = (
        "name",
        "code",
        "default_channel",
    )
    __sortable_fields__ = (
        "name",
        "code",
        "default_channel",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "code",
        "default_channel",
        "notification_type_template_id",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    code = mapped_column(sa.String(50))
    description = mapped_column(sa.Text)
    default_channel = mapped_column(sa.String(30))
    notification_type_template_id = mapped_column(sa.Uuid, sa.ForeignKey("notification_type_template.id", ondelete="SET NULL"), index=True)
    active = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def notification_type_template(cls):
        return relationship("NotificationTypeTemplate")
