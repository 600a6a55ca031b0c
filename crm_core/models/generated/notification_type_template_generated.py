# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise NotificationTypeTemplate in
# crm_core/models/notification_type_template.py or attach behaviour through crm_core.hooks.
"""
NotificationTypeTemplate generated base

System-wide template for notification types
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin


class NotificationTypeTemplateGenerated(AuditMixin, Base):
    """Generated mapping for NotificationTypeTemplate"""

    __abstract__ = True

    __entity_name__ = "NotificationTypeTemplate"
    __entity_label__ = "Notification Type Template"
    __plural_label__ = "Notification Type Templates"
    __searchable_fields__ = (
        "name",
        "code",
        "subject_template",
        "default_channel",
    )
    __sortable_fields__ = (
        "name",
        "code",
        "subject_template",
        "default_channel",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "code",
        "subject_template",
        "default_channel",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    code = mapped_column(sa.String(50), unique=True)
    description = mapped_column(sa.Text)
    subject_template = mapped_column(sa.String(255))
    body_template = mapped_column(sa.Text)
    default_channel = mapped_column(sa.String(30))
    active = mapped_column(sa.Boolean, nullable=False, default=True)
