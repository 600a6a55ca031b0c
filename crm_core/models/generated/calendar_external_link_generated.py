# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise CalendarExternalLink in
# crm_core/models/calendar_external_link.py or attach behaviour through crm_core.hooks.
"""
CalendarExternalLink generated base

Link between a calendar and an external calendar provider
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class CalendarExternalLinkGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for CalendarExternalLink"""

    __abstract__ = True

    __entity_name__ = "CalendarExternalLink"
    __entity_label__ = "Calendar External Link"
    __plural_label__ = "Calendar External Links"
    __searchable_fields__ = (
        "provider",
        "external_id",
        "url",
        "sync_status",
    )
    __sortable_fields__ = (
        "provider",
        "external_id",
        "url",
        "sync_enabled",
        "sync_status",
        "last_synced_at",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "calendar_id",
        "provider",
        "external_id",
        "url",
        "sync_enabled",
        "sync_status",
        "last_synced_at",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    calendar_id = mapped_column(sa.Uuid, sa.ForeignKey("calendar.id", ondelete="CASCADE"), nullable=False, index=True)
    provider = mapped_column(sa.String(50), nullable=False)
    external_id = mapped_column(sa.String(255), nullable=False)
    url = mapped_column(sa.String(500))
    sync_enabled = mapped_column(sa.Boolean, nullable=False, default=True)
    sync_status = mapped_column(sa.String(30))
    last_synced_at = mapped_column(sa.DateTime(timezone=True))

    @declared_attr
    def calendar(cls):
        return relationship("Calendar")
