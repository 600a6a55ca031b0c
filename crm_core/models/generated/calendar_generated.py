# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Calendar in
# crm_core/models/calendar.py or attach behaviour through crm_core.hooks.
"""
Calendar generated base

Calendar that groups events for a user or team
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin


class CalendarGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):
    """Generated mapping for Calendar"""

    __abstract__ = True

    __entity_name__ = "Calendar"
    __entity_label__ = "Calendar"
    __plural_label__ = "Calendars"
    __searchable_fields__ = (
        "name",
        "color",
    )
    __sortable_fields__ = (
        "name",
        "color",
        "is_default",
        "public",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "calendar_type_id",
        "time_zone_id",
        "color",
        "owner_id",
        "is_default",
        "public",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    calendar_type_id = mapped_column(sa.Uuid, sa.ForeignKey("calendar_type.id", ondelete="SET NULL"), index=True)
    time_zone_id = mapped_column(sa.Uuid, sa.ForeignKey("time_zone.id", ondelete="SET NULL"), index=True)
    description = mapped_column(sa.Text)
    color = mapped_column(sa.String(7))
    owner_id = mapped_column(sa.Uuid, index=True)
    is_default = mapped_column(sa.Boolean, nullable=False, default=False)
    public = mapped_column(sa.Boolean, nullable=False, default=False)
    active = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def calendar_type(cls):
        return relationship("CalendarType")

    @declared_attr
    def time_zone(cls):
        return relationship("TimeZone")
