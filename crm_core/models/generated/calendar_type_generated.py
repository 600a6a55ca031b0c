# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise CalendarType in
# crm_core/models/calendar_type.py or attach behaviour through crm_core.hooks.
"""
CalendarType generated base

Classification of calendars
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class CalendarTypeGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for CalendarType"""

    __abstract__ = True

    __entity_name__ = "CalendarType"
    __entity_label__ = "Calendar Type"
    __plural_label__ = "Calendar Types"
    __searchable_fields__ = (
        "name",
        "code",
        "color",
    )
    __sortable_fields__ = (
        "name",
        "code",
        "color",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "code",
        "color",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    code = mapped_column(sa.String(50))
    description = mapped_column(sa.Text)
    color = mapped_column(sa.String(7))
    active = mapped_column(sa.Boolean, nullable=False, default=True)
