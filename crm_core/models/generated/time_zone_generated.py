# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise TimeZone in
# crm_core/models/time_zone.py or attach behaviour through crm_core.hooks.
"""
TimeZone generated base

Time zone reference data
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin


class TimeZoneGenerated(AuditMixin, Base):
    """Generated mapping for TimeZone"""

    __abstract__ = True

    __entity_name__ = "TimeZone"
    __entity_label__ = "Time Zone"
    __plural_label__ = "Time Zones"
    __searchable_fields__ = (
        "name",
        "identifier",
        "utc_offset",
    )
    __sortable_fields__ = (
        "name",
        "identifier",
        "utc_offset",
        "utc_offset_minutes",
        "dst",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "identifier",
        "utc_offset",
        "utc_offset_minutes",
        "dst",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(100), nullable=False, index=True)
    identifier = mapped_column(sa.String(64), nullable=False, unique=True)
    utc_offset = mapped_column(sa.String(6))
    utc_offset_minutes = mapped_column(sa.Integer)
    dst = mapped_column(sa.Boolean, nullable=False, default=False)
    active = mapped_column(sa.Boolean, nullable=False, default=True)
