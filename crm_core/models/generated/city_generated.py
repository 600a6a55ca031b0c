# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise City in
# crm_core/models/city.py or attach behaviour through crm_core.hooks.
"""
City generated base

City reference data
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin


class CityGenerated(AuditMixin, Base):
    """Generated mapping for City"""

    __abstract__ = True

    __entity_name__ = "City"
    __entity_label__ = "City"
    __plural_label__ = "Cities"
    __searchable_fields__ = (
        "name",
        "state",
        "postal_code",
    )
    __sortable_fields__ = (
        "name",
        "state",
        "postal_code",
        "latitude",
        "longitude",
        "population",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "country_id",
        "state",
        "postal_code",
        "time_zone_id",
        "latitude",
        "longitude",
        "population",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    country_id = mapped_column(sa.Uuid, sa.ForeignKey("country.id", ondelete="SET NULL"), index=True)
    state = mapped_column(sa.String(100))
    postal_code = mapped_column(sa.String(20))
    time_zone_id = mapped_column(sa.Uuid, sa.ForeignKey("time_zone.id", ondelete="SET NULL"), index=True)
    latitude = mapped_column(sa.Numeric(10, 7))
    longitude = mapped_column(sa.Numeric(10, 7))
    population = mapped_column(sa.Integer)

    @declared_attr
    def country(cls):
        return relationship("Country")

    @declared_attr
    def time_zone(cls):
        return relationship("TimeZone")
