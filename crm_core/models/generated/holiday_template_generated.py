# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise HolidayTemplate in
# crm_core/models/holiday_template.py or attach behaviour through crm_core.hooks.
"""
HolidayTemplate generated base

Reusable set of holidays for a country and year
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin


class HolidayTemplateGenerated(AuditMixin, Base):
    """Generated mapping for HolidayTemplate"""

    __abstract__ = True

    __entity_name__ = "HolidayTemplate"
    __entity_label__ = "Holiday Template"
    __plural_label__ = "Holiday Templates"
    __searchable_fields__ = (
        "name",
    )
    __sortable_fields__ = (
        "name",
        "year",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "country_id",
        "year",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    country_id = mapped_column(sa.Uuid, sa.ForeignKey("country.id", ondelete="SET NULL"), index=True)
    year = mapped_column(sa.Integer)
    active = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def country(cls):
        return relationship("Country")
