# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Holiday in
# crm_core/models/holiday.py or attach behaviour through crm_core.hooks.
"""
Holiday generated base

Non-working day
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class HolidayGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for Holiday"""

    __abstract__ = True

    __entity_name__ = "Holiday"
    __entity_label__ = "Holiday"
    __plural_label__ = "Holidays"
    __searchable_fields__ = (
        "name",
    )
    __sortable_fields__ = (
        "name",
        "date",
        "recurring",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "date",
        "holiday_template_id",
        "country_id",
        "recurring",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    date = mapped_column(sa.Date, nullable=False, index=True)
    holiday_template_id = mapped_column(sa.Uuid, sa.ForeignKey("holiday_template.id", ondelete="SET NULL"), index=True)
    country_id = mapped_column(sa.Uuid, sa.ForeignKey("country.id", ondelete="SET NULL"), index=True)
    recurring = mapped_column(sa.Boolean, nullable=False, default=False)
    description = mapped_column(sa.Text)

    @declared_attr
    def holiday_template(cls):
        return relationship("HolidayTemplate")

    @declared_attr
    def country(cls):
        return relationship("Country")
