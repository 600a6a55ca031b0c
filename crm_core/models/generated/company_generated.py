# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Company in
# crm_core/models/company.py or attach behaviour through crm_core.hooks.
"""
Company generated base

Organization a contact works for or a deal is made with
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin


class CompanyGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):
    """Generated mapping for Company"""

    __abstract__ = True

    __entity_name__ = "Company"
    __entity_label__ = "Company"
    __plural_label__ = "Companies"
    __searchable_fields__ = (
        "name",
        "legal_name",
        "tax_id",
        "industry",
        "website",
        "email",
        "phone",
        "address",
    )
    __sortable_fields__ = (
        "name",
        "legal_name",
        "tax_id",
        "industry",
        "website",
        "email",
        "phone",
        "address",
        "employee_count",
        "annual_revenue",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "legal_name",
        "tax_id",
        "industry",
        "website",
        "email",
        "phone",
        "address",
        "city_id",
        "country_id",
        "lead_source_id",
        "employee_count",
        "annual_revenue",
        "account_manager_id",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    legal_name = mapped_column(sa.String(255))
    tax_id = mapped_column(sa.String(50))
    industry = mapped_column(sa.String(100))
    website = mapped_column(sa.String(255))
    email = mapped_column(sa.String(255), index=True)
    phone = mapped_column(sa.String(50))
    address = mapped_column(sa.String(255))
    city_id = mapped_column(sa.Uuid, sa.ForeignKey("city.id", ondelete="SET NULL"), index=True)
    country_id = mapped_column(sa.Uuid, sa.ForeignKey("country.id", ondelete="SET NULL"), index=True)
    lead_source_id = mapped_column(sa.Uuid, sa.ForeignKey("lead_source.id", ondelete="SET NULL"), index=True)
    employee_count = mapped_column(sa.Integer)
    annual_revenue = mapped_column(sa.Numeric(15, 2))
    account_manager_id = mapped_column(sa.Uuid, index=True)
    description = mapped_column(sa.Text)
    active = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def city(cls):
        return relationship("City")

    @declared_attr
    def country(cls):
        return relationship("Country")

    @declared_attr
    def lead_source(cls):
        return relationship("LeadSource")
