# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Contact in
# crm_core/models/contact.py or attach behaviour through crm_core.hooks.
"""
Contact generated base

Person the organization is in contact with
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin


class ContactGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):
    """Generated mapping for Contact"""

    __abstract__ = True

    __entity_name__ = "Contact"
    __entity_label__ = "Contact"
    __plural_label__ = "Contacts"
    __searchable_fields__ = (
        "first_name",
        "last_name",
        "email",
        "phone",
        "mobile",
        "job_title",
        "department",
    )
    __sortable_fields__ = (
        "first_name",
        "last_name",
        "email",
        "phone",
        "mobile",
        "job_title",
        "department",
        "birthday",
        "email_opt_out",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "first_name",
        "last_name",
        "email",
        "phone",
        "mobile",
        "job_title",
        "department",
        "company_id",
        "city_id",
        "lead_source_id",
        "birthday",
        "owner_id",
        "email_opt_out",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    first_name = mapped_column(sa.String(100), nullable=False)
    last_name = mapped_column(sa.String(100))
    email = mapped_column(sa.String(255), index=True)
    phone = mapped_column(sa.String(50))
    mobile = mapped_column(sa.String(50))
    job_title = mapped_column(sa.String(100))
    department = mapped_column(sa.String(100))
    company_id = mapped_column(sa.Uuid, sa.ForeignKey("company.id", ondelete="SET NULL"), index=True)
    city_id = mapped_column(sa.Uuid, sa.ForeignKey("city.id", ondelete="SET NULL"), index=True)
    lead_source_id = mapped_column(sa.Uuid, sa.ForeignKey("lead_source.id", ondelete="SET NULL"), index=True)
    birthday = mapped_column(sa.Date)
    owner_id = mapped_column(sa.Uuid, index=True)
    notes = mapped_column(sa.Text)
    email_opt_out = mapped_column(sa.Boolean, nullable=False, default=False)
    active = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def company(cls):
        return relationship("Company")

    @declared_attr
    def city(cls):
        return relationship("City")

    @declared_attr
    def lead_source(cls):
        return relationship("LeadSource")
