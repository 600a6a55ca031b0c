# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Campaign in
# crm_core/models/campaign.py or attach behaviour through crm_core.hooks.
"""
Campaign generated base

Marketing campaign that generates leads and deals
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin


class CampaignGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):
    """Generated mapping for Campaign"""

    __abstract__ = True

    __entity_name__ = "Campaign"
    __entity_label__ = "Campaign"
    __plural_label__ = "Campaigns"
    __searchable_fields__ = (
        "name",
        "status",
    )
    __sortable_fields__ = (
        "name",
        "status",
        "start_date",
        "end_date",
        "budget",
        "expected_revenue",
        "actual_cost",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "status",
        "lead_source_id",
        "start_date",
        "end_date",
        "budget",
        "expected_revenue",
        "actual_cost",
        "owner_id",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    status = mapped_column(sa.String(30), nullable=False, default="draft")
    lead_source_id = mapped_column(sa.Uuid, sa.ForeignKey("lead_source.id", ondelete="SET NULL"), index=True)
    start_date = mapped_column(sa.Date)
    end_date = mapped_column(sa.Date)
    budget = mapped_column(sa.Numeric(15, 2))
    expected_revenue = mapped_column(sa.Numeric(15, 2))
    actual_cost = mapped_column(sa.Numeric(15, 2))
    owner_id = mapped_column(sa.Uuid, index=True)
    active = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def lead_source(cls):
        return relationship("LeadSource")
