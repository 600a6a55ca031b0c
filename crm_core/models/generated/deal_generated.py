# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Deal in
# crm_core/models/deal.py or attach behaviour through crm_core.hooks.
"""
Deal generated base

Sales opportunity progressing through a pipeline
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin


class DealGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):
    """Generated mapping for Deal"""

    __abstract__ = True

    __entity_name__ = "Deal"
    __entity_label__ = "Deal"
    __plural_label__ = "Deals"
    __searchable_fields__ = (
        "name",
        "currency",
        "status",
    )
    __sortable_fields__ = (
        "name",
        "amount",
        "currency",
        "probability",
        "expected_close_date",
        "closed_at",
        "status",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "deal_type_id",
        "deal_category_id",
        "pipeline_id",
        "current_stage_id",
        "company_id",
        "contact_id",
        "campaign_id",
        "amount",
        "currency",
        "probability",
        "expected_close_date",
        "closed_at",
        "status",
        "lost_reason_id",
        "win_reason_id",
        "owner_id",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    deal_type_id = mapped_column(sa.Uuid, sa.ForeignKey("deal_type.id", ondelete="SET NULL"), index=True)
    deal_category_id = mapped_column(sa.Uuid, sa.ForeignKey("deal_category.id", ondelete="SET NULL"), index=True)
    pipeline_id = mapped_column(sa.Uuid, sa.ForeignKey("pipeline.id", ondelete="SET NULL"), index=True)
    current_stage_id = mapped_column(sa.Uuid, sa.ForeignKey("pipeline_stage.id", ondelete="SET NULL"), index=True)
    company_id = mapped_column(sa.Uuid, sa.ForeignKey("company.id", ondelete="SET NULL"), index=True)
    contact_id = mapped_column(sa.Uuid, sa.ForeignKey("contact.id", ondelete="SET NULL"), index=True)
    campaign_id = mapped_column(sa.Uuid, sa.ForeignKey("campaign.id", ondelete="SET NULL"), index=True)
    amount = mapped_column(sa.Numeric(15, 2))
    currency = mapped_column(sa.String(3), nullable=False, default="USD")
    probability = mapped_column(sa.Integer)
    expected_close_date = mapped_column(sa.Date)
    closed_at = mapped_column(sa.DateTime(timezone=True))
    status = mapped_column(sa.String(20), nullable=False, default="open")
    lost_reason_id = mapped_column(sa.Uuid, sa.ForeignKey("lost_reason.id", ondelete="SET NULL"), index=True)
    win_reason_id = mapped_column(sa.Uuid, sa.ForeignKey("win_reason.id", ondelete="SET NULL"), index=True)
    owner_id = mapped_column(sa.Uuid, index=True)

    @declared_attr
    def deal_type(cls):
        return relationship("DealType")

    @declared_attr
    def deal_category(cls):
        return relationship("DealCategory")

    @declared_attr
    def pipeline(cls):
        return relationship("Pipeline")

    @declared_attr
    def current_stage(cls):
        return relationship("PipelineStage")

    @declared_attr
    def company(cls):
        return relationship("Company")

    @declared_attr
    def contact(cls):
        return relationship("Contact")

    @declared_attr
    def campaign(cls):
        return relationship("Campaign")

    @declared_attr
    def lost_reason(cls):
        return relationship("LostReason")

    @declared_attr
    def win_reason(cls):
        return relationship("WinReason")
