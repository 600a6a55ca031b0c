# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise DealStage in
# crm_core/models/deal_stage.py or attach behaviour through crm_core.hooks.
"""
DealStage generated base

Record of a deal passing through a pipeline stage
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class DealStageGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for DealStage"""

    __abstract__ = True

    __entity_name__ = "DealStage"
    __entity_label__ = "Deal Stage"
    __plural_label__ = "Deal Stages"
    __searchable_fields__ = ()
    __sortable_fields__ = (
        "entered_at",
        "exited_at",
        "days_in_stage",
        "probability",
        "last_updated_at",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "deal_id",
        "pipeline_stage_id",
        "entered_at",
        "exited_at",
        "days_in_stage",
        "probability",
        "last_updated_at",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    deal_id = mapped_column(sa.Uuid, sa.ForeignKey("deal.id", ondelete="CASCADE"), nullable=False, index=True)
    pipeline_stage_id = mapped_column(sa.Uuid, sa.ForeignKey("pipeline_stage.id", ondelete="SET NULL"), index=True)
    entered_at = mapped_column(sa.DateTime(timezone=True))
    exited_at = mapped_column(sa.DateTime(timezone=True))
    days_in_stage = mapped_column(sa.Integer)
    probability = mapped_column(sa.Integer)
    notes = mapped_column(sa.Text)
    last_updated_at = mapped_column(sa.DateTime(timezone=True))

    @declared_attr
    def deal(cls):
        return relationship("Deal")

    @declared_attr
    def pipeline_stage(cls):
        return relationship("PipelineStage")
