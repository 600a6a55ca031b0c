# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise PipelineStage in
# crm_core/models/pipeline_stage.py or attach behaviour through crm_core.hooks.
"""
PipelineStage generated base

Stage of a pipeline
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class PipelineStageGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for PipelineStage"""

    __abstract__ = True

    __entity_name__ = "PipelineStage"
    __entity_label__ = "Pipeline Stage"
    __plural_label__ = "Pipeline Stages"
    __searchable_fields__ = (
        "name",
        "color",
    )
    __sortable_fields__ = (
        "name",
        "display_order",
        "probability",
        "color",
        "rotting_days",
        "is_won",
        "is_lost",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "pipeline_id",
        "name",
        "display_order",
        "probability",
        "color",
        "rotting_days",
        "is_won",
        "is_lost",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    pipeline_id = mapped_column(sa.Uuid, sa.ForeignKey("pipeline.id", ondelete="CASCADE"), nullable=False, index=True)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    display_order = mapped_column(sa.Integer, nullable=False, default=0)
    probability = mapped_column(sa.Integer)
    color = mapped_column(sa.String(7))
    rotting_days = mapped_column(sa.Integer)
    is_won = mapped_column(sa.Boolean, nullable=False, default=False)
    is_lost = mapped_column(sa.Boolean, nullable=False, default=False)
    active = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def pipeline(cls):
        return relationship("Pipeline")
