# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise PipelineStageTemplate in
# crm_core/models/pipeline_stage_template.py or attach behaviour through crm_core.hooks.
"""
PipelineStageTemplate generated base

Stage of a pipeline template
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin


class PipelineStageTemplateGenerated(AuditMixin, Base):
    """Generated mapping for PipelineStageTemplate"""

    __abstract__ = True

    __entity_name__ = "PipelineStageTemplate"
    __entity_label__ = "Pipeline Stage Template"
    __plural_label__ = "Pipeline Stage Templates"
    __searchable_fields__ = (
        "name",
        "color",
    )
    __sortable_fields__ = (
        "name",
        "display_order",
        "probability",
        "color",
        "is_won",
        "is_lost",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "pipeline_template_id",
        "name",
        "display_order",
        "probability",
        "color",
        "is_won",
        "is_lost",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    pipeline_template_id = mapped_column(sa.Uuid, sa.ForeignKey("pipeline_template.id", ondelete="CASCADE"), nullable=False, index=True)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    display_order = mapped_column(sa.Integer, nullable=False, default=0)
    probability = mapped_column(sa.Integer)
    color = mapped_column(sa.String(7))
    is_won = mapped_column(sa.Boolean, nullable=False, default=False)
    is_lost = mapped_column(sa.Boolean, nullable=False, default=False)

    @declared_attr
    def pipeline_template(cls):
        return relationship("PipelineTemplate")
