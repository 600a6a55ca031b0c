# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Pipeline in
# crm_core/models/pipeline.py or attach behaviour through crm_core.hooks.
"""
Pipeline generated base

Ordered sequence of stages that deals move through
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin


class PipelineGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):
    """Generated mapping for Pipeline"""

    __abstract__ = True

    __entity_name__ = "Pipeline"
    __entity_label__ = "Pipeline"
    __plural_label__ = "Pipelines"
    __searchable_fields__ = (
        "name",
    )
    __sortable_fields__ = (
        "name",
        "is_default",
        "display_order",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "pipeline_template_id",
        "owner_id",
        "is_default",
        "display_order",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    pipeline_template_id = mapped_column(sa.Uuid, sa.ForeignKey("pipeline_template.id", ondelete="SET NULL"), index=True)
    owner_id = mapped_column(sa.Uuid, index=True)
    is_default = mapped_column(sa.Boolean, nullable=False, default=False)
    display_order = mapped_column(sa.Integer, nullable=False, default=0)
    active = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def pipeline_template(cls):
        return relationship("PipelineTemplate")
