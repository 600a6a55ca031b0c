# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise PipelineTemplate in
# crm_core/models/pipeline_template.py or attach behaviour through crm_core.hooks.
"""
PipelineTemplate generated base

Reusable pipeline blueprint
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin


class PipelineTemplateGenerated(AuditMixin, Base):
    """Generated mapping for PipelineTemplate"""

    __abstract__ = True

    __entity_name__ = "PipelineTemplate"
    __entity_label__ = "Pipeline Template"
    __plural_label__ = "Pipeline Templates"
    __searchable_fields__ = (
        "name",
        "industry",
    )
    __sortable_fields__ = (
        "name",
        "industry",
        "is_default",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "industry",
        "is_default",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    industry = mapped_column(sa.String(100))
    is_default = mapped_column(sa.Boolean, nullable=False, default=False)
    active = mapped_column(sa.Boolean, nullable=False, default=True)
