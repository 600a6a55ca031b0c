# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise TaskTemplate in
# crm_core/models/task_template.py or attach behaviour through crm_core.hooks.
"""
TaskTemplate generated base

Reusable task blueprint
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin


class TaskTemplateGenerated(AuditMixin, Base):
    """Generated mapping for TaskTemplate"""

    __abstract__ = True

    __entity_name__ = "TaskTemplate"
    __entity_label__ = "Task Template"
    __plural_label__ = "Task Templates"
    __searchable_fields__ = (
        "name",
        "default_priority",
    )
    __sortable_fields__ = (
        "name",
        "default_priority",
        "default_duration_minutes",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "default_priority",
        "default_duration_minutes",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    default_priority = mapped_column(sa.String(20), nullable=False, default="medium")
    default_duration_minutes = mapped_column(sa.Integer)
    checklist = mapped_column(sa.JSON)
    active = mapped_column(sa.Boolean, nullable=False, default=True)
