# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise StepIteration in
# crm_core/models/step_iteration.py or attach behaviour through crm_core.hooks.
"""
StepIteration generated base

One pass of a talk through a conversation flow step
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class StepIterationGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for StepIteration"""

    __abstract__ = True

    __entity_name__ = "StepIteration"
    __entity_label__ = "Step Iteration"
    __plural_label__ = "Step Iterations"
    __searchable_fields__ = (
        "status",
    )
    __sortable_fields__ = (
        "iteration_number",
        "status",
        "started_at",
        "completed_at",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "talk_id",
        "step_id",
        "iteration_number",
        "status",
        "started_at",
        "completed_at",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    talk_id = mapped_column(sa.Uuid, sa.ForeignKey("talk.id", ondelete="CASCADE"), nullable=False, index=True)
    step_id = mapped_column(sa.Uuid, index=True)
    iteration_number = mapped_column(sa.Integer, nullable=False, default=1)
    status = mapped_column(sa.String(20), nullable=False, default="in_progress")
    started_at = mapped_column(sa.DateTime(timezone=True))
    completed_at = mapped_column(sa.DateTime(timezone=True))
    input_data = mapped_column(sa.JSON)
    output_data = mapped_column(sa.JSON)

    @declared_attr
    def talk(cls):
        return relationship("Talk")
