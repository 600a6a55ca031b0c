# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise StepAction in
# crm_core/models/step_action.py or attach behaviour through crm_core.hooks.
"""
StepAction generated base

Action executed when a conversation flow step runs
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class StepActionGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for StepAction"""

    __abstract__ = True

    __entity_name__ = "StepAction"
    __entity_label__ = "Step Action"
    __plural_label__ = "Step Actions"
    __searchable_fields__ = (
        "name",
        "action_type",
    )
    __sortable_fields__ = (
        "name",
        "action_type",
        "display_order",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "step_id",
        "action_type",
        "display_order",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    step_id = mapped_column(sa.Uuid, index=True)
    action_type = mapped_column(sa.String(50), nullable=False)
    prompt = mapped_column(sa.Text)
    config = mapped_column(sa.JSON)
    display_order = mapped_column(sa.Integer, nullable=False, default=0)
    active = mapped_column(sa.Boolean, nullable=False, default=True)
