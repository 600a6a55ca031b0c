# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Agent in
# crm_core/models/agent.py or attach behaviour through crm_core.hooks.
"""
Agent generated base

Human or AI agent that handles conversations with contacts
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin


class AgentGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):
    """Generated mapping for Agent"""

    __abstract__ = True

    __entity_name__ = "Agent"
    __entity_label__ = "Agent"
    __plural_label__ = "Agents"
    __searchable_fields__ = (
        "name",
        "model",
    )
    __sortable_fields__ = (
        "name",
        "model",
        "temperature",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "agent_type_id",
        "model",
        "temperature",
        "user_id",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    agent_type_id = mapped_column(sa.Uuid, sa.ForeignKey("agent_type.id", ondelete="SET NULL"), index=True)
    description = mapped_column(sa.Text)
    prompt = mapped_column(sa.Text)
    model = mapped_column(sa.String(100))
    temperature = mapped_column(sa.Numeric(3, 2))
    user_id = mapped_column(sa.Uuid, index=True)
    active = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def agent_type(cls):
        return relationship("AgentType")
