# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise AgentType in
# crm_core/models/agent_type.py or attach behaviour through crm_core.hooks.
"""
AgentType generated base

Classification of agents
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class AgentTypeGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for AgentType"""

    __abstract__ = True

    __entity_name__ = "AgentType"
    __entity_label__ = "Agent Type"
    __plural_label__ = "Agent Types"
    __searchable_fields__ = (
        "name",
        "code",
    )
    __sortable_fields__ = (
        "name",
        "code",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "code",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    code = mapped_column(sa.String(50))
    description = mapped_column(sa.Text)
    active = mapped_column(sa.Boolean, nullable=False, default=True)
