# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise LeadSource in
# crm_core/models/lead_source.py or attach behaviour through crm_core.hooks.
"""
LeadSource generated base

Channel a lead originated from
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class LeadSourceGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for LeadSource"""

    __abstract__ = True

    __entity_name__ = "LeadSource"
    __entity_label__ = "Lead Source"
    __plural_label__ = "Lead Sources"
    __searchable_fields__ = (
        "name",
        "channel",
    )
    __sortable_fields__ = (
        "name",
        "channel",
        "cost_per_lead",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "channel",
        "cost_per_lead",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    channel = mapped_column(sa.String(50))
    cost_per_lead = mapped_column(sa.Numeric(10, 2))
    active = mapped_column(sa.Boolean, nullable=False, default=True)
