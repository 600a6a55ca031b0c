# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Competitor in
# crm_core/models/competitor.py or attach behaviour through crm_core.hooks.
"""
Competitor generated base

Competing vendor tracked against deals
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class CompetitorGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for Competitor"""

    __abstract__ = True

    __entity_name__ = "Competitor"
    __entity_label__ = "Competitor"
    __plural_label__ = "Competitors"
    __searchable_fields__ = (
        "name",
        "website",
    )
    __sortable_fields__ = (
        "name",
        "website",
        "market_share",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "website",
        "market_share",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    website = mapped_column(sa.String(255))
    description = mapped_column(sa.Text)
    strengths = mapped_column(sa.Text)
    weaknesses = mapped_column(sa.Text)
    market_share = mapped_column(sa.Numeric(5, 2))
    active = mapped_column(sa.Boolean, nullable=False, default=True)
