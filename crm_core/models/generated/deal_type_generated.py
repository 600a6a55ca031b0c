# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise DealType in
# crm_core/models/deal_type.py or attach behaviour through crm_core.hooks.
"""
DealType generated base

Classification of deals by type
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class DealTypeGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for DealType"""

    __abstract__ = True

    __entity_name__ = "DealType"
    __entity_label__ = "Deal Type"
    __plural_label__ = "Deal Types"
    __searchable_fields__ = (
        "name",
        "color",
    )
    __sortable_fields__ = (
        "name",
        "color",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "color",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    color = mapped_column(sa.String(7))
    active = mapped_column(sa.Boolean, nullable=False, default=True)
