# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise DealCategory in
# crm_core/models/deal_category.py or attach behaviour through crm_core.hooks.
"""
DealCategory generated base

Classification of deals by category
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class DealCategoryGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for DealCategory"""

    __abstract__ = True

    __entity_name__ = "DealCategory"
    __entity_label__ = "Deal Category"
    __plural_label__ = "Deal Categories"
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
