# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise ProductLine in
# crm_core/models/product_line.py or attach behaviour through crm_core.hooks.
"""
ProductLine generated base

Group of related products
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class ProductLineGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for ProductLine"""

    __abstract__ = True

    __entity_name__ = "ProductLine"
    __entity_label__ = "Product Line"
    __plural_label__ = "Product Lines"
    __searchable_fields__ = (
        "name",
    )
    __sortable_fields__ = (
        "name",
        "display_order",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "brand_id",
        "display_order",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    brand_id = mapped_column(sa.Uuid, sa.ForeignKey("brand.id", ondelete="SET NULL"), index=True)
    display_order = mapped_column(sa.Integer, nullable=False, default=0)
    active = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def brand(cls):
        return relationship("Brand")
