# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Product in
# crm_core/models/product.py or attach behaviour through crm_core.hooks.
"""
Product generated base

Product or service that can be sold
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin


class ProductGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):
    """Generated mapping for Product"""

    __abstract__ = True

    __entity_name__ = "Product"
    __entity_label__ = "Product"
    __plural_label__ = "Products"
    __searchable_fields__ = (
        "name",
        "sku",
        "currency",
        "unit",
    )
    __sortable_fields__ = (
        "name",
        "sku",
        "price",
        "cost",
        "currency",
        "tax_rate",
        "unit",
        "stock_quantity",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "sku",
        "product_line_id",
        "brand_id",
        "billing_frequency_id",
        "price",
        "cost",
        "currency",
        "tax_rate",
        "unit",
        "stock_quantity",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    sku = mapped_column(sa.String(100), index=True)
    description = mapped_column(sa.Text)
    product_line_id = mapped_column(sa.Uuid, sa.ForeignKey("product_line.id", ondelete="SET NULL"), index=True)
    brand_id = mapped_column(sa.Uuid, sa.ForeignKey("brand.id", ondelete="SET NULL"), index=True)
    billing_frequency_id = mapped_column(sa.Uuid, sa.ForeignKey("billing_frequency.id", ondelete="SET NULL"), index=True)
    price = mapped_column(sa.Numeric(15, 2))
    cost = mapped_column(sa.Numeric(15, 2))
    currency = mapped_column(sa.String(3), nullable=False, default="USD")
    tax_rate = mapped_column(sa.Numeric(5, 2))
    unit = mapped_column(sa.String(30))
    stock_quantity = mapped_column(sa.Integer)
    active = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def product_line(cls):
        return relationship("ProductLine")

    @declared_attr
    def brand(cls):
        return relationship("Brand")

    @declared_attr
    def billing_frequency(cls):
        return relationship("BillingFrequency")
