# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise ProductBatch in
# crm_core/models/product_batch.py or attach behaviour through crm_core.hooks.
"""
ProductBatch generated base

Manufactured batch of a product
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class ProductBatchGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for ProductBatch"""

    __abstract__ = True

    __entity_name__ = "ProductBatch"
    __entity_label__ = "Product Batch"
    __plural_label__ = "Product Batches"
    __searchable_fields__ = (
        "batch_number",
    )
    __sortable_fields__ = (
        "batch_number",
        "manufactured_at",
        "expires_at",
        "quantity",
        "cost",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "product_id",
        "batch_number",
        "manufactured_at",
        "expires_at",
        "quantity",
        "cost",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    product_id = mapped_column(sa.Uuid, sa.ForeignKey("product.id", ondelete="CASCADE"), nullable=False, index=True)
    batch_number = mapped_column(sa.String(100), nullable=False, index=True)
    manufactured_at = mapped_column(sa.Date)
    expires_at = mapped_column(sa.Date)
    quantity = mapped_column(sa.Integer, nullable=False, default=0)
    cost = mapped_column(sa.Numeric(15, 2))
    notes = mapped_column(sa.Text)

    @declared_attr
    def product(cls):
        return relationship("Product")
