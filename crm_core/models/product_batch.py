"""
ProductBatch entity

Manufactured batch of a product
"""

from .generated.product_batch_generated import ProductBatchGenerated


class ProductBatch(ProductBatchGenerated):
    """Manufactured batch of a product"""

    __tablename__ = "product_batch"

    # Custom columns, properties and methods for ProductBatch go here.
    # The generated mapping lives in ProductBatchGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
