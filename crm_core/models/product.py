"""
Product entity

Product or service that can be sold
"""

from .generated.product_generated import ProductGenerated


class Product(ProductGenerated):
    """Product or service that can be sold"""

    __tablename__ = "product"

    # Custom columns, properties and methods for Product go here.
    # The generated mapping lives in ProductGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
