"""
ProductLine entity

Group of related products
"""

from .generated.product_line_generated import ProductLineGenerated


class ProductLine(ProductLineGenerated):
    """Group of related products"""

    __tablename__ = "product_line"

    # Custom columns, properties and methods for ProductLine go here.
    # The generated mapping lives in ProductLineGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
