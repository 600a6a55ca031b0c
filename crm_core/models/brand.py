"""
Brand entity

Brand under which products are sold
"""

from .generated.brand_generated import BrandGenerated


class Brand(BrandGenerated):
    """Brand under which products are sold"""

    __tablename__ = "brand"

    # Custom columns, properties and methods for Brand go here.
    # The generated mapping lives in BrandGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
