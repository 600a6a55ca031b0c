"""
DealCategory entity

Classification of deals by category
"""

from .generated.deal_category_generated import DealCategoryGenerated


class DealCategory(DealCategoryGenerated):
    """Classification of deals by category"""

    __tablename__ = "deal_category"

    # Custom columns, properties and methods for DealCategory go here.
    # The generated mapping lives in DealCategoryGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
