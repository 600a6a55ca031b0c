"""
DealType entity

Classification of deals by type
"""

from .generated.deal_type_generated import DealTypeGenerated


class DealType(DealTypeGenerated):
    """Classification of deals by type"""

    __tablename__ = "deal_type"

    # Custom columns, properties and methods for DealType go here.
    # The generated mapping lives in DealTypeGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
