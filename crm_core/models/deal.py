"""
Deal entity

Sales opportunity progressing through a pipeline
"""

from .generated.deal_generated import DealGenerated


class Deal(DealGenerated):
    """Sales opportunity progressing through a pipeline"""

    __tablename__ = "deal"

    # Custom columns, properties and methods for Deal go here.
    # The generated mapping lives in DealGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
