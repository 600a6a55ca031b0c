"""
Competitor entity

Competing vendor tracked against deals
"""

from .generated.competitor_generated import CompetitorGenerated


class Competitor(CompetitorGenerated):
    """Competing vendor tracked against deals"""

    __tablename__ = "competitor"

    # Custom columns, properties and methods for Competitor go here.
    # The generated mapping lives in CompetitorGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
