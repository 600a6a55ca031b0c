"""
Campaign entity

Marketing campaign that generates leads and deals
"""

from .generated.campaign_generated import CampaignGenerated


class Campaign(CampaignGenerated):
    """Marketing campaign that generates leads and deals"""

    __tablename__ = "campaign"

    # Custom columns, properties and methods for Campaign go here.
    # The generated mapping lives in CampaignGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
