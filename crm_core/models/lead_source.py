"""
LeadSource entity

Channel a lead originated from
"""

from .generated.lead_source_generated import LeadSourceGenerated


class LeadSource(LeadSourceGenerated):
    """Channel a lead originated from"""

    __tablename__ = "lead_source"

    # Custom columns, properties and methods for LeadSource go here.
    # The generated mapping lives in LeadSourceGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
