"""
DealStage entity

Record of a deal passing through a pipeline stage
"""

from .generated.deal_stage_generated import DealStageGenerated


class DealStage(DealStageGenerated):
    """Record of a deal passing through a pipeline stage"""

    __tablename__ = "deal_stage"

    # Custom columns, properties and methods for DealStage go here.
    # The generated mapping lives in DealStageGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
