"""
LostReason entity

Reason a deal was lost
"""

from .generated.lost_reason_generated import LostReasonGenerated


class LostReason(LostReasonGenerated):
    """Reason a deal was lost"""

    __tablename__ = "lost_reason"

    # Custom columns, properties and methods for LostReason go here.
    # The generated mapping lives in LostReasonGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
