"""
WinReason entity

Reason a deal was won
"""

from .generated.win_reason_generated import WinReasonGenerated


class WinReason(WinReasonGenerated):
    """Reason a deal was won"""

    __tablename__ = "win_reason"

    # Custom columns, properties and methods for WinReason go here.
    # The generated mapping lives in WinReasonGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
