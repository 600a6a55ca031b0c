"""
Flag entity

Colored marker attached to records
"""

from .generated.flag_generated import FlagGenerated


class Flag(FlagGenerated):
    """Colored marker attached to records"""

    __tablename__ = "flag"

    # Custom columns, properties and methods for Flag go here.
    # The generated mapping lives in FlagGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
