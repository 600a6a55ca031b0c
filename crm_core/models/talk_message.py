"""
TalkMessage entity

Single message exchanged in a talk
"""

from .generated.talk_message_generated import TalkMessageGenerated


class TalkMessage(TalkMessageGenerated):
    """Single message exchanged in a talk"""

    __tablename__ = "talk_message"

    # Custom columns, properties and methods for TalkMessage go here.
    # The generated mapping lives in TalkMessageGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
