"""
Talk entity

Conversation with a contact across a channel
"""

from .generated.talk_generated import TalkGenerated


class Talk(TalkGenerated):
    """Conversation with a contact across a channel"""

    __tablename__ = "talk"

    # Custom columns, properties and methods for Talk go here.
    # The generated mapping lives in TalkGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
