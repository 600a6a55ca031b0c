"""
SocialMedia entity

Social network profile of a contact or company
"""

from .generated.social_media_generated import SocialMediaGenerated


class SocialMedia(SocialMediaGenerated):
    """Social network profile of a contact or company"""

    __tablename__ = "social_media"

    # Custom columns, properties and methods for SocialMedia go here.
    # The generated mapping lives in SocialMediaGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
