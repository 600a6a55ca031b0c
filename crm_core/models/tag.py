"""
Tag entity

Free label attached to records
"""

from .generated.tag_generated import TagGenerated


class Tag(TagGenerated):
    """Free label attached to records"""

    __tablename__ = "tag"

    # Custom columns, properties and methods for Tag go here.
    # The generated mapping lives in TagGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
