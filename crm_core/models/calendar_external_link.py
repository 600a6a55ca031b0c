"""
CalendarExternalLink entity

Link between a calendar and an external calendar provider
"""

from .generated.calendar_external_link_generated import CalendarExternalLinkGenerated


class CalendarExternalLink(CalendarExternalLinkGenerated):
    """Link between a calendar and an external calendar provider"""

    __tablename__ = "calendar_external_link"

    # Custom columns, properties and methods for CalendarExternalLink go here.
    # The generated mapping lives in CalendarExternalLinkGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
