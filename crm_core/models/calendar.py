"""
Calendar entity

Calendar that groups events for a user or team
"""

from .generated.calendar_generated import CalendarGenerated


class Calendar(CalendarGenerated):
    """Calendar that groups events for a user or team"""

    __tablename__ = "calendar"

    # Custom columns, properties and methods for Calendar go here.
    # The generated mapping lives in CalendarGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
