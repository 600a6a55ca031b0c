"""
CalendarType entity

Classification of calendars
"""

from .generated.calendar_type_generated import CalendarTypeGenerated


class CalendarType(CalendarTypeGenerated):
    """Classification of calendars"""

    __tablename__ = "calendar_type"

    # Custom columns, properties and methods for CalendarType go here.
    # The generated mapping lives in CalendarTypeGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
