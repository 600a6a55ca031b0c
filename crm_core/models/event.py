"""
Event entity

Scheduled event on a calendar
"""

from .generated.event_generated import EventGenerated


class Event(EventGenerated):
    """Scheduled event on a calendar"""

    __tablename__ = "event"

    # Custom columns, properties and methods for Event go here.
    # The generated mapping lives in EventGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
