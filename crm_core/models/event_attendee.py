"""
EventAttendee entity

Person invited to an event
"""

from .generated.event_attendee_generated import EventAttendeeGenerated


class EventAttendee(EventAttendeeGenerated):
    """Person invited to an event"""

    __tablename__ = "event_attendee"

    # Custom columns, properties and methods for EventAttendee go here.
    # The generated mapping lives in EventAttendeeGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
