"""
EventResourceBooking entity

Reservation of a resource for an event
"""

from .generated.event_resource_booking_generated import EventResourceBookingGenerated


class EventResourceBooking(EventResourceBookingGenerated):
    """Reservation of a resource for an event"""

    __tablename__ = "event_resource_booking"

    # Custom columns, properties and methods for EventResourceBooking go here.
    # The generated mapping lives in EventResourceBookingGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
