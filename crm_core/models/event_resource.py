"""
EventResource entity

Bookable resource such as a room or equipment
"""

from .generated.event_resource_generated import EventResourceGenerated


class EventResource(EventResourceGenerated):
    """Bookable resource such as a room or equipment"""

    __tablename__ = "event_resource"

    # Custom columns, properties and methods for EventResource go here.
    # The generated mapping lives in EventResourceGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
