"""
EventResourceType entity

Classification of bookable resources
"""

from .generated.event_resource_type_generated import EventResourceTypeGenerated


class EventResourceType(EventResourceTypeGenerated):
    """Classification of bookable resources"""

    __tablename__ = "event_resource_type"

    # Custom columns, properties and methods for EventResourceType go here.
    # The generated mapping lives in EventResourceTypeGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
