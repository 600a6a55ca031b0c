"""
EventCategory entity

Classification of events
"""

from .generated.event_category_generated import EventCategoryGenerated


class EventCategory(EventCategoryGenerated):
    """Classification of events"""

    __tablename__ = "event_category"

    # Custom columns, properties and methods for EventCategory go here.
    # The generated mapping lives in EventCategoryGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
