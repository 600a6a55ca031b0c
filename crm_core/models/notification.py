"""
Notification entity

Message addressed to a user
"""

from .generated.notification_generated import NotificationGenerated


class Notification(NotificationGenerated):
    """Message addressed to a user"""

    __tablename__ = "notification"

    # Custom columns, properties and methods for Notification go here.
    # The generated mapping lives in NotificationGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
