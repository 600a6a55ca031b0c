"""
NotificationType entity

Classification of notifications
"""

from .generated.notification_type_generated import NotificationTypeGenerated


class NotificationType(NotificationTypeGenerated):
    """Classification of notifications"""

    __tablename__ = "notification_type"

    # Custom columns, properties and methods for NotificationType go here.
    # The generated mapping lives in NotificationTypeGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
