"""
NotificationTypeTemplate entity

System-wide template for notification types
"""

from .generated.notification_type_template_generated import NotificationTypeTemplateGenerated


class NotificationTypeTemplate(NotificationTypeTemplateGenerated):
    """System-wide template for notification types"""

    __tablename__ = "notification_type_template"

    # Custom columns, properties and methods for NotificationTypeTemplate go here.
    # The generated mapping lives in NotificationTypeTemplateGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
