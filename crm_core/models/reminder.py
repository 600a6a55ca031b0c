"""
Reminder entity

Alert scheduled ahead of a task or event
"""

from .generated.reminder_generated import ReminderGenerated


class Reminder(ReminderGenerated):
    """Alert scheduled ahead of a task or event"""

    __tablename__ = "reminder"

    # Custom columns, properties and methods for Reminder go here.
    # The generated mapping lives in ReminderGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
