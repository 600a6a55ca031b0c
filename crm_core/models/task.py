"""
Task entity

Unit of work assigned to a user
"""

from .generated.task_generated import TaskGenerated


class Task(TaskGenerated):
    """Unit of work assigned to a user"""

    __tablename__ = "task"

    # Custom columns, properties and methods for Task go here.
    # The generated mapping lives in TaskGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
