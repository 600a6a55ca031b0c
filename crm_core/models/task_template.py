"""
TaskTemplate entity

Reusable task blueprint
"""

from .generated.task_template_generated import TaskTemplateGenerated


class TaskTemplate(TaskTemplateGenerated):
    """Reusable task blueprint"""

    __tablename__ = "task_template"

    # Custom columns, properties and methods for TaskTemplate go here.
    # The generated mapping lives in TaskTemplateGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
