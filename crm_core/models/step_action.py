"""
StepAction entity

Action executed when a conversation flow step runs
"""

from .generated.step_action_generated import StepActionGenerated


class StepAction(StepActionGenerated):
    """Action executed when a conversation flow step runs"""

    __tablename__ = "step_action"

    # Custom columns, properties and methods for StepAction go here.
    # The generated mapping lives in StepActionGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
