"""
StepIteration entity

One pass of a talk through a conversation flow step
"""

from .generated.step_iteration_generated import StepIterationGenerated


class StepIteration(StepIterationGenerated):
    """One pass of a talk through a conversation flow step"""

    __tablename__ = "step_iteration"

    # Custom columns, properties and methods for StepIteration go here.
    # The generated mapping lives in StepIterationGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
