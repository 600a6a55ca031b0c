"""
Agent entity

Human or AI agent that handles conversations with contacts
"""

from .generated.agent_generated import AgentGenerated


class Agent(AgentGenerated):
    """Human or AI agent that handles conversations with contacts"""

    __tablename__ = "agent"

    # Custom columns, properties and methods for Agent go here.
    # The generated mapping lives in AgentGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
