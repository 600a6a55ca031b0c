"""
AgentType entity

Classification of agents
"""

from .generated.agent_type_generated import AgentTypeGenerated


class AgentType(AgentTypeGenerated):
    """Classification of agents"""

    __tablename__ = "agent_type"

    # Custom columns, properties and methods for AgentType go here.
    # The generated mapping lives in AgentTypeGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
