"""
Pipeline entity

Ordered sequence of stages that deals move through
"""

from .generated.pipeline_generated import PipelineGenerated


class Pipeline(PipelineGenerated):
    """Ordered sequence of stages that deals move through"""

    __tablename__ = "pipeline"

    # Custom columns, properties and methods for Pipeline go here.
    # The generated mapping lives in PipelineGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
