"""
PipelineStage entity

Stage of a pipeline
"""

from .generated.pipeline_stage_generated import PipelineStageGenerated


class PipelineStage(PipelineStageGenerated):
    """Stage of a pipeline"""

    __tablename__ = "pipeline_stage"

    # Custom columns, properties and methods for PipelineStage go here.
    # The generated mapping lives in PipelineStageGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
