"""
PipelineStageTemplate entity

Stage of a pipeline template
"""

from .generated.pipeline_stage_template_generated import PipelineStageTemplateGenerated


class PipelineStageTemplate(PipelineStageTemplateGenerated):
    """Stage of a pipeline template"""

    __tablename__ = "pipeline_stage_template"

    # Custom columns, properties and methods for PipelineStageTemplate go here.
    # The generated mapping lives in PipelineStageTemplateGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
