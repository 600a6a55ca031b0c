"""
PipelineTemplate entity

Reusable pipeline blueprint
"""

from .generated.pipeline_template_generated import PipelineTemplateGenerated


class PipelineTemplate(PipelineTemplateGenerated):
    """Reusable pipeline blueprint"""

    __tablename__ = "pipeline_template"

    # Custom columns, properties and methods for PipelineTemplate go here.
    # The generated mapping lives in PipelineTemplateGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
