"""
ProfileTemplate entity

Template describing the fields of a profile
"""

from .generated.profile_template_generated import ProfileTemplateGenerated


class ProfileTemplate(ProfileTemplateGenerated):
    """Template describing the fields of a profile"""

    __tablename__ = "profile_template"

    # Custom columns, properties and methods for ProfileTemplate go here.
    # The generated mapping lives in ProfileTemplateGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
