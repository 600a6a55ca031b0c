"""
HolidayTemplate entity

Reusable set of holidays for a country and year
"""

from .generated.holiday_template_generated import HolidayTemplateGenerated


class HolidayTemplate(HolidayTemplateGenerated):
    """Reusable set of holidays for a country and year"""

    __tablename__ = "holiday_template"

    # Custom columns, properties and methods for HolidayTemplate go here.
    # The generated mapping lives in HolidayTemplateGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
