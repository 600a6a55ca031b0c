"""
Holiday entity

Non-working day
"""

from .generated.holiday_generated import HolidayGenerated


class Holiday(HolidayGenerated):
    """Non-working day"""

    __tablename__ = "holiday"

    # Custom columns, properties and methods for Holiday go here.
    # The generated mapping lives in HolidayGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
