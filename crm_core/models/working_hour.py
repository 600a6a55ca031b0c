"""
WorkingHour entity

Working time window of a calendar for a weekday
"""

from .generated.working_hour_generated import WorkingHourGenerated


class WorkingHour(WorkingHourGenerated):
    """Working time window of a calendar for a weekday"""

    __tablename__ = "working_hour"

    # Custom columns, properties and methods for WorkingHour go here.
    # The generated mapping lives in WorkingHourGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
