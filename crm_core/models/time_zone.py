"""
TimeZone entity

Time zone reference data
"""

from .generated.time_zone_generated import TimeZoneGenerated


class TimeZone(TimeZoneGenerated):
    """Time zone reference data"""

    __tablename__ = "time_zone"

    # Custom columns, properties and methods for TimeZone go here.
    # The generated mapping lives in TimeZoneGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
