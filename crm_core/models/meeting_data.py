"""
MeetingData entity

Agenda, minutes and recording details of a meeting
"""

from .generated.meeting_data_generated import MeetingDataGenerated


class MeetingData(MeetingDataGenerated):
    """Agenda, minutes and recording details of a meeting"""

    __tablename__ = "meeting_data"

    # Custom columns, properties and methods for MeetingData go here.
    # The generated mapping lives in MeetingDataGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
