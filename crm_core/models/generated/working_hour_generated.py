# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise WorkingHour in
# crm_core/models/working_hour.py or attach behaviour through crm_core.hooks.
"""
WorkingHour generated base

Working time window of a calendar for a weekday
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class WorkingHourGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for WorkingHour"""

    __abstract__ = True

    __entity_name__ = "WorkingHour"
    __entity_label__ = "Working Hour"
    __plural_label__ = "Working Hours"
    __searchable_fields__ = ()
    __sortable_fields__ = (
        "day_of_week",
        "start_time",
        "end_time",
        "is_working_day",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "calendar_id",
        "day_of_week",
        "start_time",
        "end_time",
        "is_working_day",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    calendar_id = mapped_column(sa.Uuid, sa.ForeignKey("calendar.id", ondelete="CASCADE"), nullable=False, index=True)
    day_of_week = mapped_column(sa.Integer, nullable=False)
    start_time = mapped_column(sa.Time)
    end_time = mapped_column(sa.Time)
    is_working_day = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def calendar(cls):
        return relationship("Calendar")
