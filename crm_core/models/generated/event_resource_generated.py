# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise EventResource in
# crm_core/models/event_resource.py or attach behaviour through crm_core.hooks.
"""
EventResource generated base

Bookable resource such as a room or equipment
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class EventResourceGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for EventResource"""

    __abstract__ = True

    __entity_name__ = "EventResource"
    __entity_label__ = "Event Resource"
    __plural_label__ = "Event Resources"
    __searchable_fields__ = (
        "name",
        "location",
    )
    __sortable_fields__ = (
        "name",
        "location",
        "capacity",
        "bookable",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "event_resource_type_id",
        "location",
        "capacity",
        "bookable",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    event_resource_type_id = mapped_column(sa.Uuid, sa.ForeignKey("event_resource_type.id", ondelete="SET NULL"), index=True)
    description = mapped_column(sa.Text)
    location = mapped_column(sa.String(255))
    capacity = mapped_column(sa.Integer)
    bookable = mapped_column(sa.Boolean, nullable=False, default=True)
    active = mapped_column(sa.Boolean, nullable=False, default=True)

    @declared_attr
    def event_resource_type(cls):
        return relationship("EventResourceType")
