# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise EventCategory in
# crm_core/models/event_category.py or attach behaviour through crm_core.hooks.
"""
EventCategory generated base

Classification of events
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class EventCategoryGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for EventCategory"""

    __abstract__ = True

    __entity_name__ = "EventCategory"
    __entity_label__ = "Event Category"
    __plural_label__ = "Event Categories"
    __searchable_fields__ = (
        "name",
        "color",
        "icon",
    )
    __sortable_fields__ = (
        "name",
        "color",
        "icon",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "color",
        "icon",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    color = mapped_column(sa.String(7))
    icon = mapped_column(sa.String(50))
    active = mapped_column(sa.Boolean, nullable=False, default=True)
