# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise EventResourceType in
# crm_core/models/event_resource_type.py or attach behaviour through crm_core.hooks.
"""
EventResourceType generated base

Classification of bookable resources
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class EventResourceTypeGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for EventResourceType"""

    __abstract__ = True

    __entity_name__ = "EventResourceType"
    __entity_label__ = "Event Resource Type"
    __plural_label__ = "Event Resource Types"
    __searchable_fields__ = (
        "name",
        "icon",
    )
    __sortable_fields__ = (
        "name",
        "icon",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "icon",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    icon = mapped_column(sa.String(50))
    active = mapped_column(sa.Boolean, nullable=False, default=True)
