# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Flag in
# crm_core/models/flag.py or attach behaviour through crm_core.hooks.
"""
Flag generated base

Colored marker attached to records
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class FlagGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for Flag"""

    __abstract__ = True

    __entity_name__ = "Flag"
    __entity_label__ = "Flag"
    __plural_label__ = "Flags"
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
    color = mapped_column(sa.String(7))
    icon = mapped_column(sa.String(50))
    description = mapped_column(sa.Text)
    active = mapped_column(sa.Boolean, nullable=False, default=True)
