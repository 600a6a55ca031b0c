# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Tag in
# crm_core/models/tag.py or attach behaviour through crm_core.hooks.
"""
Tag generated base

Free label attached to records
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class TagGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for Tag"""

    __abstract__ = True

    __entity_name__ = "Tag"
    __entity_label__ = "Tag"
    __plural_label__ = "Tags"
    __searchable_fields__ = (
        "name",
        "color",
    )
    __sortable_fields__ = (
        "name",
        "color",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "color",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    color = mapped_column(sa.String(7))
    description = mapped_column(sa.Text)
