# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Brand in
# crm_core/models/brand.py or attach behaviour through crm_core.hooks.
"""
Brand generated base

Brand under which products are sold
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class BrandGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for Brand"""

    __abstract__ = True

    __entity_name__ = "Brand"
    __entity_label__ = "Brand"
    __plural_label__ = "Brands"
    __searchable_fields__ = (
        "name",
        "logo_url",
        "website",
    )
    __sortable_fields__ = (
        "name",
        "logo_url",
        "website",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "logo_url",
        "website",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    logo_url = mapped_column(sa.String(500))
    website = mapped_column(sa.String(255))
    active = mapped_column(sa.Boolean, nullable=False, default=True)
