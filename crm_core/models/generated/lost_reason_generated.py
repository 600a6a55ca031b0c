# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise LostReason in
# crm_core/models/lost_reason.py or attach behaviour through crm_core.hooks.
"""
LostReason generated base

Reason a deal was lost
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class LostReasonGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for LostReason"""

    __abstract__ = True

    __entity_name__ = "LostReason"
    __entity_label__ = "Lost Reason"
    __plural_label__ = "Lost Reasons"
    __searchable_fields__ = (
        "name",
    )
    __sortable_fields__ = (
        "name",
        "display_order",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "display_order",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    description = mapped_column(sa.Text)
    display_order = mapped_column(sa.Integer, nullable=False, default=0)
    active = mapped_column(sa.Boolean, nullable=False, default=True)
