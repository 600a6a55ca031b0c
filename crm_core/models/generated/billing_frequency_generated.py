# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise BillingFrequency in
# crm_core/models/billing_frequency.py or attach behaviour through crm_core.hooks.
"""
BillingFrequency generated base

Recurring billing interval offered for products
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class BillingFrequencyGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for BillingFrequency"""

    __abstract__ = True

    __entity_name__ = "BillingFrequency"
    __entity_label__ = "Billing Frequency"
    __plural_label__ = "Billing Frequencies"
    __searchable_fields__ = (
        "name",
        "code",
        "interval_unit",
    )
    __sortable_fields__ = (
        "name",
        "code",
        "interval_count",
        "interval_unit",
        "display_order",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "code",
        "interval_count",
        "interval_unit",
        "display_order",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    code = mapped_column(sa.String(50))
    interval_count = mapped_column(sa.Integer, nullable=False, default=1)
    interval_unit = mapped_column(sa.String(20), nullable=False, default="month")
    display_order = mapped_column(sa.Integer, nullable=False, default=0)
    active = mapped_column(sa.Boolean, nullable=False, default=True)
