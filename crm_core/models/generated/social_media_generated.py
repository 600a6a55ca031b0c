# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise SocialMedia in
# crm_core/models/social_media.py or attach behaviour through crm_core.hooks.
"""
SocialMedia generated base

Social network profile of a contact or company
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class SocialMediaGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for SocialMedia"""

    __abstract__ = True

    __entity_name__ = "SocialMedia"
    __entity_label__ = "Social Media"
    __plural_label__ = "Social Media"
    __searchable_fields__ = (
        "platform",
        "url",
        "username",
    )
    __sortable_fields__ = (
        "platform",
        "url",
        "username",
        "verified",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "platform",
        "url",
        "username",
        "contact_id",
        "company_id",
        "verified",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    platform = mapped_column(sa.String(50), nullable=False)
    url = mapped_column(sa.String(500))
    username = mapped_column(sa.String(100))
    contact_id = mapped_column(sa.Uuid, sa.ForeignKey("contact.id", ondelete="CASCADE"), index=True)
    company_id = mapped_column(sa.Uuid, sa.ForeignKey("company.id", ondelete="CASCADE"), index=True)
    verified = mapped_column(sa.Boolean, nullable=False, default=False)

    @declared_attr
    def contact(cls):
        return relationship("Contact")

    @declared_attr
    def company(cls):
        return relationship("Company")
