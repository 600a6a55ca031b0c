# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise ProfileTemplate in
# crm_core/models/profile_template.py or attach behaviour through crm_core.hooks.
"""
ProfileTemplate generated base

Template describing the fields of a profile
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin


class ProfileTemplateGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):
    """Generated mapping for ProfileTemplate"""

    __abstract__ = True

    __entity_name__ = "ProfileTemplate"
    __entity_label__ = "Profile Template"
    __plural_label__ = "Profile Templates"
    __searchable_fields__ = (
        "template_name",
        "template_code",
        "icon",
        "color",
        "category",
        "industry",
        "version",
    )
    __sortable_fields__ = (
        "template_name",
        "template_code",
        "icon",
        "color",
        "category",
        "industry",
        "version",
        "usage_count",
        "last_used_at",
        "default_template",
        "system",
        "published",
        "ai_suggestions_enabled",
        "gdpr_compliant",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "template_name",
        "template_code",
        "icon",
        "color",
        "category",
        "industry",
        "version",
        "usage_count",
        "last_used_at",
        "default_template",
        "system",
        "published",
        "ai_suggestions_enabled",
        "gdpr_compliant",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    template_name = mapped_column(sa.String(255), nullable=False, index=True)
    template_code = mapped_column(sa.String(100), nullable=False, index=True)
    description = mapped_column(sa.Text)
    icon = mapped_column(sa.String(50), default="bi-file-earmark-person")
    color = mapped_column(sa.String(7), nullable=False, default="#6c757d")
    category = mapped_column(sa.String(100), nullable=False)
    industry = mapped_column(sa.String(100))
    tags = mapped_column(sa.JSON)
    version = mapped_column(sa.String(20), nullable=False, default="1.0.0")
    changelog = mapped_column(sa.Text)
    usage_count = mapped_column(sa.Integer, nullable=False, default=0)
    last_used_at = mapped_column(sa.DateTime(timezone=True))
    config = mapped_column(sa.JSON)
    default_template = mapped_column(sa.Boolean, nullable=False, default=False)
    system = mapped_column(sa.Boolean, nullable=False, default=False)
    published = mapped_column(sa.Boolean, nullable=False, default=False)
    ai_suggestions_enabled = mapped_column(sa.Boolean, nullable=False, default=False)
    gdpr_compliant = mapped_column(sa.Boolean, nullable=False, default=False)
    active = mapped_column(sa.Boolean, nullable=False, default=True)
