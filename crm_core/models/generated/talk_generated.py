# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Talk in
# crm_core/models/talk.py or attach behaviour through crm_core.hooks.
"""
Talk generated base

Conversation with a contact across a channel
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin


class TalkGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):
    """Generated mapping for Talk"""

    __abstract__ = True

    __entity_name__ = "Talk"
    __entity_label__ = "Talk"
    __plural_label__ = "Talks"
    __searchable_fields__ = (
        "subject",
        "channel",
        "status",
    )
    __sortable_fields__ = (
        "subject",
        "channel",
        "status",
        "paused",
        "started_at",
        "closed_at",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "subject",
        "contact_id",
        "deal_id",
        "agent_id",
        "channel",
        "status",
        "paused",
        "tree_flow_id",
        "owner_id",
        "started_at",
        "closed_at",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    subject = mapped_column(sa.String(255))
    contact_id = mapped_column(sa.Uuid, sa.ForeignKey("contact.id", ondelete="SET NULL"), index=True)
    deal_id = mapped_column(sa.Uuid, sa.ForeignKey("deal.id", ondelete="SET NULL"), index=True)
    agent_id = mapped_column(sa.Uuid, sa.ForeignKey("agent.id", ondelete="SET NULL"), index=True)
    channel = mapped_column(sa.String(30), nullable=False, default="whatsapp")
    status = mapped_column(sa.String(20), nullable=False, default="open")
    paused = mapped_column(sa.Boolean, nullable=False, default=False)
    summary = mapped_column(sa.Text)
    tree_flow_id = mapped_column(sa.Uuid, index=True)
    owner_id = mapped_column(sa.Uuid, index=True)
    started_at = mapped_column(sa.DateTime(timezone=True))
    closed_at = mapped_column(sa.DateTime(timezone=True))

    @declared_attr
    def contact(cls):
        return relationship("Contact")

    @declared_attr
    def deal(cls):
        return relationship("Deal")

    @declared_attr
    def agent(cls):
        return relationship("Agent")
