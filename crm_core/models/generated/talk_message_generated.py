# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise TalkMessage in
# crm_core/models/talk_message.py or attach behaviour through crm_core.hooks.
"""
TalkMessage generated base

Single message exchanged in a talk
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin


class TalkMessageGenerated(OrganizationMixin, AuditMixin, Base):
    """Generated mapping for TalkMessage"""

    __abstract__ = True

    __entity_name__ = "TalkMessage"
    __entity_label__ = "Talk Message"
    __plural_label__ = "Talk Messages"
    __searchable_fields__ = (
        "direction",
        "sender_type",
        "message_type",
        "external_id",
    )
    __sortable_fields__ = (
        "direction",
        "sender_type",
        "message_type",
        "external_id",
        "sent_at",
        "read_at",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "talk_id",
        "direction",
        "sender_type",
        "message_type",
        "external_id",
        "sent_at",
        "read_at",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    talk_id = mapped_column(sa.Uuid, sa.ForeignKey("talk.id", ondelete="CASCADE"), nullable=False, index=True)
    direction = mapped_column(sa.String(10), nullable=False)
    sender_type = mapped_column(sa.String(20), nullable=False, default="contact")
    message_type = mapped_column(sa.String(20), nullable=False, default="text")
    content = mapped_column(sa.Text)
    external_id = mapped_column(sa.String(255), index=True)
    attachments = mapped_column(sa.JSON)
    sent_at = mapped_column(sa.DateTime(timezone=True))
    read_at = mapped_column(sa.DateTime(timezone=True))

    @declared_attr
    def talk(cls):
        return relationship("Talk")
