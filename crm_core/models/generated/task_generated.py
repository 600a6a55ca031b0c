# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Task in
# crm_core/models/task.py or attach behaviour through crm_core.hooks.
"""
Task generated base

Unit of work assigned to a user
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import declared_attr, mapped_column, relationship

from ...core.database import Base
from ..mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin


class TaskGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):
    """Generated mapping for Task"""

    __abstract__ = True

    __entity_name__ = "Task"
    __entity_label__ = "Task"
    __plural_label__ = "Tasks"
    __searchable_fields__ = (
        "title",
        "priority",
        "status",
    )
    __sortable_fields__ = (
        "title",
        "priority",
        "status",
        "due_date",
        "scheduled_date",
        "completed_at",
        "estimated_minutes",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "title",
        "task_template_id",
        "deal_id",
        "contact_id",
        "company_id",
        "priority",
        "status",
        "due_date",
        "scheduled_date",
        "completed_at",
        "estimated_minutes",
        "assigned_to_id",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    title = mapped_column(sa.String(255), nullable=False)
    description = mapped_column(sa.Text)
    task_template_id = mapped_column(sa.Uuid, sa.ForeignKey("task_template.id", ondelete="SET NULL"), index=True)
    deal_id = mapped_column(sa.Uuid, sa.ForeignKey("deal.id", ondelete="SET NULL"), index=True)
    contact_id = mapped_column(sa.Uuid, sa.ForeignKey("contact.id", ondelete="SET NULL"), index=True)
    company_id = mapped_column(sa.Uuid, sa.ForeignKey("company.id", ondelete="SET NULL"), index=True)
    priority = mapped_column(sa.String(20), nullable=False, default="medium")
    status = mapped_column(sa.String(20), nullable=False, default="pending")
    due_date = mapped_column(sa.DateTime(timezone=True), index=True)
    scheduled_date = mapped_column(sa.DateTime(timezone=True))
    completed_at = mapped_column(sa.DateTime(timezone=True))
    estimated_minutes = mapped_column(sa.Integer)
    assigned_to_id = mapped_column(sa.Uuid, index=True)

    @declared_attr
    def task_template(cls):
        return relationship("TaskTemplate")

    @declared_attr
    def deal(cls):
        return relationship("Deal")

    @declared_attr
    def contact(cls):
        return relationship("Contact")

    @declared_attr
    def company(cls):
        return relationship("Company")
