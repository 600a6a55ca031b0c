"""
CRM Entity Mixins
Audit, soft-delete and tenant columns shared by generated entity bases
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditMixin:
    """Creation and modification tracking"""

    created_at = mapped_column(sa.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = mapped_column(sa.DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
    created_by_id = mapped_column(sa.Uuid)
    updated_by_id = mapped_column(sa.Uuid)

    def touch(self, user_id: Optional[UUID] = None) -> None:
        """Stamp the entity as modified now, optionally by a user"""
        self.updated_at = utcnow()
        if user_id is not None:
            self.updated_by_id = user_id


class SoftDeleteMixin:
    """Mark rows as deleted instead of removing them

    A row with ``deleted_at`` set is hidden from searches unless explicitly
    requested and can be brought back with :meth:`restore`.
    """

    deleted_at = mapped_column(sa.DateTime(timezone=True), index=True)
    deleted_by_id = mapped_column(sa.Uuid)

    def soft_delete(self, user_id: Optional[UUID] = None) -> None:
        self.deleted_at = utcnow()
        self.deleted_by_id = user_id

    def restore(self) -> None:
        self.deleted_at = None
        self.deleted_by_id = None

    @property
    def is_deleted(self) -> bool:
        """Check if entity is soft-deleted"""
        return self.deleted_at is not None

    @property
    def is_active(self) -> bool:
        """Check if entity is not soft-deleted"""
        return self.deleted_at is None


class OrganizationMixin:
    """Tenant ownership"""

    organization_id = mapped_column(sa.Uuid, nullable=False, index=True)
