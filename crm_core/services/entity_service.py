"""
CRM Entity Service
Generic CRUD and search over any catalog entity, returning API-ready data
"""

from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from ..core.exceptions import CRMError, EntityNotFoundError
from ..hooks import HookRegistry
from ..models.registry import describe, entity_for_slug, get_entity_class, to_dict
from ..repositories.base import EntityRepository, SearchCriteria

logger = structlog.get_logger()


class EntityService:
    """Service for working with one entity on behalf of a tenant and user"""

    def __init__(
        self,
        db: AsyncSession,
        entity_name: str,
        organization_id: Optional[UUID] = None,
        user_id: Optional[UUID] = None,
        hooks: Optional[HookRegistry] = None,
    ):
        self.db = db
        self.model = get_entity_class(entity_name)
        self.entity_name = entity_name
        self.user_id = user_id
        self.repository = EntityRepository(db, self.model, organization_id=organization_id, hooks=hooks)

    @classmethod
    def for_slug(cls, db: AsyncSession, slug: str, **kwargs: Any) -> "EntityService":
        return cls(db, entity_for_slug(slug).__entity_name__, **kwargs)

    def describe(self) -> Dict[str, Any]:
        return describe(self.model)

    async def search(self, criteria: SearchCriteria) -> Dict[str, Any]:
        """Search entities and return one page of results"""

        try:
            result = await self.repository.api_search(criteria)

            return {
                "items": [to_dict(item) for item in result.items],
                "total": result.total,
                "page": result.page,
                "limit": result.limit,
                "pages": result.pages,
                "sort_by": result.sort_by,
                "sort_dir": result.sort_dir,
                "has_next": result.has_next,
                "has_previous": result.has_previous,
            }

        except CRMError:
            raise
        except Exception as e:
            logger.error("Entity search failed", entity=self.entity_name, error=str(e))
            raise

    async def get(self, entity_id: UUID, include_deleted: bool = False) -> Dict[str, Any]:
        try:
            entity = await self.repository.get_or_raise(entity_id, include_deleted=include_deleted)
            return to_dict(entity)

        except CRMError:
            raise
        except Exception as e:
            logger.error("Failed to get entity", entity=self.entity_name, entity_id=str(entity_id), error=str(e))
            raise

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a new entity"""

        try:
            entity = await self.repository.create(data, user_id=self.user_id)

            logger.info("Entity created", entity=self.entity_name, entity_id=str(entity.id))

            return to_dict(entity)

        except CRMError as e:
            logger.warning("Entity rejected", entity=self.entity_name, error=str(e))
            raise
        except Exception as e:
            logger.error("Failed to create entity", entity=self.entity_name, error=str(e))
            raise

    async def update(self, entity_id: UUID, data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply a partial update"""

        try:
            entity = await self.repository.update(entity_id, data, user_id=self.user_id)

            logger.info(
                "Entity updated",
                entity=self.entity_name,
                entity_id=str(entity_id),
                fields=sorted(data.keys()),
            )

            return to_dict(entity)

        except CRMError as e:
            logger.warning("Entity update rejected", entity=self.entity_name, entity_id=str(entity_id), error=str(e))
            raise
        except Exception as e:
            logger.error("Failed to update entity", entity=self.entity_name, entity_id=str(entity_id), error=str(e))
            raise

    async def delete(self, entity_id: UUID, hard: bool = False) -> None:
        """Delete an entity, softly where the entity supports it"""

        try:
            deleted = await self.repository.delete(entity_id, user_id=self.user_id, hard=hard)
            if not deleted:
                raise EntityNotFoundError(self.entity_name, entity_id)

            logger.info(
                "Entity deleted",
                entity=self.entity_name,
                entity_id=str(entity_id),
                soft=self.repository.soft_deletable and not hard,
            )

        except CRMError:
            raise
        except Exception as e:
            logger.error("Failed to delete entity", entity=self.entity_name, entity_id=str(entity_id), error=str(e))
            raise

    async def restore(self, entity_id: UUID) -> Dict[str, Any]:
        """Undo a soft delete"""

        try:
            entity = await self.repository.restore(entity_id, user_id=self.user_id)

            logger.info("Entity restored", entity=self.entity_name, entity_id=str(entity_id))

            return to_dict(entity)

        except CRMError as e:
            logger.warning("Entity restore rejected", entity=self.entity_name, entity_id=str(entity_id), error=str(e))
            raise
        except Exception as e:
            logger.error("Failed to restore entity", entity=self.entity_name, entity_id=str(entity_id), error=str(e))
            raise
