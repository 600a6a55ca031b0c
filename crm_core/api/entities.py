"""
CRM Entity API Endpoints
Catalog description and generic CRUD/search routes for every entity
"""

from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Header, HTTPException, Query, Request, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from ..core.config import settings
from ..core.database import get_db
from ..core.exceptions import CRMError, EntityNotFoundError, UnknownEntityError, ValidationError
from ..models.registry import describe, entity_for_slug, iter_entities
from ..repositories.base import SearchCriteria
from ..services.entity_service import EntityService

logger = structlog.get_logger()
router = APIRouter(tags=["entities"])

# Query parameters consumed by the search route; anything else is a filter
SEARCH_PARAMS = {"q", "page", "limit", "sort_by", "sort_dir", "include_deleted"}


class RequestContext(BaseModel):
    """Tenant and actor of the current request"""
    organization_id: Optional[UUID] = None
    user_id: Optional[UUID] = None


def _parse_uuid_header(name: str, value: Optional[str]) -> Optional[UUID]:
    if not value:
        return None
    try:
        return UUID(value)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {name} header: {value}"
        )


async def get_request_context(
    x_organization_id: Optional[str] = Header(None),
    x_user_id: Optional[str] = Header(None),
) -> RequestContext:
    """Resolve tenant and actor from request headers"""
    organization_id = _parse_uuid_header("X-Organization-Id", x_organization_id)
    return RequestContext(
        organization_id=organization_id or settings.default_organization_id,
        user_id=_parse_uuid_header("X-User-Id", x_user_id),
    )


def _http_error(error: CRMError) -> HTTPException:
    if isinstance(error, (UnknownEntityError, EntityNotFoundError)):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))


def _service(db: AsyncSession, slug: str, context: RequestContext) -> EntityService:
    return EntityService.for_slug(
        db,
        slug,
        organization_id=context.organization_id,
        user_id=context.user_id,
    )


@router.get("/entities")
async def list_entities():
    """Describe every entity in the catalog"""
    entities = [describe(model) for model in iter_entities()]
    return {"entities": entities, "count": len(entities)}


@router.get("/entities/{slug}")
async def describe_entity(slug: str):
    """Describe one entity"""
    try:
        return describe(entity_for_slug(slug))
    except UnknownEntityError as e:
        raise _http_error(e)


@router.get("/{slug}")
async def search_entities(
    slug: str,
    request: Request,
    q: Optional[str] = Query(None, description="Search term"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1),
    sort_by: Optional[str] = None,
    sort_dir: str = Query("asc"),
    include_deleted: bool = False,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context),
):
    """Search, filter, sort and paginate entities"""

    filters = {
        key: value
        for key, value in request.query_params.items()
        if key not in SEARCH_PARAMS
    }

    try:
        service = _service(db, slug, context)
        criteria = SearchCriteria(
            query=q,
            filters=filters,
            sort_by=sort_by,
            sort_dir=sort_dir,
            page=page,
            limit=limit,
            include_deleted=include_deleted,
        )
        return await service.search(criteria)

    except CRMError as e:
        raise _http_error(e)
    except Exception as e:
        logger.error("Entity search failed", slug=slug, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search entities"
        )


@router.post("/{slug}", status_code=status.HTTP_201_CREATED)
async def create_entity(
    slug: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context),
):
    """Create an entity"""

    try:
        return await _service(db, slug, context).create(payload)

    except CRMError as e:
        raise _http_error(e)
    except Exception as e:
        logger.error("Entity creation failed", slug=slug, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create entity"
        )


@router.get("/{slug}/{entity_id}")
async def get_entity(
    slug: str,
    entity_id: UUID,
    include_deleted: bool = False,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context),
):
    """Get entity by ID"""

    try:
        return await _service(db, slug, context).get(entity_id, include_deleted=include_deleted)

    except CRMError as e:
        raise _http_error(e)
    except Exception as e:
        logger.error("Entity retrieval failed", slug=slug, entity_id=str(entity_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve entity"
        )


@router.patch("/{slug}/{entity_id}")
async def update_entity(
    slug: str,
    entity_id: UUID,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context),
):
    """Partially update an entity"""

    try:
        return await _service(db, slug, context).update(entity_id, payload)

    except CRMError as e:
        raise _http_error(e)
    except Exception as e:
        logger.error("Entity update failed", slug=slug, entity_id=str(entity_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update entity"
        )


@router.delete("/{slug}/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entity(
    slug: str,
    entity_id: UUID,
    hard: bool = False,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context),
):
    """Delete an entity; soft-deletable entities are kept unless hard=true"""

    try:
        await _service(db, slug, context).delete(entity_id, hard=hard)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except CRMError as e:
        raise _http_error(e)
    except Exception as e:
        logger.error("Entity deletion failed", slug=slug, entity_id=str(entity_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete entity"
        )


@router.post("/{slug}/{entity_id}/restore")
async def restore_entity(
    slug: str,
    entity_id: UUID,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context),
):
    """Restore a soft-deleted entity"""

    try:
        return await _service(db, slug, context).restore(entity_id)

    except CRMError as e:
        raise _http_error(e)
    except Exception as e:
        logger.error("Entity restore failed", slug=slug, entity_id=str(entity_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to restore entity"
        )
