"""
CRM Entity Repository
Generic data access for every catalog entity: CRUD, soft delete, tenant
scoping, and the search / filter / sort / paginate query used by the API.
"""

import math
from datetime import date, datetime, time, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar
from uuid import UUID

import sqlalchemy as sa
import structlog
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import asc, desc, func, inspect, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.config import settings
from ..core.database import unaccent as strip_accents
from ..core.exceptions import (
    EntityNotFoundError,
    TenantRequiredError,
    ValidationError,
)
from ..hooks import HookEvent, HookRegistry, hooks as default_hooks
from ..models.mixins import OrganizationMixin, SoftDeleteMixin

logger = structlog.get_logger()

EntityType = TypeVar("EntityType")

# Columns managed by the repository and mixins, never taken from payloads
READ_ONLY_COLUMNS = frozenset({
    "id",
    "organization_id",
    "created_at",
    "updated_at",
    "created_by_id",
    "updated_by_id",
    "deleted_at",
    "deleted_by_id",
})

TRUE_VALUES = ("true", "1", "yes", "y", "active")
FALSE_VALUES = ("false", "0", "no", "n", "inactive")


class SearchCriteria(BaseModel):
    """Search, filter, sort and pagination parameters"""
    query: Optional[str] = None
    filters: Dict[str, str] = Field(default_factory=dict)
    sort_by: Optional[str] = None
    sort_dir: str = "asc"
    page: int = Field(1, ge=1)
    limit: int = Field(default_factory=lambda: settings.default_page_size, ge=1)
    include_deleted: bool = False

    @property
    def is_searching(self) -> bool:
        return bool(self.query and self.query.strip())

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PaginatedResult(BaseModel):
    """One page of search results with paging metadata"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: List[Any]
    total: int
    page: int
    limit: int
    sort_by: str
    sort_dir: str

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def normalize_search_term(term: str) -> str:
    """Lower-case and strip accents, e.g. 'Crème' -> 'creme'"""
    return strip_accents(term.strip())


def parse_boolean(value: Any) -> Optional[bool]:
    """Parse user input as a boolean; None when not recognised"""
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    return None


def coerce_value(column: sa.Column, value: Any) -> Any:
    """Convert a JSON/query-string value to the Python type of a column"""
    if value is None:
        return None

    col_type = column.type
    name = column.key
    try:
        if isinstance(col_type, sa.Boolean):
            parsed = parse_boolean(value)
            if parsed is None:
                raise ValueError(value)
            return parsed
        if isinstance(col_type, sa.Uuid):
            return value if isinstance(value, UUID) else UUID(str(value))
        if isinstance(col_type, sa.DateTime):
            return value if isinstance(value, datetime) else datetime.fromisoformat(str(value))
        if isinstance(col_type, sa.Date):
            return value if isinstance(value, date) else date.fromisoformat(str(value))
        if isinstance(col_type, sa.Time):
            return value if isinstance(value, time) else time.fromisoformat(str(value))
        if isinstance(col_type, sa.Integer):
            if isinstance(value, bool):
                raise ValueError(value)
            return int(value)
        if isinstance(col_type, sa.Numeric):
            return value if isinstance(value, Decimal) else Decimal(str(value))
        if isinstance(col_type, sa.String):
            if not isinstance(value, str):
                raise ValueError(value)
            return value
    except (ValueError, TypeError, InvalidOperation):
        raise ValidationError(f"Invalid value for {name}: {value!r}", field=name) from None
    return value


class EntityRepository(Generic[EntityType]):
    """Repository for one entity class"""

    def __init__(
        self,
        session: AsyncSession,
        model: Type[EntityType],
        organization_id: Optional[UUID] = None,
        hooks: Optional[HookRegistry] = None,
        max_page_size: Optional[int] = None,
        unaccent: Optional[bool] = None,
    ):
        self.session = session
        self.model = model
        self.organization_id = organization_id
        self.hooks = hooks if hooks is not None else default_hooks
        self.max_page_size = max_page_size or settings.max_page_size
        self.unaccent = settings.search_unaccent if unaccent is None else unaccent
        self.entity_name = model.__entity_name__
        self.tenant_scoped = issubclass(model, OrganizationMixin)
        self.soft_deletable = issubclass(model, SoftDeleteMixin)

        mapper = inspect(model)
        self._columns: Dict[str, sa.Column] = {
            prop.key: prop.columns[0] for prop in mapper.column_attrs
        }
        self._relations = set(mapper.relationships.keys())

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------

    def _scoped_query(self, include_deleted: bool = False):
        stmt = select(self.model)
        if self.tenant_scoped:
            if self.organization_id is None:
                raise TenantRequiredError(self.entity_name)
            stmt = stmt.where(self.model.organization_id == self.organization_id)
        if self.soft_deletable and not include_deleted:
            stmt = stmt.where(self.model.deleted_at.is_(None))
        return stmt

    def _entity_id(self, entity_id: Any) -> UUID:
        return coerce_value(self._columns["id"], entity_id)

    def _clean(self, data: Dict[str, Any]) -> Dict[str, Any]:
        values = {}
        for key, value in data.items():
            if key not in self._columns:
                raise ValidationError(f"{self.entity_name} has no field '{key}'", field=key)
            if key in READ_ONLY_COLUMNS:
                raise ValidationError(f"{self.entity_name}.{key} is read-only", field=key)
            column = self._columns[key]
            if value is None and not column.nullable:
                raise ValidationError(f"{self.entity_name}.{key} cannot be null", field=key)
            values[key] = coerce_value(column, value)
        return values

    def _check_required(self, values: Dict[str, Any]) -> None:
        for key, column in self._columns.items():
            if key in READ_ONLY_COLUMNS or column.nullable:
                continue
            if column.default is not None or column.server_default is not None:
                continue
            if values.get(key) is None:
                raise ValidationError(f"{self.entity_name}.{key} is required", field=key)

    def _dialect_name(self) -> str:
        bind = self.session.bind
        return bind.dialect.name if bind is not None else ""

    def _text_match(self, column, term: str):
        # SQLite connections get a Python unaccent() from configure_sqlite
        dialect = self._dialect_name()
        expression = func.lower(column)
        if dialect == "sqlite" or (dialect == "postgresql" and self.unaccent):
            expression = func.unaccent(expression)
        return expression.like(f"%{normalize_search_term(term)}%")

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ValidationError(f"{self.entity_name} violates a database constraint: {e.orig}") from e

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    async def create(self, data: Dict[str, Any], user_id: Optional[UUID] = None) -> EntityType:
        """Create and persist a new entity from column values"""
        values = self._clean(data)
        self._check_required(values)
        if self.tenant_scoped:
            if self.organization_id is None:
                raise TenantRequiredError(self.entity_name)
            values["organization_id"] = self.organization_id

        entity = self.model(**values)
        entity.created_by_id = user_id
        entity.updated_by_id = user_id

        context = {"repository": self, "user_id": user_id, "data": data}
        try:
            await self.hooks.run(self.entity_name, HookEvent.BEFORE_CREATE, entity, **context)
            self.session.add(entity)
            await self.session.flush()
            await self.hooks.run(self.entity_name, HookEvent.AFTER_CREATE, entity, **context)
        except IntegrityError as e:
            await self.session.rollback()
            raise ValidationError(f"{self.entity_name} violates a database constraint: {e.orig}") from e
        except Exception:
            await self.session.rollback()
            raise

        await self._commit()
        await self.session.refresh(entity)
        return entity

    async def get_by_id(self, entity_id: Any, include_deleted: bool = False) -> Optional[EntityType]:
        """Get entity by id within the current scope"""
        stmt = self._scoped_query(include_deleted).where(self.model.id == self._entity_id(entity_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_or_raise(self, entity_id: Any, include_deleted: bool = False) -> EntityType:
        entity = await self.get_by_id(entity_id, include_deleted=include_deleted)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity

    async def update(self, entity_id: Any, data: Dict[str, Any], user_id: Optional[UUID] = None) -> EntityType:
        """Apply a partial update to an entity"""
        entity = await self.get_or_raise(entity_id)
        values = self._clean(data)

        context = {"repository": self, "user_id": user_id, "data": data}
        try:
            await self.hooks.run(self.entity_name, HookEvent.BEFORE_UPDATE, entity, **context)
            for key, value in values.items():
                setattr(entity, key, value)
            entity.touch(user_id)
            await self.session.flush()
            await self.hooks.run(self.entity_name, HookEvent.AFTER_UPDATE, entity, **context)
        except IntegrityError as e:
            await self.session.rollback()
            raise ValidationError(f"{self.entity_name} violates a database constraint: {e.orig}") from e
        except Exception:
            await self.session.rollback()
            raise

        await self._commit()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity_id: Any, user_id: Optional[UUID] = None, hard: bool = False) -> bool:
        """Delete an entity; soft-deletable entities are only marked unless hard is set

        Returns:
            True if deleted, False if not found
        """
        soft = self.soft_deletable and not hard
        entity = await self.get_by_id(entity_id, include_deleted=not soft)
        if entity is None:
            return False

        context = {"repository": self, "user_id": user_id, "hard": not soft}
        try:
            await self.hooks.run(self.entity_name, HookEvent.BEFORE_DELETE, entity, **context)
            if soft:
                entity.soft_delete(user_id)
                entity.touch(user_id)
            else:
                await self.session.delete(entity)
            await self.session.flush()
            await self.hooks.run(self.entity_name, HookEvent.AFTER_DELETE, entity, **context)
        except Exception:
            await self.session.rollback()
            raise

        await self._commit()
        return True

    async def restore(self, entity_id: Any, user_id: Optional[UUID] = None) -> EntityType:
        """Undo a soft delete"""
        if not self.soft_deletable:
            raise ValidationError(f"{self.entity_name} does not support soft delete")

        entity = await self.get_or_raise(entity_id, include_deleted=True)
        try:
            entity.restore()
            entity.touch(user_id)
            await self.session.flush()
            await self.hooks.run(self.entity_name, HookEvent.AFTER_RESTORE, entity, repository=self, user_id=user_id)
        except Exception:
            await self.session.rollback()
            raise

        await self._commit()
        await self.session.refresh(entity)
        return entity

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[EntityType]:
        """List entities with equality filters and optional pagination"""
        stmt = self._scoped_query().order_by(self.model.created_at, self.model.id)
        for key, value in (filters or {}).items():
            if value is not None and key in self._columns:
                stmt = stmt.where(getattr(self.model, key) == coerce_value(self._columns[key], value))
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_all_with_relations(self, relations: Sequence[str] = ()) -> List[EntityType]:
        """All entities in scope with the named relationships eager-loaded"""
        stmt = self._scoped_query()
        for relation in relations:
            if relation not in self._relations:
                raise ValidationError(f"{self.entity_name} has no relation '{relation}'", field=relation)
            stmt = stmt.options(selectinload(getattr(self.model, relation)))
        result = await self.session.execute(stmt.order_by(self.model.created_at, self.model.id))
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def api_search(self, criteria: SearchCriteria) -> PaginatedResult:
        """Search, filter, sort and paginate entities"""
        stmt = self._scoped_query(include_deleted=criteria.include_deleted)

        if criteria.is_searching:
            stmt = self.apply_search_filter(stmt, criteria.query)

        if criteria.filters:
            stmt = self.apply_column_filters(stmt, criteria.filters)

        # Count before pagination
        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt, sort_by, sort_dir = self.apply_sorting(stmt, criteria.sort_by, criteria.sort_dir)

        limit = min(criteria.limit, self.max_page_size)
        stmt = stmt.offset((criteria.page - 1) * limit).limit(limit)

        result = await self.session.execute(stmt)
        items = list(result.scalars().all())

        logger.debug(
            "Entity search",
            entity=self.entity_name,
            query=criteria.query,
            filters=criteria.filters,
            total=total,
            page=criteria.page,
        )

        return PaginatedResult(
            items=items,
            total=total,
            page=criteria.page,
            limit=limit,
            sort_by=sort_by,
            sort_dir=sort_dir,
        )

    def apply_search_filter(self, stmt, term: str):
        """Match the term against every searchable field"""
        fields = [name for name in self.model.__searchable_fields__ if name in self._columns]
        if not fields:
            return stmt
        return stmt.where(or_(*(self._text_match(getattr(self.model, name), term) for name in fields)))

    def apply_column_filters(self, stmt, filters: Dict[str, str]):
        """Apply per-column filters; unknown fields and unparseable values are ignored"""
        filterable = set(self.model.__filterable_fields__)

        for field, value in filters.items():
            if field not in filterable or field not in self._columns or value is None:
                continue

            column = getattr(self.model, field)
            col_type = self._columns[field].type

            if isinstance(col_type, sa.Boolean):
                parsed = parse_boolean(value)
                if parsed is not None:
                    stmt = stmt.where(column == parsed)
            elif isinstance(col_type, (sa.DateTime, sa.Date)):
                stmt = self.apply_date_range_filter(stmt, column, col_type, str(value))
            elif isinstance(col_type, (sa.Uuid, sa.Integer, sa.Numeric, sa.Time)):
                try:
                    stmt = stmt.where(column == coerce_value(self._columns[field], value))
                except ValidationError:
                    continue
            else:
                stmt = stmt.where(self._text_match(column, str(value)))

        return stmt

    @staticmethod
    def apply_date_range_filter(stmt, column, col_type, value: str):
        """Filter on a ``from:to`` range of ISO dates, either side optional"""
        start, _, end = value.partition(":")
        start, end = start.strip(), end.strip()

        if start:
            try:
                day = date.fromisoformat(start)
            except ValueError:
                day = None
            if day is not None:
                bound = day if not isinstance(col_type, sa.DateTime) else datetime.combine(day, time.min, tzinfo=timezone.utc)
                stmt = stmt.where(column >= bound)

        if end:
            try:
                day = date.fromisoformat(end)
            except ValueError:
                day = None
            if day is not None:
                bound = day if not isinstance(col_type, sa.DateTime) else datetime.combine(day, time.max, tzinfo=timezone.utc)
                stmt = stmt.where(column <= bound)

        return stmt

    def apply_sorting(self, stmt, sort_by: Optional[str], sort_dir: Optional[str]):
        """Order by an allowed field, falling back to the first sortable one"""
        sortable = [name for name in self.model.__sortable_fields__ if name in self._columns]
        if sort_by not in sortable:
            sort_by = sortable[0] if sortable else "id"
        direction = "desc" if (sort_dir or "").lower() == "desc" else "asc"
        order = desc if direction == "desc" else asc
        stmt = stmt.order_by(order(getattr(self.model, sort_by)), self.model.id)
        return stmt, sort_by, direction
