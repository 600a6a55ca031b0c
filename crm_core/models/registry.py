"""
CRM Entity Registry
Name and slug lookup over the generated entity classes
"""

import re
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Type
from uuid import UUID

from sqlalchemy import inspect

from ..core.exceptions import UnknownEntityError
from . import ENTITY_CLASSES
from .mixins import OrganizationMixin, SoftDeleteMixin

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def slug_for(model: Type) -> str:
    """URL slug of an entity class, e.g. DealStage -> deal-stage"""
    return _WORD_BOUNDARY.sub("-", model.__entity_name__).lower()


_BY_SLUG = {slug_for(model): model for model in ENTITY_CLASSES.values()}


def iter_entities() -> Iterator[Type]:
    return iter(ENTITY_CLASSES.values())


def get_entity_class(name: str) -> Type:
    """Resolve an entity class by its catalog name"""
    try:
        return ENTITY_CLASSES[name]
    except KeyError:
        raise UnknownEntityError(name) from None


def entity_for_slug(slug: str) -> Type:
    try:
        return _BY_SLUG[slug]
    except KeyError:
        raise UnknownEntityError(slug) from None


def column_names(model: Type) -> List[str]:
    return [column.key for column in inspect(model).column_attrs]


def is_tenant_scoped(model: Type) -> bool:
    return issubclass(model, OrganizationMixin)


def is_soft_deletable(model: Type) -> bool:
    return issubclass(model, SoftDeleteMixin)


def describe(model: Type) -> Dict[str, Any]:
    """Catalog metadata of an entity class"""
    return {
        "name": model.__entity_name__,
        "label": model.__entity_label__,
        "plural_label": model.__plural_label__,
        "table": model.__tablename__,
        "slug": slug_for(model),
        "description": model.__doc__,
        "columns": column_names(model),
        "searchable_fields": list(model.__searchable_fields__),
        "sortable_fields": list(model.__sortable_fields__),
        "filterable_fields": list(model.__filterable_fields__),
        "tenant_scoped": is_tenant_scoped(model),
        "soft_deletable": is_soft_deletable(model),
    }


def _jsonable(value: Any) -> Any:
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return value


def to_dict(instance: Any) -> Dict[str, Any]:
    """Column values of an entity instance, ready for JSON encoding"""
    model = type(instance)
    return {key: _jsonable(getattr(instance, key)) for key in column_names(model)}
