"""
CRM Entity Definitions
Validated catalog model and the naming rules derived from it
"""

import json
import re
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator, model_validator

PROPERTY_TYPES = (
    "string",
    "text",
    "integer",
    "boolean",
    "decimal",
    "date",
    "datetime",
    "time",
    "json",
    "uuid",
    "relation",
)

# Columns supplied by the primary key and the mixins
RESERVED_NAMES = frozenset({
    "id",
    "organization_id",
    "created_at",
    "updated_at",
    "created_by_id",
    "updated_by_id",
    "deleted_at",
    "deleted_by_id",
    "metadata",
})

ON_DELETE_ACTIONS = ("SET NULL", "CASCADE")

SEARCHABLE_TYPES = ("string",)
SORTABLE_TYPES = ("string", "integer", "decimal", "date", "datetime", "time", "boolean")
UNFILTERABLE_TYPES = ("text", "json")
AUDIT_FIELDS = ("created_at", "updated_at")

_SNAKE_CASE = re.compile(r"^[a-z][a-z0-9_]*$")
_PASCAL_CASE = re.compile(r"^[A-Z][A-Za-z0-9]*$")
_UNSAFE_TEXT = re.compile(r'["\\\n\r]')
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def split_words(name: str) -> List[str]:
    """Split a PascalCase name into words, e.g. DealStage -> [Deal, Stage]"""
    return _WORD_BOUNDARY.sub(" ", name).split(" ")


def snake_case(name: str) -> str:
    return "_".join(split_words(name)).lower()


def kebab_case(name: str) -> str:
    return "-".join(split_words(name)).lower()


def pluralize(label: str) -> str:
    """English plural of a label's last word"""
    if re.search(r"[^aeiou]y$", label):
        return label[:-1] + "ies"
    if re.search(r"(s|x|ch|sh)$", label):
        return label + "es"
    return label + "s"


class PropertyDefinition(BaseModel):
    """One column (or relation) of an entity"""
    model_config = ConfigDict(extra="forbid")

    name: str
    type: str
    length: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    required: bool = False
    unique: bool = False
    index: bool = False
    default: Optional[Union[bool, int, str]] = None
    target: Optional[str] = None
    on_delete: Optional[str] = None
    searchable: Optional[bool] = None
    sortable: Optional[bool] = None
    filterable: Optional[bool] = None

    _target_table: Optional[str] = PrivateAttr(default=None)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not _SNAKE_CASE.match(v):
            raise ValueError(f"Property name '{v}' must be snake_case")
        if v in RESERVED_NAMES:
            raise ValueError(f"Property name '{v}' is reserved")
        return v

    @field_validator("type")
    @classmethod
    def validate_type(cls, v):
        if v not in PROPERTY_TYPES:
            raise ValueError(f"Unknown property type '{v}'")
        return v

    @model_validator(mode="after")
    def validate_options(self):
        if self.is_relation:
            if not self.target:
                raise ValueError(f"Relation '{self.name}' needs a target")
            if self.column_name in RESERVED_NAMES:
                raise ValueError(f"Relation column '{self.column_name}' is reserved")
            if self.on_delete is not None and self.on_delete not in ON_DELETE_ACTIONS:
                raise ValueError(f"Relation '{self.name}' has unsupported on_delete '{self.on_delete}'")
            if self.required and self.on_delete_action == "SET NULL":
                raise ValueError(f"Required relation '{self.name}' cannot use on_delete SET NULL")
        elif self.target is not None or self.on_delete is not None:
            raise ValueError(f"Only relations take a target or on_delete ('{self.name}')")

        if self.length is not None and self.type != "string":
            raise ValueError(f"Only string properties take a length ('{self.name}')")
        if (self.precision is not None or self.scale is not None) and self.type != "decimal":
            raise ValueError(f"Only decimal properties take precision/scale ('{self.name}')")

        if self.default is not None:
            expected = {"boolean": bool, "integer": int, "string": str}.get(self.type)
            if expected is None:
                raise ValueError(f"Property '{self.name}' of type {self.type} cannot have a default")
            if type(self.default) is not expected:
                raise ValueError(f"Default of '{self.name}' must be a {self.type}")
        return self

    @property
    def is_relation(self) -> bool:
        return self.type == "relation"

    @property
    def column_name(self) -> str:
        return f"{self.name}_id" if self.is_relation else self.name

    @property
    def on_delete_action(self) -> str:
        return self.on_delete or "SET NULL"

    @property
    def is_searchable(self) -> bool:
        if self.searchable is not None:
            return self.searchable
        return self.type in SEARCHABLE_TYPES

    @property
    def is_sortable(self) -> bool:
        if self.sortable is not None:
            return self.sortable
        return self.type in SORTABLE_TYPES

    @property
    def is_filterable(self) -> bool:
        if self.filterable is not None:
            return self.filterable
        return self.type not in UNFILTERABLE_TYPES

    def sa_type(self) -> str:
        """SQLAlchemy type expression for the column"""
        if self.type == "string":
            return f"sa.String({self.length or 255})"
        if self.type == "decimal":
            precision = 15 if self.precision is None else self.precision
            scale = 2 if self.scale is None else self.scale
            return f"sa.Numeric({precision}, {scale})"
        if self.type == "datetime":
            return "sa.DateTime(timezone=True)"
        return {
            "text": "sa.Text",
            "integer": "sa.Integer",
            "boolean": "sa.Boolean",
            "date": "sa.Date",
            "time": "sa.Time",
            "json": "sa.JSON",
            "uuid": "sa.Uuid",
            "relation": "sa.Uuid",
        }[self.type]

    def default_literal(self) -> str:
        if isinstance(self.default, bool):
            return "True" if self.default else "False"
        if isinstance(self.default, int):
            return str(self.default)
        return json.dumps(self.default)

    def column_expression(self) -> str:
        """``mapped_column(...)`` source for this property"""
        args = [self.sa_type()]
        if self.is_relation:
            args.append(f'sa.ForeignKey("{self._target_table}.id", ondelete="{self.on_delete_action}")')
        if self.required:
            args.append("nullable=False")
        if self.unique:
            args.append("unique=True")
        if self.index or self.is_relation:
            args.append("index=True")
        if self.default is not None:
            args.append(f"default={self.default_literal()}")
        return f"mapped_column({', '.join(args)})"


class EntityDefinition(BaseModel):
    """One catalog entity"""
    model_config = ConfigDict(extra="forbid")

    name: str
    description: str
    label: Optional[str] = None
    plural: Optional[str] = None
    table: Optional[str] = None
    organization: bool = True
    soft_delete: bool = False
    properties: List[PropertyDefinition] = []

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not _PASCAL_CASE.match(v):
            raise ValueError(f"Entity name '{v}' must be PascalCase")
        return v

    @field_validator("description", "label", "plural")
    @classmethod
    def validate_text(cls, v, info):
        # Rendered into string literals and docstrings of the generated modules
        if v is not None and _UNSAFE_TEXT.search(v):
            raise ValueError(f"{info.field_name} must not contain quotes, backslashes or line breaks")
        return v

    @field_validator("table")
    @classmethod
    def validate_table(cls, v):
        if v is not None and not _SNAKE_CASE.match(v):
            raise ValueError(f"Table name '{v}' must be snake_case")
        return v

    @model_validator(mode="after")
    def validate_properties(self):
        seen = set()
        for prop in self.properties:
            for column in {prop.name, prop.column_name}:
                if column in seen:
                    raise ValueError(f"{self.name} declares '{column}' more than once")
                seen.add(column)
        return self

    @property
    def module_name(self) -> str:
        return snake_case(self.name)

    @property
    def table_name(self) -> str:
        return self.table or snake_case(self.name)

    @property
    def generated_class_name(self) -> str:
        return f"{self.name}Generated"

    @property
    def display_label(self) -> str:
        return self.label or " ".join(split_words(self.name))

    @property
    def plural_label(self) -> str:
        return self.plural or pluralize(self.display_label)

    @property
    def slug(self) -> str:
        return kebab_case(self.name)

    @property
    def relations(self) -> List[PropertyDefinition]:
        return [prop for prop in self.properties if prop.is_relation]

    @property
    def searchable_fields(self) -> List[str]:
        return [prop.column_name for prop in self.properties if prop.is_searchable]

    @property
    def sortable_fields(self) -> List[str]:
        return [prop.column_name for prop in self.properties if prop.is_sortable] + list(AUDIT_FIELDS)

    @property
    def filterable_fields(self) -> List[str]:
        return [prop.column_name for prop in self.properties if prop.is_filterable] + list(AUDIT_FIELDS)

    @property
    def field_groups(self) -> List[Tuple[str, List[str]]]:
        return [
            ("__searchable_fields__", self.searchable_fields),
            ("__sortable_fields__", self.sortable_fields),
            ("__filterable_fields__", self.filterable_fields),
        ]

    @property
    def mixin_imports(self) -> List[str]:
        names = ["AuditMixin"]
        if self.organization:
            names.append("OrganizationMixin")
        if self.soft_delete:
            names.append("SoftDeleteMixin")
        return names

    @property
    def bases(self) -> List[str]:
        names = []
        if self.organization:
            names.append("OrganizationMixin")
        if self.soft_delete:
            names.append("SoftDeleteMixin")
        return names + ["AuditMixin", "Base"]


class Catalog(BaseModel):
    """The full entity catalog"""
    model_config = ConfigDict(extra="forbid")

    entities: List[EntityDefinition]

    @model_validator(mode="after")
    def validate_catalog(self):
        tables: Dict[str, str] = {}
        names = set()
        for entity in self.entities:
            if entity.name in names:
                raise ValueError(f"Duplicate entity '{entity.name}'")
            names.add(entity.name)
            if entity.table_name in tables.values():
                raise ValueError(f"Duplicate table '{entity.table_name}' ({entity.name})")
            tables[entity.name] = entity.table_name

        for entity in self.entities:
            for prop in entity.relations:
                if prop.target not in tables:
                    raise ValueError(f"{entity.name}.{prop.name} targets unknown entity '{prop.target}'")
                prop._target_table = tables[prop.target]
        return self

    @property
    def names(self) -> List[str]:
        return [entity.name for entity in self.entities]

    def get(self, name: str) -> Optional[EntityDefinition]:
        for entity in self.entities:
            if entity.name == name:
                return entity
        return None
