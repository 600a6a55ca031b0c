"""
Test the entity classes against the catalog
"""

import ast
import importlib
import inspect

import pytest

from crm_core import models
from crm_core.core.database import Base
from crm_core.generator import load_catalog
from crm_core.models.mixins import AuditMixin, OrganizationMixin, SoftDeleteMixin

ENTITY_NAMES = [
    "Agent", "AgentType", "BillingFrequency", "Brand", "Calendar",
    "CalendarExternalLink", "CalendarType", "Campaign", "City", "Company",
    "Competitor", "Contact", "Country", "Deal", "DealCategory", "DealStage",
    "DealType", "Event", "EventAttendee", "EventCategory", "EventResource",
    "EventResourceBooking", "EventResourceType", "Flag", "Holiday",
    "HolidayTemplate", "LeadSource", "LostReason", "MeetingData",
    "Notification", "NotificationType", "NotificationTypeTemplate", "Pipeline",
    "PipelineStage", "PipelineStageTemplate", "PipelineTemplate", "Product",
    "ProductBatch", "ProductLine", "ProfileTemplate", "Reminder", "SocialMedia",
    "StepAction", "StepIteration", "Tag", "Talk", "TalkMessage", "Task",
    "TaskTemplate", "TimeZone", "WinReason", "WorkingHour",
]


@pytest.fixture(scope="module")
def catalog():
    return load_catalog()


def test_every_entity_is_exported():
    assert list(models.ENTITY_CLASSES) == ENTITY_NAMES
    for name in ENTITY_NAMES:
        assert getattr(models, name) is models.ENTITY_CLASSES[name]


def test_catalog_matches_exported_entities(catalog):
    assert catalog.names == ENTITY_NAMES


@pytest.mark.parametrize("name", ENTITY_NAMES)
def test_entity_extends_generated_base(name):
    cls = models.ENTITY_CLASSES[name]
    module = importlib.import_module(cls.__module__)
    generated = getattr(module, f"{name}Generated")

    assert cls.__name__ == name
    assert cls.__bases__ == (generated,)
    assert generated.__dict__.get("__abstract__") is True
    assert issubclass(cls, Base)
    assert issubclass(cls, AuditMixin)


@pytest.mark.parametrize("name", ENTITY_NAMES)
def test_entity_body_only_declares_table_name(name):
    cls = models.ENTITY_CLASSES[name]
    tree = ast.parse(inspect.getsource(importlib.import_module(cls.__module__)))
    class_def = next(node for node in tree.body if isinstance(node, ast.ClassDef) and node.name == name)

    docstring, *statements = class_def.body
    assert isinstance(docstring, ast.Expr) and isinstance(docstring.value, ast.Constant)
    assert len(statements) == 1
    assignment = statements[0]
    assert isinstance(assignment, ast.Assign)
    assert [target.id for target in assignment.targets] == ["__tablename__"]


def test_table_names_match_catalog(catalog):
    for entity in catalog.entities:
        assert models.ENTITY_CLASSES[entity.name].__tablename__ == entity.table_name


def test_table_to_class_mapping_is_one_to_one():
    by_table = {cls.__tablename__: name for name, cls in models.ENTITY_CLASSES.items()}
    assert len(by_table) == len(ENTITY_NAMES)
    for table, name in by_table.items():
        assert table in Base.metadata.tables
        assert models.ENTITY_CLASSES[name].__table__ is Base.metadata.tables[table]


def test_mixins_follow_catalog_flags(catalog):
    for entity in catalog.entities:
        cls = models.ENTITY_CLASSES[entity.name]
        assert issubclass(cls, OrganizationMixin) == entity.organization
        assert issubclass(cls, SoftDeleteMixin) == entity.soft_delete


def test_relation_columns_reference_target_tables(catalog):
    for entity in catalog.entities:
        table = models.ENTITY_CLASSES[entity.name].__table__
        for prop in entity.relations:
            column = table.c[prop.column_name]
            target_table = models.ENTITY_CLASSES[prop.target].__tablename__
            assert {fk.column.table.name for fk in column.foreign_keys} == {target_table}


def test_field_metadata_names_real_columns():
    for cls in models.ENTITY_CLASSES.values():
        columns = set(cls.__table__.c.keys())
        for attribute in ("__searchable_fields__", "__sortable_fields__", "__filterable_fields__"):
            assert set(getattr(cls, attribute)) <= columns, (cls.__name__, attribute)
