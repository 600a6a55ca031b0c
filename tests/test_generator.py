"""
Test catalog loading and code generation
"""

from pathlib import Path

import pytest
import yaml

from crm_core.core.config import settings
from crm_core.core.exceptions import DefinitionError
from crm_core.generator import GeneratorOrchestrator, SmartFileWriter, WriteStatus, load_catalog
from crm_core.generator.definitions import pluralize, snake_case
from crm_core.generator.entity_generator import EntityGenerator
from crm_core.generator.loader import parse_catalog

MODELS_DIR = Path(settings.models_dir)


def catalog_of(*entities):
    return parse_catalog({"entities": list(entities)})


@pytest.fixture(scope="module")
def catalog():
    return load_catalog()


@pytest.fixture
def small_catalog():
    return catalog_of(
        {
            "name": "LeadSource",
            "description": "Where a lead came from",
            "properties": [
                {"name": "name", "type": "string", "required": True, "index": True},
                {"name": "active", "type": "boolean", "required": True, "default": True},
            ],
        },
        {
            "name": "Opportunity",
            "plural": "Opportunities",
            "description": "Potential sale",
            "soft_delete": True,
            "properties": [
                {"name": "title", "type": "string", "length": 120, "required": True},
                {"name": "amount", "type": "decimal", "precision": 12, "scale": 2},
                {"name": "lead_source", "type": "relation", "target": "LeadSource", "required": True, "on_delete": "CASCADE"},
                {"name": "notes", "type": "text"},
            ],
        },
    )


class TestNaming:
    """Test derived names"""

    @pytest.mark.parametrize(
        "label, expected",
        [("Deal", "Deals"), ("Deal Category", "Deal Categories"), ("Holiday", "Holidays"),
         ("Product Batch", "Product Batches"), ("Tax", "Taxes"), ("Flag", "Flags")],
    )
    def test_pluralize(self, label, expected):
        assert pluralize(label) == expected

    def test_snake_case(self):
        assert snake_case("EventResourceBooking") == "event_resource_booking"

    def test_entity_derivations(self, catalog):
        entity = catalog.get("PipelineStageTemplate")

        assert entity.module_name == "pipeline_stage_template"
        assert entity.table_name == "pipeline_stage_template"
        assert entity.generated_class_name == "PipelineStageTemplateGenerated"
        assert entity.display_label == "Pipeline Stage Template"
        assert entity.slug == "pipeline-stage-template"

    def test_field_sets(self, small_catalog):
        opportunity = small_catalog.get("Opportunity")

        assert opportunity.searchable_fields == ["title"]
        assert opportunity.sortable_fields == ["title", "amount", "created_at", "updated_at"]
        assert opportunity.filterable_fields == ["title", "amount", "lead_source_id", "created_at", "updated_at"]
        assert opportunity.bases == ["OrganizationMixin", "SoftDeleteMixin", "AuditMixin", "Base"]

    def test_column_expression(self, small_catalog):
        relation = small_catalog.get("Opportunity").relations[0]

        assert relation.column_expression() == (
            'mapped_column(sa.Uuid, sa.ForeignKey("lead_source.id", ondelete="CASCADE"), nullable=False, index=True)'
        )


class TestCatalogValidation:
    """Test catalog validation errors"""

    def test_real_catalog_loads(self, catalog):
        assert len(catalog.entities) == 52

    def test_missing_file(self, tmp_path):
        with pytest.raises(DefinitionError):
            load_catalog(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("entities: [unclosed\n")

        with pytest.raises(DefinitionError):
            load_catalog(path)

    def test_entities_list_required(self):
        with pytest.raises(DefinitionError):
            parse_catalog({"models": []})

    @pytest.mark.parametrize(
        "entity",
        [
            {"name": "deal", "description": "lower case name"},
            {"name": "Deal", "description": "bad type", "properties": [{"name": "x", "type": "money"}]},
            {"name": "Deal", "description": "reserved", "properties": [{"name": "created_at", "type": "datetime"}]},
            {"name": "Deal", "description": "camel", "properties": [{"name": "closeDate", "type": "date"}]},
            {"name": "Deal", "description": "no target", "properties": [{"name": "owner", "type": "relation"}]},
            {"name": "Deal", "description": "json default", "properties": [{"name": "x", "type": "json", "default": "{}"}]},
            {"name": "Deal", "description": 'The "big" one'},
            {"name": "Deal", "description": "Deal", "label": "Deal\\Contract"},
            {"name": "Deal", "description": "Deal", "plural": "Deals\nand more"},
            {"name": "Deal", "description": "wrong default", "properties": [{"name": "x", "type": "integer", "default": "ten"}]},
            {"name": "Deal", "description": "unknown option", "properties": [{"name": "x", "type": "string", "colour": "red"}]},
            {
                "name": "Deal",
                "description": "duplicate",
                "properties": [{"name": "x", "type": "string"}, {"name": "x", "type": "integer"}],
            },
        ],
    )
    def test_invalid_entity(self, entity):
        with pytest.raises(DefinitionError):
            catalog_of(entity)

    def test_unknown_relation_target(self):
        with pytest.raises(DefinitionError):
            catalog_of({
                "name": "Deal",
                "description": "Deal",
                "properties": [{"name": "stage", "type": "relation", "target": "Stage"}],
            })

    def test_required_relation_cannot_set_null(self):
        with pytest.raises(DefinitionError):
            catalog_of(
                {"name": "Stage", "description": "Stage"},
                {
                    "name": "Deal",
                    "description": "Deal",
                    "properties": [{"name": "stage", "type": "relation", "target": "Stage", "required": True}],
                },
            )

    def test_duplicate_entities(self):
        with pytest.raises(DefinitionError):
            catalog_of({"name": "Deal", "description": "a"}, {"name": "Deal", "description": "b"})

    def test_duplicate_tables(self):
        with pytest.raises(DefinitionError):
            catalog_of(
                {"name": "Deal", "description": "a"},
                {"name": "Opportunity", "description": "b", "table": "deal"},
            )


class TestSmartFileWriter:
    """Test content-aware writes"""

    def test_statuses(self, tmp_path):
        writer = SmartFileWriter()
        path = tmp_path / "pkg" / "module.py"

        assert writer.write(path, "a = 1\n") == WriteStatus.CREATED
        assert writer.write(path, "a = 1\n") == WriteStatus.SKIPPED
        assert writer.write(path, "a = 2\n") == WriteStatus.WRITTEN
        assert path.read_text() == "a = 2\n"
        assert [p.name for p in path.parent.iterdir()] == ["module.py"]

    def test_dry_run(self, tmp_path):
        path = tmp_path / "module.py"

        assert SmartFileWriter(dry_run=True).write(path, "a = 1\n") == WriteStatus.CREATED
        assert not path.exists()

    def test_statistics(self):
        stats = SmartFileWriter.statistics([WriteStatus.CREATED, WriteStatus.SKIPPED, WriteStatus.SKIPPED])
        assert stats == {"created": 1, "written": 0, "skipped": 2}


class TestGeneration:
    """Test rendering and the generation contract"""

    def test_committed_models_match_catalog(self, catalog):
        generator = EntityGenerator(MODELS_DIR, SmartFileWriter(dry_run=True))

        for entity in catalog.entities:
            assert generator.base_path(entity).read_text() == generator.render_base(entity), entity.name
            assert generator.extension_path(entity).read_text() == generator.render_extension(entity), entity.name
        assert generator.index_path().read_text() == generator.render_index(catalog)

    def test_generate_into_empty_package(self, tmp_path, small_catalog):
        report = GeneratorOrchestrator(models_dir=tmp_path).generate(small_catalog)

        assert report.statistics == {"created": 6, "written": 0, "skipped": 0}
        assert (tmp_path / "generated" / "opportunity_generated.py").exists()
        assert (tmp_path / "generated" / "__init__.py").exists()

        source = (tmp_path / "generated" / "opportunity_generated.py").read_text()
        assert "class OpportunityGenerated(OrganizationMixin, SoftDeleteMixin, AuditMixin, Base):" in source
        assert 'title = mapped_column(sa.String(120), nullable=False)' in source
        assert 'return relationship("LeadSource")' in source
        assert '__plural_label__ = "Opportunities"' in source

        index = (tmp_path / "__init__.py").read_text()
        assert "from .opportunity import Opportunity" in index
        assert '"LeadSource": LeadSource,' in index

    def test_second_run_is_idempotent(self, tmp_path, small_catalog):
        orchestrator = GeneratorOrchestrator(models_dir=tmp_path)
        orchestrator.generate(small_catalog)

        report = orchestrator.generate(small_catalog)

        assert report.statistics == {"created": 0, "written": 0, "skipped": 6}

    def test_extension_is_never_overwritten(self, tmp_path, small_catalog):
        orchestrator = GeneratorOrchestrator(models_dir=tmp_path)
        orchestrator.generate(small_catalog)

        extension = tmp_path / "opportunity.py"
        customised = extension.read_text() + "\n    def weighted_amount(self):\n        return self.amount\n"
        extension.write_text(customised)

        base = tmp_path / "generated" / "opportunity_generated.py"
        base.write_text("# stale\n")

        report = orchestrator.generate(small_catalog)

        assert extension.read_text() == customised
        assert report.status_of(extension) == WriteStatus.SKIPPED
        assert report.status_of(base) == WriteStatus.WRITTEN
        assert "# stale" not in base.read_text()

    def test_only_selected_entities(self, tmp_path, small_catalog):
        report = GeneratorOrchestrator(models_dir=tmp_path).generate(small_catalog, only=["LeadSource"])

        assert report.entities == ["LeadSource"]
        assert (tmp_path / "lead_source.py").exists()
        assert not (tmp_path / "opportunity.py").exists()
        # The index always lists the whole catalog
        assert "from .opportunity import Opportunity" in (tmp_path / "__init__.py").read_text()

    def test_unknown_selected_entity(self, tmp_path, small_catalog):
        with pytest.raises(DefinitionError):
            GeneratorOrchestrator(models_dir=tmp_path).generate(small_catalog, only=["Invoice"])

    def test_dry_run_writes_nothing(self, tmp_path, small_catalog):
        report = GeneratorOrchestrator(models_dir=tmp_path).generate(small_catalog, dry_run=True)

        assert report.dry_run
        assert report.statistics["created"] == 6
        assert list(tmp_path.iterdir()) == []

    def test_catalog_round_trips_through_yaml(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump({"entities": [{"name": "Tag", "description": "Label"}]}))

        catalog = load_catalog(path)

        assert catalog.names == ["Tag"]
        assert catalog.get("Tag").plural_label == "Tags"
