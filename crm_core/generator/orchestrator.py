"""
CRM Generator Orchestrator
Coordinates generation of the whole entity layer from the catalog
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional

import structlog
from jinja2 import TemplateError
from pydantic import BaseModel

from ..core.config import settings
from ..core.exceptions import DefinitionError, GenerationError
from .definitions import Catalog
from .entity_generator import EntityGenerator
from .writer import SmartFileWriter, WriteStatus

logger = structlog.get_logger()


class GeneratedFile(BaseModel):
    path: str
    status: WriteStatus
    entity: Optional[str] = None


class GenerationReport(BaseModel):
    """Outcome of one generator run"""
    files: List[GeneratedFile] = []
    entities: List[str] = []
    dry_run: bool = False

    @property
    def statistics(self) -> Dict[str, int]:
        return SmartFileWriter.statistics(f.status for f in self.files)

    def status_of(self, path) -> Optional[WriteStatus]:
        for f in self.files:
            if f.path == str(path):
                return f.status
        return None


class GeneratorOrchestrator:
    """Runs the entity generator over a catalog"""

    def __init__(self, models_dir: Optional[Path] = None):
        self.models_dir = Path(models_dir or settings.models_dir)

    def generate(
        self,
        catalog: Catalog,
        only: Optional[Iterable[str]] = None,
        dry_run: bool = False,
    ) -> GenerationReport:
        """Generate model files for the catalog, or only the named entities"""
        if only:
            only = list(only)
            unknown = [name for name in only if catalog.get(name) is None]
            if unknown:
                raise DefinitionError(f"Unknown entities: {', '.join(unknown)}")
            entities = [entity for entity in catalog.entities if entity.name in only]
        else:
            entities = list(catalog.entities)

        generator = EntityGenerator(self.models_dir, SmartFileWriter(dry_run=dry_run))
        report = GenerationReport(entities=[entity.name for entity in entities], dry_run=dry_run)

        logger.info("Generation started", entities=len(entities), models_dir=str(self.models_dir), dry_run=dry_run)

        for entity in entities:
            try:
                results = generator.generate(entity)
            except (OSError, TemplateError) as e:
                logger.error("Generation failed", entity=entity.name, error=str(e))
                raise GenerationError(entity.name, str(e)) from e

            for path, status in results:
                report.files.append(GeneratedFile(path=str(path), status=status, entity=entity.name))

        try:
            results = generator.generate_package_files(catalog)
        except (OSError, TemplateError) as e:
            logger.error("Generation failed", entity="models index", error=str(e))
            raise GenerationError("models index", str(e)) from e

        for path, status in results:
            report.files.append(GeneratedFile(path=str(path), status=status))

        logger.info("Generation completed", **report.statistics)
        return report
