"""
CRM Entity Generator
Renders the generated base class, the extension class and the models index
"""

from pathlib import Path
from typing import List, Optional, Tuple

import structlog
from jinja2 import Environment, FileSystemLoader

from .definitions import Catalog, EntityDefinition
from .writer import SmartFileWriter, WriteStatus

logger = structlog.get_logger()

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

GENERATED_PACKAGE_INIT = '"""\nGenerated entity base classes\n"""\n'


def create_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class EntityGenerator:
    """
    Generates the model files of one entity.

    The base class file (``generated/<module>_generated.py``) is always
    re-rendered from the catalog. The extension class file (``<module>.py``)
    is only rendered when missing, so customisations made there are never
    overwritten.
    """

    def __init__(self, models_dir: Path, writer: SmartFileWriter, env: Optional[Environment] = None):
        self.models_dir = Path(models_dir)
        self.writer = writer
        self.env = env or create_environment()

    @property
    def generated_dir(self) -> Path:
        return self.models_dir / "generated"

    def base_path(self, entity: EntityDefinition) -> Path:
        return self.generated_dir / f"{entity.module_name}_generated.py"

    def extension_path(self, entity: EntityDefinition) -> Path:
        return self.models_dir / f"{entity.module_name}.py"

    def index_path(self) -> Path:
        return self.models_dir / "__init__.py"

    def render_base(self, entity: EntityDefinition) -> str:
        return self.env.get_template("entity_generated.py.j2").render(entity=entity)

    def render_extension(self, entity: EntityDefinition) -> str:
        return self.env.get_template("entity_extension.py.j2").render(entity=entity)

    def render_index(self, catalog: Catalog) -> str:
        return self.env.get_template("models_index.py.j2").render(catalog=catalog)

    def generate(self, entity: EntityDefinition) -> List[Tuple[Path, WriteStatus]]:
        """Generate the base and extension files of an entity"""
        results = []

        base_path = self.base_path(entity)
        results.append((base_path, self.writer.write(base_path, self.render_base(entity))))

        extension_path = self.extension_path(entity)
        if extension_path.exists():
            logger.debug("Extension class exists, skipping", entity=entity.name, file=str(extension_path))
            results.append((extension_path, WriteStatus.SKIPPED))
        else:
            results.append((extension_path, self.writer.write(extension_path, self.render_extension(entity))))

        return results

    def generate_package_files(self, catalog: Catalog) -> List[Tuple[Path, WriteStatus]]:
        """Generate the models index and the generated package marker"""
        generated_init = self.generated_dir / "__init__.py"
        return [
            (generated_init, self.writer.write(generated_init, GENERATED_PACKAGE_INIT)),
            (self.index_path(), self.writer.write(self.index_path(), self.render_index(catalog))),
        ]
