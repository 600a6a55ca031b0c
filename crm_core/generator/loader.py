"""
CRM Catalog Loader
"""

from pathlib import Path
from typing import Optional, Union

import pydantic
import structlog
import yaml

from ..core.config import settings
from ..core.exceptions import DefinitionError
from .definitions import Catalog

logger = structlog.get_logger()


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """Read and validate the entity catalog YAML file"""
    path = Path(path or settings.catalog_path)

    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError:
        raise DefinitionError(f"Catalog not found: {path}") from None
    except yaml.YAMLError as e:
        raise DefinitionError(f"Invalid YAML in {path}: {e}") from e

    return parse_catalog(raw, source=str(path))


def parse_catalog(raw, source: str = "<catalog>") -> Catalog:
    if not isinstance(raw, dict) or not isinstance(raw.get("entities"), list):
        raise DefinitionError(f"{source}: expected a mapping with an 'entities' list")

    try:
        catalog = Catalog.model_validate(raw)
    except pydantic.ValidationError as e:
        raise DefinitionError(f"{source}: {e}") from e

    logger.debug("Catalog loaded", source=source, entities=len(catalog.entities))
    return catalog
