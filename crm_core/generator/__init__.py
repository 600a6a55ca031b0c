"""
CRM Entity Generator
"""

from .definitions import Catalog, EntityDefinition, PropertyDefinition
from .loader import load_catalog
from .orchestrator import GenerationReport, GeneratorOrchestrator
from .writer import SmartFileWriter, WriteStatus

__all__ = [
    "Catalog",
    "EntityDefinition",
    "PropertyDefinition",
    "load_catalog",
    "GenerationReport",
    "GeneratorOrchestrator",
    "SmartFileWriter",
    "WriteStatus",
]
