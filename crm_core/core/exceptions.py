"""
CRM Core Exceptions
"""

from typing import Any, Optional


class CRMError(Exception):
    """Base class for all CRM core errors"""


class UnknownEntityError(CRMError, LookupError):
    """Entity name or slug is not part of the catalog"""

    def __init__(self, name: str):
        super().__init__(f"Unknown entity: {name}")
        self.name = name


class EntityNotFoundError(CRMError, LookupError):
    """No row with the given id exists in the current scope"""

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(CRMError, ValueError):
    """Payload or operation rejected for an entity"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class TenantRequiredError(ValidationError):
    """A tenant-scoped entity was used without an organization"""

    def __init__(self, entity: str):
        super().__init__(f"{entity} is scoped to an organization; none was provided", field="organization_id")
        self.entity = entity


class DefinitionError(CRMError, ValueError):
    """Invalid entity catalog"""


class GenerationError(CRMError, RuntimeError):
    """Rendering or writing generated code failed"""

    def __init__(self, entity: str, message: str):
        super().__init__(f"Failed to generate {entity}: {message}")
        self.entity = entity
