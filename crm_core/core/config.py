"""
CRM Core Configuration
"""

from pathlib import Path
from typing import Optional
from uuid import UUID

from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "CRM Core API"
    version: str = "0.3.0"
    debug: bool = False
    environment: str = "production"

    # API Configuration
    api_v1_prefix: str = "/api/v1"

    # Database
    database_url: str = "sqlite+aiosqlite:///./crm.db"

    # Multi-tenancy
    default_organization_id: Optional[UUID] = None

    # Search & pagination
    default_page_size: int = 25
    max_page_size: int = 100
    search_unaccent: bool = True  # PostgreSQL: needs the unaccent extension

    # Generator
    catalog_path: Path = PACKAGE_DIR / "catalog" / "entities.yaml"
    models_dir: Path = PACKAGE_DIR / "models"

    # Monitoring
    prometheus_enabled: bool = True
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
