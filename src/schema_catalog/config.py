"""Configuration management for Schema Catalog."""

import json
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class TagSetting(BaseModel):
    """Visibility switch for one category tag."""

    name: str = Field(..., min_length=1, description="Tag name as used in Tag markers.")
    visible: bool = Field(default=True, description="When false, types and members carrying the tag are left out of the catalog.")

class CatalogConfig(BaseModel):
    """Configuration for catalog builds."""

    tags: List[TagSetting] = Field(default_factory=list, description="Tag visibility settings.")
    hidden_tags: List[str] = Field(default_factory=list, description="Additional hidden tag names or fully-qualified type names.")
    root_types: List[str] = Field(default_factory=list, description="Import paths of the root types, e.g. 'shop.models:Order'. Used when the CLI receives none.")

class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format ('json' or 'console')")
    file: Optional[Path] = Field(default=None, description="Log file path")


class Config(BaseSettings):
    """Main configuration for Schema Catalog. Loads from environment variables prefixed with SCHEMA_CATALOG_."""

    model_config = SettingsConfigDict(
        env_prefix='SCHEMA_CATALOG_',
        env_nested_delimiter='__', # e.g., SCHEMA_CATALOG_LOGGING__LEVEL
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    app_name: str = Field(default="schema-catalog", description="Name reported in logs.")
    app_version: str = Field(default="0.1.0", description="Version of the Schema Catalog software.")

    def hidden_tags(self) -> set[str]:
        """Tags switched off in `catalog.tags` plus everything listed in `catalog.hidden_tags`."""
        hidden = {tag.name for tag in self.catalog.tags if not tag.visible}
        hidden.update(self.catalog.hidden_tags)
        return hidden

    @classmethod
    def from_file(cls, file_path: Path) -> "Config":
        """Create configuration strictly from a JSON file (environment variables are not layered in)."""
        try:
            with open(file_path, encoding="utf-8") as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e
        try:
            return cls.model_validate(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {file_path}: {e}") from e
