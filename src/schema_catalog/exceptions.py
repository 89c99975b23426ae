"""
Custom exceptions for Schema Catalog.
"""

class SchemaCatalogError(Exception):
    """Base class for all schema catalog errors."""
    pass

class ConfigurationError(SchemaCatalogError):
    """Raised when a configuration file cannot be read or does not validate."""
    pass

class TypeResolutionError(SchemaCatalogError):
    """Raised when an import path such as 'shop.models:Order' does not name a type."""
    def __init__(self, import_path: str, reason: str):
        super().__init__(f"Cannot resolve type '{import_path}': {reason}")
        self.import_path = import_path
        self.reason = reason
