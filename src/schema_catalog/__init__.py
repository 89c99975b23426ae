"""Schema Catalog - compiles schema definitions from statically declared Python types.

Walks the types reachable from a set of root types and describes each one exactly
once: fields, required-ness, nesting, enumerations and collections.
"""

__version__ = "0.1.0"
__author__ = "Tyler Zervas"
__email__ = "tz-dev@vectorweight.com"

from .annotations import DataMember, Description, ExternalDocs, Hidden, Tag, catalog_type
from .config import Config
from .schema_gen import DefinitionsBuilder, build_catalog

__all__ = [
    "Config",
    "DataMember",
    "DefinitionsBuilder",
    "Description",
    "ExternalDocs",
    "Hidden",
    "Tag",
    "build_catalog",
    "catalog_type",
]
