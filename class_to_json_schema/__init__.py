"""Class to JSON Schema Generator

A Python package for generating JSON Schema documents from annotated
classes. Accessor methods are paired with their backing fields, metadata
declared with ``Attributes`` becomes schema constraints, and recursive
class references are emitted as local ``$ref`` pointers.
"""

__version__ = "0.1.0"
__author__ = "François Lagunas"

from .attributes import Attributes, SchemaIgnore, attributes, schema_ignore
from .config import SchemaGeneratorConfig
from .errors import SchemaGenerationError
from .generator import SchemaGenerator
from .references import ExpansionContext, ManagedReference
from .schema import ObjectSchema

__all__ = [
    "Attributes",
    "SchemaIgnore",
    "attributes",
    "schema_ignore",
    "SchemaGeneratorConfig",
    "SchemaGenerationError",
    "SchemaGenerator",
    "ExpansionContext",
    "ManagedReference",
    "ObjectSchema",
]
