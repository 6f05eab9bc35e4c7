"""
Configuration for the schema generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SchemaGeneratorConfig:
    """Configuration options for schema generation."""

    # Property names to omit from every generated object
    global_ignore_fields: list[str] = field(default_factory=list)

    # Keep accessors that have no backing field
    include_fieldless_accessors: bool = True

    # Insert "$schema" at the top of the root document
    add_schema_version: bool = False

    # Indentation used for JSON output
    indent: int = 2

    # Add generation comment at top of Markdown output
    add_generation_comment: bool = True

    @staticmethod
    def from_dict(d: dict) -> SchemaGeneratorConfig:
        """Create a config from a dictionary."""
        config = SchemaGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "global_ignore_fields": self.global_ignore_fields,
            "include_fieldless_accessors": self.include_fieldless_accessors,
            "add_schema_version": self.add_schema_version,
            "indent": self.indent,
            "add_generation_comment": self.add_generation_comment,
        }
