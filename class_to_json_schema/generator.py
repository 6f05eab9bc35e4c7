"""
Schema generator facade.

Builds the schema document of a class with a fresh expansion context and
serializes it as JSON or renders it as a Markdown reference page.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jinja2

from . import __version__
from .cli_utils import reconstruct_command_line
from .config import SchemaGeneratorConfig
from .references import ExpansionContext
from .schema import ObjectSchema

CURRENT_DIR = Path(__file__).parent.resolve().absolute()

SCHEMA_VERSION = "http://json-schema.org/draft-04/schema#"


def type_label(fragment: dict) -> str:
    """Short human readable description of a property fragment."""
    if "$ref" in fragment:
        return f"ref {fragment['$ref']}"
    if "anyOf" in fragment:
        return " or ".join(type_label(member) for member in fragment["anyOf"])

    label = fragment.get("type", "any")
    if isinstance(label, list):
        return " or ".join("null" if member == "null" else type_label({**fragment, "type": member}) for member in label)
    if label == "array":
        items = fragment.get("items")
        if isinstance(items, dict):
            label = f"array of {type_label(items)}"
        elif isinstance(items, list):
            label = f"array of ({', '.join(type_label(item) for item in items)})"
    if "format" in fragment:
        label = f"{label} ({fragment['format']})"
    if "enum" in fragment:
        label = f"{label}: {', '.join(str(value) for value in fragment['enum'])}"
    return label


def property_rows(node: dict, prefix: str = "") -> list[dict[str, Any]]:
    """Flatten the properties of ``node`` into table rows, nested objects included."""
    rows = []
    required = node.get("required", [])
    for name, fragment in node.get("properties", {}).items():
        path = f"{prefix}{name}"
        rows.append(
            {
                "path": path,
                "type": type_label(fragment),
                "required": name in required,
                "readonly": bool(fragment.get("readonly")),
                "description": fragment.get("description", ""),
            }
        )
        if "properties" in fragment:
            rows.extend(property_rows(fragment, f"{path}."))
        items = fragment.get("items")
        if isinstance(items, dict) and "properties" in items:
            rows.extend(property_rows(items, f"{path}[]."))
    return rows


class SchemaGenerator:
    """Generate JSON Schema documents from classes."""

    def __init__(self, config: SchemaGeneratorConfig | None = None):
        self.config = config or SchemaGeneratorConfig()
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True)
        with open(CURRENT_DIR / "templates/markdown/schema.md.jinja2") as f:
            self.markdown_template = self.jinja_env.from_string(f.read())

    def build(self, type_: type) -> ObjectSchema:
        """Assemble the schema of ``type_`` with a fresh expansion context."""
        return ObjectSchema(type_, ExpansionContext(self.config))

    def generate(self, type_: type) -> dict:
        """Return the schema document of ``type_``."""
        node = self.build(type_).node
        if self.config.add_schema_version:
            return {"$schema": SCHEMA_VERSION, **node}
        return node

    def to_json(self, type_: type) -> str:
        return json.dumps(self.generate(type_), indent=self.config.indent) + "\n"

    def to_markdown(self, type_: type) -> str:
        node = self.generate(type_)
        return self.markdown_template.render(
            name=type_.__name__,
            node=node,
            rows=property_rows(node),
            generation_comment=self._generate_command_comment(),
        )

    def _generate_command_comment(self) -> str:
        """Generate a command line comment for the rendered page"""
        if not self.config.add_generation_comment:
            return ""

        try:
            from .class_to_json_schema import class_to_json_schema as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "class_to_json_schema"

        return f"<!-- Generated by class_to_json_schema v{__version__} : {command_line} -->"
