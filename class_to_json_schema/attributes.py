"""
Schema metadata attached to classes, accessors and fields.

Classes and accessor methods are decorated with ``@attributes(...)``; fields
carry an ``Attributes`` instance inside ``typing.Annotated``. Every value has
an "absent" default so that only explicitly declared constraints reach the
generated schema.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

ATTRIBUTES_MARKER = "__schema_attributes__"
IGNORE_MARKER = "__schema_ignore__"


@dataclass(frozen=True)
class Attributes:
    """Constraint values declared on a class, accessor or field."""

    id: str = ""
    title: str = ""
    description: str = ""
    pattern: str = ""
    maximum: int | float = -1
    exclusive_maximum: bool = False
    minimum: int | float = -1
    exclusive_minimum: bool = False
    enums: tuple[str, ...] = ()
    unique_items: bool = False
    min_items: int = 0
    max_items: int = -1
    multiple_of: int | float = 0
    min_length: int = 0
    max_length: int = -1
    required: bool = False
    readonly: bool = False
    nullable: bool = False


class SchemaIgnore:
    """Marker placed in ``Annotated`` metadata to leave a field out of the schema."""

    pass


def attributes(**kwargs: Any):
    """Decorate a class or accessor method with schema attributes."""
    if "enums" in kwargs:
        kwargs["enums"] = tuple(kwargs["enums"])
    declared = Attributes(**kwargs)

    def decorator(target):
        setattr(target, ATTRIBUTES_MARKER, declared)
        return target

    return decorator


def schema_ignore(target):
    """Leave the decorated accessor out of the schema."""
    setattr(target, IGNORE_MARKER, True)
    return target


def read_attributes(target: Any) -> Attributes | None:
    """Return the attributes declared directly on a class or function."""
    if isinstance(target, type):
        # Only the class's own declaration counts, not an inherited one
        return target.__dict__.get(ATTRIBUTES_MARKER)
    return getattr(target, ATTRIBUTES_MARKER, None)


def is_ignored(target: Any) -> bool:
    return bool(getattr(target, IGNORE_MARKER, False))


def apply_attributes(node: dict, attrs: Attributes | None) -> None:
    """Copy every present constraint of ``attrs`` into ``node``.

    ``required`` is not written: it belongs to the owner of the node.
    ``nullable`` widens the node type and is handled by ``make_nullable``.
    """
    if attrs is None:
        return
    if attrs.id:
        node["id"] = attrs.id
    if attrs.description:
        node["description"] = attrs.description
    if attrs.pattern:
        node["pattern"] = attrs.pattern
    if attrs.title:
        node["title"] = attrs.title
    if attrs.maximum > -1:
        node["maximum"] = attrs.maximum
    if attrs.exclusive_maximum:
        node["exclusiveMaximum"] = True
    if attrs.minimum > -1:
        node["minimum"] = attrs.minimum
    if attrs.exclusive_minimum:
        node["exclusiveMinimum"] = True
    if attrs.enums:
        node["enum"] = list(attrs.enums)
    if attrs.unique_items:
        node["uniqueItems"] = True
    if attrs.min_items > 0:
        node["minItems"] = attrs.min_items
    if attrs.max_items > -1:
        node["maxItems"] = attrs.max_items
    if attrs.multiple_of > 0:
        node["multipleOf"] = attrs.multiple_of
    # Length keywords take their values from the item bounds
    if attrs.min_length > 0:
        node["minLength"] = attrs.min_items
    if attrs.max_length > -1:
        node["maxLength"] = attrs.max_items
    if attrs.readonly:
        node["readonly"] = True


def make_nullable(node: dict) -> dict:
    """Return ``node`` widened so that ``null`` is also accepted.

    A single ``type`` becomes a ``[type, "null"]`` list. Fragments that
    constrain values by other means (``enum``, ``$ref``, ``anyOf``) are
    wrapped in an ``anyOf`` with a null branch. An empty fragment already
    accepts null and is returned unchanged.
    """
    if not node:
        return node
    node_type = node.get("type")
    if node_type == "null":
        return node
    if "enum" not in node and "$ref" not in node and "anyOf" not in node:
        if isinstance(node_type, str):
            node["type"] = [node_type, "null"]
            return node
        if isinstance(node_type, list):
            if "null" not in node_type:
                node_type.append("null")
            return node
    if "anyOf" in node and len(node) == 1:
        if {"type": "null"} not in node["anyOf"]:
            node["anyOf"].append({"type": "null"})
        return node
    return {"anyOf": [node, {"type": "null"}]}
