"""
Rendering of a single discovered property into its schema fragment.
"""

from __future__ import annotations

import collections.abc
import datetime
import decimal
import enum
import logging
import types
import typing
from typing import Annotated, Any, Literal, Union

from .attributes import apply_attributes, make_nullable
from .discovery import PropertyDescriptor
from .references import ExpansionContext, ManagedReference

logger = logging.getLogger(__name__)

# Checked in order: bool before int, datetime before date
SIMPLE_TYPES: list[tuple[type, dict]] = [
    (bool, {"type": "boolean"}),
    (int, {"type": "integer"}),
    (float, {"type": "number"}),
    (decimal.Decimal, {"type": "number"}),
    (str, {"type": "string"}),
    (datetime.datetime, {"type": "string", "format": "date-time"}),
    (datetime.date, {"type": "string", "format": "date"}),
    (datetime.time, {"type": "string", "format": "time"}),
]

JSON_TYPE_OF_VALUE = {bool: "boolean", int: "integer", float: "number", str: "string"}


def _enum_node(values: list) -> dict:
    node: dict = {}
    value_types = {JSON_TYPE_OF_VALUE.get(type(v)) for v in values}
    if len(value_types) == 1 and None not in value_types:
        node["type"] = value_types.pop()
    node["enum"] = list(values)
    return node


class PropertySchema:
    """Schema fragment of one property of an object schema.

    Attributes:
        owner: The ObjectSchema the property belongs to
        descriptor: The discovered accessor/field pairing
        node: The rendered fragment
        required: Whether the owner must list the property as required
    """

    def __init__(self, owner, context: ExpansionContext, descriptor: PropertyDescriptor):
        self.owner = owner
        self.context = context
        self.descriptor = descriptor
        self.required = False
        self.node = self._build()

    @property
    def name(self) -> str:
        return self.descriptor.name

    def as_json(self) -> dict:
        return self.node

    def _build(self) -> dict:
        attrs = self.descriptor.attributes
        node = self.type_schema(self.descriptor.declared_type, f"properties/{self.name}")
        if attrs is not None and attrs.nullable:
            node = make_nullable(node)
        node["readonly"] = self.descriptor.readonly
        if self.descriptor.enums:
            node["enum"] = list(self.descriptor.enums)

        apply_attributes(node, attrs)
        if attrs is not None and attrs.required:
            self.required = True
        return node

    def type_schema(self, annotation: Any, token: str) -> dict:
        """Return the fragment describing ``annotation``.

        Args:
            annotation: A resolved type hint
            token: Relative id token used if a nested object gets expanded
        """
        if annotation is Any:
            return {}
        if annotation is None or annotation is type(None):
            return {"type": "null"}

        origin = typing.get_origin(annotation)
        args = typing.get_args(annotation)

        if origin is Annotated:
            return self.type_schema(annotation.__origin__, token)
        if origin is Union or origin is types.UnionType:
            members = [arg for arg in args if arg is not type(None)]
            if len(members) == 1:
                node = self.type_schema(members[0], token)
            else:
                node = {"anyOf": [self.type_schema(member, token) for member in members]}
            # Optional[T] and T | None also accept null
            if len(members) < len(args):
                node = make_nullable(node)
            return node
        if origin is Literal:
            return _enum_node(list(args))
        if origin is not None:
            return self._generic_schema(origin, args, token)

        if not isinstance(annotation, type):
            # Unresolved strings, type variables and other special forms
            return {}
        if issubclass(annotation, enum.Enum):
            return _enum_node([member.value for member in annotation])
        for simple_type, fragment in SIMPLE_TYPES:
            if issubclass(annotation, simple_type):
                return dict(fragment)
        if issubclass(annotation, (bytes, bytearray)):
            return {"type": "string"}
        if issubclass(annotation, (collections.abc.Mapping, list, tuple, set, frozenset)):
            return self._generic_schema(annotation, (), token)
        return self.object_schema(annotation, token)

    def _generic_schema(self, origin: type, args: tuple, token: str) -> dict:
        if not isinstance(origin, type):
            # Qualifiers such as ClassVar[T] or Final[T]
            return self.type_schema(args[0], token) if args else {}
        if issubclass(origin, collections.abc.Mapping):
            node: dict = {"type": "object"}
            if len(args) == 2:
                node["additionalProperties"] = self.type_schema(args[1], f"{token}/additionalProperties")
            return node

        if issubclass(origin, tuple):
            node = {"type": "array"}
            if len(args) == 2 and args[1] is Ellipsis:
                node["items"] = self.type_schema(args[0], f"{token}/items")
            elif args:
                node["items"] = [self.type_schema(arg, f"{token}/items/{i}") for i, arg in enumerate(args)]
            return node

        if issubclass(origin, collections.abc.Iterable) and not issubclass(origin, (str, bytes)):
            node = {"type": "array"}
            if args:
                node["items"] = self.type_schema(args[0], f"{token}/items")
            if issubclass(origin, collections.abc.Set):
                node["uniqueItems"] = True
            return node

        # A parametrized user class
        return self.type_schema(origin, token)

    def object_schema(self, cls: type, token: str) -> dict:
        """Expand ``cls`` as a nested object, or point at its running expansion."""
        reference = ManagedReference(cls)
        if reference in self.context:
            anchor = self.context.anchor(reference)
            logger.debug("%s already expanded at %s, emitting reference", cls.__name__, anchor)
            return {"$ref": anchor}

        nested = type(self.owner)(cls, self.context, f"{self.owner.relative_id}/{token}")
        # Only a directly nested object carries its required flag to the property
        if nested.required and token == f"properties/{self.name}":
            self.required = True
        return nested.node


def render_property(owner, context: ExpansionContext, descriptor: PropertyDescriptor) -> PropertySchema | None:
    """Render ``descriptor``, or return None when the property must be omitted."""
    if descriptor.ignored or descriptor.name in context.config.global_ignore_fields:
        logger.debug("Ignoring property %s of %s", descriptor.name, owner.type.__name__)
        return None
    return PropertySchema(owner, context, descriptor)
