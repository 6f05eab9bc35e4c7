"""
Object schema assembly.

``ObjectSchema`` builds the JSON Schema object node of one class: it applies
the class attributes, discovers the class properties and merges the rendered
fragment of each into ``properties`` and ``required``. Everything happens in
the constructor; the finished instance is read-only data.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .attributes import apply_attributes, make_nullable, read_attributes
from .discovery import PropertyDescriptor, accessor_names, find_properties, has_set_method
from .enums import get_enums_for_field
from .naming import property_name_from_getter
from .properties import PropertySchema, render_property
from .references import ExpansionContext, ManagedReference

logger = logging.getLogger(__name__)


class ObjectSchema:
    """Schema of a class, rendered as a JSON Schema object.

    Args:
        type_: The class to describe
        context: Expansion context shared by the whole document; a new one
            is created when omitted
        relative_id: Token composed into the relative id ("#" when omitted)
    """

    TAG_REQUIRED = "required"
    TAG_PROPERTIES = "properties"

    def __init__(self, type_: type, context: ExpansionContext | None = None, relative_id: str | None = None):
        self.type = type_
        self.context = context if context is not None else ExpansionContext()
        self.node: dict = {"type": "object"}
        self.required = False
        self.relative_id = "#"
        self._properties: list[PropertySchema] = []

        self.process_nullable(type_)
        self.process_attributes(self.node, type_)
        if relative_id is not None:
            self.add_token_to_relative_id(relative_id)

        reference = ManagedReference(type_, self.relative_id)
        pulled = self.pull_reference(reference)
        try:
            self.process_properties()
        finally:
            if pulled:
                self.push_reference(reference)

    def __iter__(self) -> Iterator[PropertySchema]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def add_token_to_relative_id(self, token: str) -> None:
        if token.startswith("#"):
            self.relative_id = token
        else:
            self.relative_id = f"{self.relative_id}/{token}"

    def add_property(self, prop: PropertySchema) -> None:
        """Insert a rendered property, replacing any previous one of the same name."""
        for i, existing in enumerate(self._properties):
            if existing.name == prop.name:
                self._properties[i] = prop
                break
        else:
            self._properties.append(prop)

        properties = self.node.setdefault(self.TAG_PROPERTIES, {})
        properties[prop.name] = prop.as_json()

        if prop.required:
            self.add_required(prop.name)

    def add_required(self, name: str) -> None:
        required = self.node.setdefault(self.TAG_REQUIRED, [])
        if name not in required:
            required.append(name)

    def pull_reference(self, reference: ManagedReference) -> bool:
        return self.context.pull(reference)

    def push_reference(self, reference: ManagedReference) -> bool:
        return self.context.push(reference)

    def process_nullable(self, type_: type) -> None:
        attrs = read_attributes(type_)
        if attrs is not None and attrs.nullable:
            self.node = make_nullable(self.node)

    def process_attributes(self, node: dict, type_: type) -> None:
        attrs = read_attributes(type_)
        apply_attributes(node, attrs)
        if attrs is not None and attrs.required:
            self.required = True

    def process_properties(self) -> None:
        include_fieldless = self.context.config.include_fieldless_accessors
        names = accessor_names(self.type)
        for accessor, field in find_properties(self.type, include_fieldless):
            descriptor = PropertyDescriptor(
                name=property_name_from_getter(accessor.name),
                accessor=accessor,
                field=field,
                readonly=not has_set_method(self.type, accessor.name, names),
                enums=get_enums_for_field(self.type, field.name if field is not None else None),
            )
            prop = render_property(self, self.context, descriptor)
            if prop is not None:
                self.add_property(prop)
        logger.debug("Assembled %s at %s with %d properties", self.type.__name__, self.relative_id, len(self))
