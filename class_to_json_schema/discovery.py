"""
Property discovery.

Builds the property table of a class: its public accessor methods sorted by
name, each paired with the declared field it reads. The order of the table
is the order of properties in the generated schema.
"""

from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Collection
from dataclasses import dataclass, field
from typing import Annotated, Any

from .attributes import Attributes, SchemaIgnore, is_ignored, read_attributes
from .naming import is_getter_name, property_name_from_getter, setter_name_for

logger = logging.getLogger(__name__)


@dataclass
class Accessor:
    """A public routine reachable on a class."""

    name: str
    raw: Any  # Value as stored in the declaring class __dict__
    declaring_class: type

    @property
    def function(self) -> Any:
        """The underlying function, unwrapped from static/class method objects."""
        if isinstance(self.raw, (staticmethod, classmethod)):
            return self.raw.__func__
        return self.raw

    @property
    def return_type(self) -> Any:
        func = self.function
        if not inspect.isfunction(func):
            return Any
        return typing.get_type_hints(func, include_extras=True).get("return", Any)


@dataclass
class Field:
    """A field declared as an annotation on the class itself."""

    name: str
    type: Any
    metadata: tuple = ()

    @property
    def attributes(self) -> Attributes | None:
        for item in self.metadata:
            if isinstance(item, Attributes):
                return item
        return None

    @property
    def ignored(self) -> bool:
        return any(item is SchemaIgnore or isinstance(item, SchemaIgnore) for item in self.metadata)


@dataclass
class PropertyDescriptor:
    """A discovered property, ready to be rendered."""

    name: str
    accessor: Accessor
    field: Field | None
    readonly: bool
    enums: list[str] = field(default_factory=list)

    @property
    def declared_type(self) -> Any:
        if self.field is not None:
            return self.field.type
        return self.accessor.return_type

    @property
    def attributes(self) -> Attributes | None:
        if self.field is not None and self.field.attributes is not None:
            return self.field.attributes
        return read_attributes(self.accessor.function)

    @property
    def ignored(self) -> bool:
        if self.field is not None and self.field.ignored:
            return True
        return is_ignored(self.accessor.function)


def _is_routine(value: Any) -> bool:
    return isinstance(value, (staticmethod, classmethod)) or inspect.isroutine(value)


def _declaring_class(cls: type, name: str) -> type | None:
    for klass in cls.__mro__:
        if name in vars(klass):
            return klass
    return None


# Modules whose collection types contribute no properties
COLLECTION_MODULES = frozenset({"builtins", "collections", "collections.abc", "_collections_abc"})


def _is_foreign(declaring_class: type) -> bool:
    """Check whether a routine comes from object or a standard collection type."""
    if declaring_class is object:
        return True
    return declaring_class.__module__ in COLLECTION_MODULES and issubclass(declaring_class, Collection)


def collect_accessors(cls: type) -> list[Accessor]:
    """Return every public routine of ``cls``, sorted by name."""
    accessors = []
    for name in dir(cls):
        if name.startswith("_"):
            continue
        declaring_class = _declaring_class(cls, name)
        if declaring_class is None:
            continue
        raw = vars(declaring_class)[name]
        if _is_routine(raw):
            accessors.append(Accessor(name, raw, declaring_class))
    accessors.sort(key=lambda accessor: accessor.name)
    return accessors


def declared_fields(cls: type) -> list[Field]:
    """Return the fields annotated on ``cls`` itself, in declaration order."""
    own_names = list(inspect.get_annotations(cls))
    if not own_names:
        return []
    hints = typing.get_type_hints(cls, include_extras=True)
    fields = []
    for name in own_names:
        hint = hints.get(name, Any)
        if typing.get_origin(hint) is Annotated:
            fields.append(Field(name, hint.__origin__, tuple(hint.__metadata__)))
        else:
            fields.append(Field(name, hint))
    return fields


def find_properties(cls: type, include_fieldless: bool = True) -> list[tuple[Accessor, Field | None]]:
    """Pair each getter of ``cls`` with its backing field.

    Args:
        cls: The class to inspect
        include_fieldless: Keep getters that have no matching field

    Returns:
        (accessor, field) pairs in accessor-name order; field is None for
        field-less getters
    """
    fields = declared_fields(cls)
    pairs: list[tuple[Accessor, Field | None]] = []
    for accessor in collect_accessors(cls):
        if _is_foreign(accessor.declaring_class):
            continue
        if not is_getter_name(accessor.name):
            continue

        name = property_name_from_getter(accessor.name)
        if name is None:
            logger.debug("Skipping %s.%s: no property name after prefix", cls.__name__, accessor.name)
            continue

        match = None
        for candidate in fields:
            if candidate.name.lower() == name.lower():
                match = candidate
                break

        if match is None and not include_fieldless:
            logger.debug("Skipping %s.%s: no backing field", cls.__name__, accessor.name)
            continue
        pairs.append((accessor, match))
    return pairs


def accessor_names(cls: type) -> frozenset[str]:
    """Return the lower-cased names of every public routine of ``cls``."""
    return frozenset(accessor.name.lower() for accessor in collect_accessors(cls))


def has_set_method(cls: type, getter_name: str, names: frozenset[str] | None = None) -> bool:
    """Check whether ``cls`` has a public mutator matching ``getter_name``.

    ``names`` is the result of ``accessor_names(cls)``; pass it when checking
    several getters of the same class.
    """
    setter_name = setter_name_for(getter_name)
    if setter_name is None:
        return False
    if names is None:
        names = accessor_names(cls)
    return setter_name.lower() in names
