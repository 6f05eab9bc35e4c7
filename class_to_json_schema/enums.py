"""
Enum literals declared through nested holder classes.

A field ``status`` gets its allowed values from a class named
``statusEnum`` declared inside the owning class::

    class Order:
        status: str

        class statusEnum:
            OPEN = "open"
            CLOSED = "closed"
"""

from __future__ import annotations

import enum
import inspect
import logging

logger = logging.getLogger(__name__)


def _constant_values(holder: type) -> list[str]:
    if issubclass(holder, enum.Enum):
        values = [member.value for member in holder]
    else:
        values = [
            value
            for name, value in vars(holder).items()
            if not (name.startswith("__") and name.endswith("__"))
            and not inspect.isroutine(value)
            and not isinstance(value, (staticmethod, classmethod, property, type))
        ]
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"{holder.__qualname__} holds non-string value {value!r}")
    return values


def get_enums_for_field(owner: type, field_name: str | None) -> list[str]:
    """Collect the string constants of the holder class for ``field_name``.

    Failures are logged and yield an empty list.
    """
    if field_name is None:
        return []

    holder_name = f"{field_name}Enum"
    enums: list[str] = []
    try:
        for value in vars(owner).values():
            if isinstance(value, type) and value.__name__ == holder_name:
                enums.extend(_constant_values(value))
    except Exception as e:
        logger.warning("Caught exception %s while getting enum for %s.%s", e, owner.__name__, field_name)
        return []
    return enums
