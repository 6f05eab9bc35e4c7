"""
Naming rules linking accessor methods to schema property names.
"""

from __future__ import annotations

# Checked in order; a later matching prefix overrides an earlier one
GETTER_PREFIXES = ("get", "is", "get_")


def is_getter_name(name: str) -> bool:
    """Check whether a method name follows the getter convention."""
    return name.startswith("get") or name.startswith("is")


def property_name_from_getter(name: str) -> str | None:
    """Derive the property name from a getter name.

    Examples:
        "getUserName" -> "userName"
        "isActive" -> "active"
        "get_user_name" -> "user_name"
        "get" -> None

    Args:
        name: The accessor method name

    Returns:
        The property name, or None when nothing follows the prefix
    """
    stripped = None
    for prefix in GETTER_PREFIXES:
        if name.startswith(prefix):
            stripped = name[len(prefix) :]
            if not stripped:
                return None

    if stripped is None:
        return None

    return stripped[0].lower() + stripped[1:]


def setter_name_for(getter_name: str) -> str | None:
    """Return the mutator name matching a getter, if the getter has one.

    Only the first "get" is rewritten, so names without "get" (such as
    "isActive") have no mutator candidate.
    """
    setter_name = getter_name.replace("get", "set", 1)
    if setter_name == getter_name:
        return None
    return setter_name
