"""
Cycle tracking for nested object expansion.

An ``ExpansionContext`` is created once per generated document and passed
down through every nested ``ObjectSchema``. It records which classes are
currently being expanded so that a class reached again through its own
properties is emitted as a ``$ref`` instead of being expanded forever.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import SchemaGeneratorConfig


@dataclass(frozen=True)
class ManagedReference:
    """Token meaning "this class is being expanded".

    Equality only considers the class; ``relative_id`` records where the
    expansion happens so that re-encounters can point back to it.
    """

    type: type
    relative_id: str = field(default="#", compare=False)


class ExpansionContext:
    """Shared state of one document build.

    Pulls and pushes must nest strictly (depth-first, one thread).
    """

    def __init__(self, config: SchemaGeneratorConfig | None = None):
        self.config = config or SchemaGeneratorConfig()
        self._references: set[ManagedReference] = set()

    def pull(self, reference: ManagedReference) -> bool:
        """Start expanding ``reference``.

        Returns:
            False if it is already being expanded, True otherwise
        """
        if reference in self._references:
            return False
        self._references.add(reference)
        return True

    def push(self, reference: ManagedReference) -> bool:
        """Finish expanding ``reference``; returns whether it was tracked."""
        if reference not in self._references:
            return False
        self._references.remove(reference)
        return True

    def anchor(self, reference: ManagedReference) -> str:
        """Return the relative id where the tracked ``reference`` is expanded.

        Raises:
            KeyError: If the reference is not being expanded
        """
        for tracked in self._references:
            if tracked == reference:
                return tracked.relative_id
        raise KeyError(reference.type.__qualname__)

    def __contains__(self, reference: ManagedReference) -> bool:
        return reference in self._references

    def __len__(self) -> int:
        return len(self._references)
