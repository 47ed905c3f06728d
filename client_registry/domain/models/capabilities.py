"""Structural capabilities an entity may opt into.

These are Protocols rather than base classes: an entity satisfies a
capability simply by providing its members, independently of any other
capability it has.  SQL repositories read these members to target rows and
to flag soft deletes.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

IdT_co = TypeVar("IdT_co", covariant=True)


@runtime_checkable
class Identifiable(Protocol[IdT_co]):
    """An entity with a (possibly not yet assigned) surrogate identifier.

    id is None until the store has persisted the entity.
    """

    @property
    def id(self) -> IdT_co | None: ...


@runtime_checkable
class SoftDeletable(Protocol):
    """An entity that can be flagged deleted without removing its row."""

    @property
    def is_deleted(self) -> bool: ...

    def set_deleted(self, deleted: bool) -> None: ...
