"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

"Active" accessors (``get_by_id``, ``list``, ``count``) never return
soft-deleted rows.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an active entity by its primary key."""

    @abstractmethod
    def list(self, offset: int = 0, limit: Optional[int] = None) -> List[T]:
        """List active entities, skipping ``offset`` and taking up to ``limit``."""

    @abstractmethod
    def count(self) -> int:
        """Count active entities."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, entity: T) -> T:
        """Soft-delete an entity and return it."""
