"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, List

from itemvault.models.domain import HasId

T = TypeVar('T', bound=HasId)


class Repository(ABC, Generic[T]):
    """
    Base repository interface.

    Maps integer ids to entities of type T. At most one entity per id.
    Lookups of unknown ids raise NotFoundError rather than returning None.
    """

    @abstractmethod
    def add(self, item: T) -> T:
        """Add entity. Raises DuplicateKeyError if the id is taken."""
        pass

    @abstractmethod
    def get(self, id: int) -> T:
        """Get entity by ID. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    def remove(self, id: int) -> None:
        """Remove entity by ID. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities."""
        pass
