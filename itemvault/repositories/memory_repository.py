"""Keyed repository - in-memory implementation."""

import logging
from typing import Dict, List, Optional

from itemvault.errors import DuplicateKeyError, InvalidValueError, NotFoundError
from itemvault.repositories.base import Repository, T

logger = logging.getLogger(__name__)


class KeyedRepository(Repository[T]):
    """
    Repository for any entity with an integer id.

    Current implementation: In-memory (dict)
    Items are returned by reference, so mutations made by callers are
    visible to later lookups without re-storing.
    """

    def __init__(self, entity_type: Optional[str] = None):
        self.entity_type = entity_type or "Item"
        self._items: Dict[int, T] = {}
        self._version = 0

    def add(self, item: T) -> T:
        """Insert item, rejecting an id that is already stored."""
        if item.id in self._items:
            raise DuplicateKeyError(self.entity_type, item.id)
        self._items[item.id] = item
        self._version += 1
        logger.debug("Added %s %s", self.entity_type, item.id)
        return item

    def get(self, id: int) -> T:
        """Get item by ID."""
        try:
            return self._items[id]
        except KeyError:
            raise NotFoundError(self.entity_type, id) from None

    def remove(self, id: int) -> None:
        """Delete item from memory."""
        if id not in self._items:
            raise NotFoundError(self.entity_type, id)
        del self._items[id]
        self._version += 1
        logger.debug("Removed %s %s", self.entity_type, id)

    @property
    def version(self) -> int:
        """Counter bumped by every add and remove."""
        return self._version

    def list(self) -> List[T]:
        """List all items in insertion order."""
        return list(self._items.values())

    def update_quantity(self, id: int, new_quantity: int) -> T:
        """Set the stored item's quantity in place.

        The value is validated before the lookup, so a negative quantity
        is reported even for an unknown id.
        """
        if new_quantity < 0:
            raise InvalidValueError("quantity", new_quantity, "Quantity cannot be negative.")
        item = self.get(id)
        item.quantity = new_quantity
        return item

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, id: object) -> bool:
        return id in self._items
