"""Warehouse service - stock keeping for electronics and groceries."""

import logging
from datetime import datetime, timedelta
from typing import List

from itemvault.errors import RepositoryError
from itemvault.models.domain import ElectronicItem, GroceryItem, StockItem
from itemvault.repositories.memory_repository import KeyedRepository

logger = logging.getLogger(__name__)


class WarehouseService:
    """
    Service for warehouse stock.

    Responsibilities:
    - Own one keyed repository per product family
    - Apply stock changes through the repository's validated update
    - Report repository errors as messages instead of raising
    """

    def __init__(self):
        self.electronics: KeyedRepository[ElectronicItem] = KeyedRepository("Electronic item")
        self.groceries: KeyedRepository[GroceryItem] = KeyedRepository("Grocery item")

    def seed_data(self) -> None:
        """Load the sample stock."""
        now = datetime.now()
        self.electronics.add(ElectronicItem(1, "Laptop", 7, "Dell", 24))
        self.electronics.add(ElectronicItem(2, "Phone", 29, "Samsung", 12))
        self.groceries.add(GroceryItem(1, "Rice cakes", 25, now + timedelta(days=182)))
        self.groceries.add(GroceryItem(2, "Milk", 13, now + timedelta(days=7)))

    @staticmethod
    def format_items(repo: KeyedRepository[StockItem]) -> List[str]:
        """One line per item in the repository."""
        return [
            f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}"
            for item in repo.list()
        ]

    def increase_stock(self, repo: KeyedRepository[StockItem], id: int, amount: int) -> str:
        """Add amount to an item's quantity."""
        try:
            item = repo.get(id)
            repo.update_quantity(id, item.quantity + amount)
        except RepositoryError as e:
            logger.debug("increase_stock failed: %s", e)
            return f"Error: {e.message}"
        return f"Updated quantity for {item.name}: {item.quantity}"

    def remove_item_by_id(self, repo: KeyedRepository[StockItem], id: int) -> str:
        """Remove an item and report the result."""
        try:
            repo.remove(id)
        except RepositoryError as e:
            logger.debug("remove_item_by_id failed: %s", e)
            return f"Error: {e.message}"
        return f"Item with ID {id} removed successfully."
