"""Inventory service - seeds, saves, loads and prints the inventory log."""

from datetime import datetime
from pathlib import Path
from typing import List, Optional

from itemvault.models.domain import InventoryItem
from itemvault.repositories.json_repository import InventoryLog
from itemvault.services.config_service import get_config_service


class InventoryService:
    """Service wrapping an InventoryLog of InventoryItem records."""

    def __init__(self, file_path: Optional[Path] = None):
        if file_path is None:
            file_path = get_config_service().get_inventory_file()
        self.log: InventoryLog[InventoryItem] = InventoryLog(file_path)

    def seed_sample_data(self) -> None:
        now = datetime.now()
        self.log.add(InventoryItem(1, "Laptop", 7, now))
        self.log.add(InventoryItem(2, "Mouse", 20, now))
        self.log.add(InventoryItem(3, "Keyboard", 22, now))
        self.log.add(InventoryItem(4, "IPad", 3, now))
        self.log.add(InventoryItem(5, "HDMI Cable", 19, now))

    def save_data(self) -> bool:
        return self.log.save_to_file()

    def load_data(self) -> bool:
        return self.log.load_from_file()

    def format_items(self) -> List[str]:
        """One line per inventory record."""
        return [
            f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}, "
            f"Date Added: {item.date_added:%Y-%m-%d %H:%M:%S}"
            for item in self.log.list()
        ]
