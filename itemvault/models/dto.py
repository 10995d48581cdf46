"""Data Transfer Objects - JSON file contracts."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from itemvault.models.domain import InventoryItem


class InventoryItemDTO(BaseModel):
    """Inventory record as written to the JSON log file."""
    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")
    quantity: int = Field(..., alias="Quantity")
    date_added: datetime = Field(..., alias="DateAdded")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, item: InventoryItem) -> "InventoryItemDTO":
        """Convert domain entity to DTO."""
        return cls(
            id=item.id,
            name=item.name,
            quantity=item.quantity,
            date_added=item.date_added,
        )

    def to_domain(self) -> InventoryItem:
        """Convert DTO to domain entity."""
        return InventoryItem(
            id=self.id,
            name=self.name,
            quantity=self.quantity,
            date_added=self.date_added,
        )

