"""Inventory log - JSON file implementation."""

import json
import logging
from pathlib import Path
from typing import Generic, List, Type

from pydantic import TypeAdapter, ValidationError

from itemvault.models.dto import InventoryItemDTO
from itemvault.repositories.base import T

logger = logging.getLogger(__name__)


class InventoryLog(Generic[T]):
    """
    Append-only log of keyed records bound to a JSON file.

    Current implementation: single JSON array, written indented.
    Records go through a pydantic DTO so the on-disk keys stay stable
    (Id, Name, Quantity, DateAdded) regardless of attribute names.
    """

    def __init__(self, file_path: Path, dto_type: Type[InventoryItemDTO] = InventoryItemDTO):
        self.file_path = Path(file_path)
        self.dto_type = dto_type
        self._adapter = TypeAdapter(List[dto_type])
        self._log: List[T] = []

    def add(self, item: T) -> T:
        """Append a record."""
        self._log.append(item)
        return item

    def list(self) -> List[T]:
        """List all records."""
        return list(self._log)

    def save_to_file(self) -> bool:
        """Write the log to disk. Returns False if the write failed."""
        records = [
            self.dto_type.from_domain(item).model_dump(mode="json", by_alias=True)
            for item in self._log
        ]

        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2)
        except OSError as e:
            logger.error("Error saving to file %s: %s", self.file_path, e)
            return False

        logger.info("Saved %d records to %s", len(records), self.file_path)
        return True

    def load_from_file(self) -> bool:
        """Replace the in-memory log with the file contents.

        A missing file means there is no data yet; the log is left as is.
        """
        if not self.file_path.exists():
            logger.info("File not found: %s. No data loaded.", self.file_path)
            return False

        try:
            with open(self.file_path, encoding="utf-8") as f:
                raw = json.load(f)
            dtos = self._adapter.validate_python([] if raw is None else raw)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error("Error loading from file %s: %s", self.file_path, e)
            return False

        self._log = [dto.to_domain() for dto in dtos]
        logger.info("Loaded %d records from %s", len(self._log), self.file_path)
        return True

    def __len__(self) -> int:
        return len(self._log)
