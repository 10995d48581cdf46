"""
Configuration service for file paths and logging.

Values come from a bundled JSON file; ITEMVAULT_* environment
variables take precedence over it.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

ENV_OVERRIDES = {
    "inventoryFile": "ITEMVAULT_INVENTORY_FILE",
    "studentsFile": "ITEMVAULT_STUDENTS_FILE",
    "reportFile": "ITEMVAULT_REPORT_FILE",
    "logLevel": "ITEMVAULT_LOG_LEVEL",
}


class ConfigService:
    """Service for loading and providing sample configuration."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize the configuration service.

        Args:
            config_path: Path to configuration JSON file.
                        Defaults to itemvault/config/itemvault_config.json
        """
        if config_path is None:
            package_dir = Path(__file__).parent.parent
            config_path = package_dir / "config" / "itemvault_config.json"

        self.config_path = config_path
        self._config = None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from JSON file and apply env overrides.

        Raises:
            FileNotFoundError: If config file doesn't exist
            json.JSONDecodeError: If config file is invalid JSON
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)

        for key, env_var in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value:
                config[key] = value

        return config

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration (cached)."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_inventory_file(self) -> Path:
        """Path of the inventory JSON log."""
        return Path(self.config.get("inventoryFile", "inventory.json"))

    def get_students_file(self) -> Path:
        """Path of the grading input file."""
        return Path(self.config.get("studentsFile", "students.txt"))

    def get_report_file(self) -> Path:
        """Path of the grading report output."""
        return Path(self.config.get("reportFile", "report.txt"))

    def get_log_level(self) -> str:
        return str(self.config.get("logLevel", "WARNING")).upper()


# Global instance for easy import
_config_service = None

def get_config_service() -> ConfigService:
    """Get the global configuration service instance.

    Returns:
        ConfigService instance
    """
    global _config_service
    if _config_service is None:
        _config_service = ConfigService()
    return _config_service
