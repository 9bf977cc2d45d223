"""
decicalc Configuration Management

Loads and validates the calculator configuration.
"""

import json
import logging
import os
from copy import deepcopy
from typing import Dict, Any, Optional
from pathlib import Path
import jsonschema

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "DECICALC_CONFIG_DIR"
CONFIG_FILE = "calculator.json"
SCHEMA_FILE = "calculator.schema.json"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    'calculator': {
        'division_extra_digits': 2,
    },
    'logging': {
        'level': 'INFO',
        'json_log_dir': 'logs',
    },
}


class ConfigLoader:
    """Loads and manages calculator configuration sections."""

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize configuration loader.

        Args:
            config_dir: Directory containing calculator.json. Defaults to
                $DECICALC_CONFIG_DIR, then this package's directory.
        """
        self.config_dir = Path(config_dir or os.environ.get(CONFIG_DIR_ENV) or Path(__file__).parent)
        self.configs = {}
        self._load_all_configs()

    def _load_all_configs(self) -> None:
        """Load calculator.json over the built-in defaults."""
        self.configs = deepcopy(DEFAULTS)
        config_path = self.config_dir / CONFIG_FILE
        if not config_path.exists():
            return

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            self._validate(data)
        except (OSError, json.JSONDecodeError, jsonschema.ValidationError) as e:
            # Keep defaults; a broken file must not take the calculator down
            logger.warning("config_load_failed", extra={"path": str(config_path), "error": str(e)})
            return

        for section, values in data.items():
            self.configs.setdefault(section, {}).update(values)

    def _validate(self, data: Dict[str, Any]) -> None:
        """Validate raw config against calculator.schema.json when present."""
        schema_path = self.config_dir / SCHEMA_FILE
        if not schema_path.exists():
            schema_path = Path(__file__).parent / SCHEMA_FILE
        with open(schema_path, 'r', encoding='utf-8') as sf:
            schema = json.load(sf)
        jsonschema.validate(instance=data, schema=schema)

    def get_config(self, config_name: str) -> Dict[str, Any]:
        """
        Get configuration section by name.

        Args:
            config_name: Name of configuration section

        Returns:
            Configuration dictionary
        """
        return self.configs.get(config_name, {}).copy()

    def get_all_configs(self) -> Dict[str, Dict[str, Any]]:
        """
        Get all configuration sections.

        Returns:
            Dictionary of all configurations
        """
        return deepcopy(self.configs)

    def reload(self) -> None:
        """Re-read calculator.json from disk."""
        self._load_all_configs()


# Global configuration loader instance
config_loader = ConfigLoader()
