"""
Registry for the YAML rule tables that drive parsing and scoring.

Tables live in atsresume/config/{name}.yaml by default. Point
ATSRESUME_CONFIG_PATH at another directory to swap in custom tables
(e.g., extra section synonyms or stop words) without touching code.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config"
CONFIG_PATH = Path(os.getenv("ATSRESUME_CONFIG_PATH", str(DEFAULT_CONFIG_PATH)))


class ConfigRegistry:
    """
    Loads and caches rule tables.

    Cached dicts are shared between callers and must be treated as read-only.
    """

    def __init__(self, config_path: Path = None):
        """
        Args:
            config_path: Directory holding {name}.yaml files. Defaults to
                         ATSRESUME_CONFIG_PATH from environment
        """
        if config_path is None:
            config_path = CONFIG_PATH

        self.config_path = Path(config_path)
        self._cache: Dict[str, Dict[str, Any]] = {}

    def get_config(self, name: str) -> Dict[str, Any]:
        """
        Get a table by name, loading and caching it if necessary.

        Args:
            name: Table name (e.g., 'token_patterns', 'ats_rules')

        Returns:
            Dict containing the table

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        path = self.get_config_path(name)

        if not path.exists():
            raise FileNotFoundError(f"Config table '{name}' not found at {path}")

        config = OmegaConf.load(path)
        config_dict = OmegaConf.to_container(config, resolve=True)

        self._cache[name] = config_dict
        return config_dict

    def get_config_path(self, name: str) -> Path:
        """Path to the YAML file for a table."""
        return self.config_path / f"{name}.yaml"

    def clear_cache(self):
        """Clear the table cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """Check if a table is in the cache."""
        return name in self._cache


_default_registry = ConfigRegistry()


def load_config(name: str) -> Dict[str, Any]:
    """Load a table through the process-wide default registry."""
    return _default_registry.get_config(name)
