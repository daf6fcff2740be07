"""
Configuration for the PoE2 tooltip parser.
Handles logging and parser options loaded from a JSON file.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """
    Get the application config directory.

    Returns:
        Path to the config directory (~/.poe2_tooltip/)
    """
    return Path.home() / ".poe2_tooltip"


# NOTE: This structure is treated as immutable. Always use
# _default_config_deepcopy() when you need a fresh copy of defaults.
DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "debug": False,
        "log_to_file": True,
        # Rotating log file: ~1 MB, 3 backups
        "max_bytes": 1_000_000,
        "backup_count": 3,
    },
    "parser": {
        # Log the rule/category chosen for every tooltip line (DEBUG)
        "trace_classification": False,
    },
}


class Config:
    """
    Read-only configuration with JSON backing.

    A missing or unreadable file leaves every setting at its default.
    """

    def __init__(self, config_file: Optional[Path] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_file: Optional path to config JSON file. When omitted,
                         ~/.poe2_tooltip/config.json is used.
        """
        self.config_file: Path = self._resolve_config_path(config_file)
        self.data: Dict[str, Any] = self._load()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_config_path(config_file: Optional[Path]) -> Path:
        if config_file is not None:
            return Path(config_file)
        return get_config_dir() / "config.json"

    def _load(self) -> Dict[str, Any]:
        """Load configuration from JSON file, merging with defaults."""
        if not self.config_file.exists():
            logger.debug(f"No config file at {self.config_file}, using defaults")
            return self._default_config_deepcopy()

        try:
            with self.config_file.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"Failed to load config: {exc}. Using defaults.")
            return self._default_config_deepcopy()

        if not isinstance(raw, dict):
            logger.error(
                f"Config file {self.config_file} does not hold a JSON object. Using defaults."
            )
            return self._default_config_deepcopy()

        logger.info(f"Config loaded from {self.config_file}")
        return self._merge_with_defaults(raw)

    @staticmethod
    def _default_config_deepcopy() -> Dict[str, Any]:
        return copy.deepcopy(DEFAULT_CONFIG)

    def _merge_with_defaults(self, user_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge user config with defaults per top-level section, so keys the
        user file does not mention keep their default values.
        """
        merged = self._default_config_deepcopy()

        for key, value in user_config.items():
            if key in merged and isinstance(merged[key], dict):
                if isinstance(value, dict):
                    merged[key].update(value)
                else:
                    logger.warning(f"Ignoring config section '{key}': expected an object")
            else:
                merged[key] = value

        return merged

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    @property
    def debug_logging(self) -> bool:
        return bool(self.data["logging"].get("debug", False))

    @property
    def log_to_file(self) -> bool:
        return bool(self.data["logging"].get("log_to_file", True))

    @property
    def log_max_bytes(self) -> int:
        value = int(self.data["logging"].get("max_bytes", 1_000_000))
        # GUARDRAIL: at least 10 KB per file
        return max(10_000, value)

    @property
    def log_backup_count(self) -> int:
        return max(0, int(self.data["logging"].get("backup_count", 3)))

    # ------------------------------------------------------------------
    # Parser
    # ------------------------------------------------------------------

    @property
    def trace_classification(self) -> bool:
        return bool(self.data["parser"].get("trace_classification", False))
