"""Loader for ``key = value`` configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .logging_utils import get_module_logger

logger = get_module_logger("ConfigLoader")

TRUE_VALUES = ("true", "yes", "on", "1")


class ConfigLoader:
    """Config file loader.

    Lines are ``key = value``; blank lines and ``#`` comments are skipped.
    Keys whose default is a bool take a boolean spelling; every other value
    stays a string and is converted by the caller.
    """

    @staticmethod
    def load(
        config_path: Path,
        defaults: Optional[Dict[str, Any]] = None,
        strict: bool = False
    ) -> Dict[str, Any]:
        defaults = defaults or {}
        config = dict(defaults)
        config_path = Path(config_path)

        if not config_path.exists():
            logger.debug("Config file not found at %s, using defaults", config_path)
            return config

        try:
            text = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to load config file %s: %s", config_path, e)
            return config

        for line_num, line in enumerate(text.splitlines(), 1):
            entry = ConfigLoader._split_entry(line, line_num)
            if entry is None:
                continue
            key, value = entry

            if strict and key not in defaults:
                logger.warning(
                    "Unknown config key '%s' (line %d) - ignored in strict mode",
                    key, line_num
                )
                continue

            if isinstance(defaults.get(key), bool):
                config[key] = value.lower() in TRUE_VALUES
            else:
                config[key] = value

        logger.debug("Loaded config from %s", config_path)
        return config

    @staticmethod
    def _split_entry(line: str, line_num: int) -> Optional[Tuple[str, str]]:
        line = line.split("#", 1)[0].strip()
        if not line:
            return None
        if "=" not in line:
            logger.warning("Invalid config line %d (missing '='): %s", line_num, line)
            return None
        key, value = line.split("=", 1)
        return key.strip(), value.strip()


__all__ = ["ConfigLoader"]
