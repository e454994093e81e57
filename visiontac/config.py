"""Typed configuration for reading track logs."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .constants import DEFAULT_ENCODING
from .core.config_loader import ConfigLoader
from .core.logging_utils import get_module_logger

logger = get_module_logger("TrackLogConfig")

DEFAULTS: Dict[str, Any] = {
    # File decoding
    "encoding": DEFAULT_ENCODING,
    "errors": "strict",

    # Logging
    "log_level": "info",
    "log_file": None,
    "console_output": True,
}


@dataclass(slots=True)
class TrackLogConfig:
    """Settings used when opening track-log files."""

    # File decoding
    encoding: str = DEFAULT_ENCODING
    errors: str = "strict"

    # Logging
    log_level: str = "info"
    log_file: Optional[Path] = None
    console_output: bool = True

    @classmethod
    def load(
        cls, config_path: Optional[Union[str, Path]] = None, args: Any = None
    ) -> "TrackLogConfig":
        """Build config from an optional config file with CLI overrides."""
        values = dict(DEFAULTS)
        if config_path is not None:
            values = ConfigLoader.load(Path(config_path), defaults=DEFAULTS, strict=True)

        known = {f.name for f in fields(cls)}
        config = cls(**{key: value for key, value in values.items() if key in known})
        if config.log_file is not None:
            config.log_file = Path(config.log_file)

        # Apply CLI argument overrides if provided
        if args is not None:
            config = config._apply_args_override(args)

        logger.debug("Resolved config: %s", config)
        return config

    def _apply_args_override(self, args: Any) -> "TrackLogConfig":
        """Apply CLI argument overrides to config values."""
        values = asdict(self)

        arg_mappings = {
            "encoding": "encoding",
            "log_level": "log_level",
            "log_file": "log_file",
            "console_output": "console_output",
        }

        for arg_name, config_key in arg_mappings.items():
            if hasattr(args, arg_name):
                val = getattr(args, arg_name)
                if val is not None:
                    values[config_key] = val

        return TrackLogConfig(**values)

    def to_dict(self) -> dict[str, Any]:
        """Export config values as dictionary."""
        return asdict(self)


__all__ = ["DEFAULTS", "TrackLogConfig"]
