from __future__ import annotations

import argparse
from pathlib import Path

from visiontac.config import TrackLogConfig
from visiontac.core.logging_config import LOG_LEVELS, configure_logging


def add_common_cli_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional key=value configuration file (CLI arguments take precedence)",
    )

    parser.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS.keys()),
        default=None,
        help="Logging verbosity (default: info)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Optional path to write logs to",
    )

    parser.add_argument(
        "--encoding",
        type=str,
        default=None,
        help="Text encoding of the track-log files (default: ascii)",
    )

    console_group = parser.add_mutually_exclusive_group()
    console_group.add_argument(
        "--console",
        dest="console_output",
        action="store_true",
        default=None,
        help="Log to the console (default)",
    )
    console_group.add_argument(
        "--no-console",
        dest="console_output",
        action="store_false",
        help="Log to file only (no console output)",
    )


def setup_logging_from_config(config: TrackLogConfig) -> None:
    configure_logging(
        config.log_level,
        console=config.console_output,
        log_file=config.log_file,
    )


__all__ = ["LOG_LEVELS", "add_common_cli_arguments", "setup_logging_from_config"]
