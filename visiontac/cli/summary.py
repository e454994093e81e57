"""``python -m visiontac``: parse track logs and log a one-line summary each."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from visiontac.cli.common import add_common_cli_arguments, setup_logging_from_config
from visiontac.config import TrackLogConfig
from visiontac.core.logging_utils import get_module_logger
from visiontac.errors import TrackLogError
from visiontac.parsers.stream_parser import open_track_log

logger = get_module_logger("Summary")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="visiontac",
        description="Parse Visiontac GPS track logs and report what they contain.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Track-log CSV files")
    add_common_cli_arguments(parser)
    return parser


def summarize_file(path: Path, config: TrackLogConfig) -> bool:
    """Parse ``path`` and log a summary. Returns False when parsing failed."""
    try:
        with open_track_log(path, config) as parser:
            records = parser.parse_all()
            layout = parser.layout
    except TrackLogError as e:
        logger.error("%s: %s", path, e)
        return False
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logger.error("%s: cannot read file: %s", path, e)
        return False

    if records:
        logger.info(
            "%s: %s layout, %d records, %s -> %s",
            path,
            layout.value,
            len(records),
            records[0].timestamp.isoformat(),
            records[-1].timestamp.isoformat(),
        )
    else:
        logger.info("%s: %s layout, no records", path, layout.value)
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    config = TrackLogConfig.load(args.config, args)
    try:
        setup_logging_from_config(config)
    except ValueError as e:
        parser.error(str(e))

    results: List[bool] = [summarize_file(path, config) for path in args.paths]
    return 0 if all(results) else 1


__all__ = ["build_parser", "main", "summarize_file"]
