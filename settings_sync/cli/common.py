from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from settings_sync.core.logging_config import configure_logging
from settings_sync.core.paths import default_settings_root


LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

TRUE_WORDS = {"1", "true", "yes", "on"}
FALSE_WORDS = {"0", "false", "no", "off"}


def add_common_cli_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--settings-dir",
        type=Path,
        default=None,
        help=f"Root folder of the settings files (default: {default_settings_root()})",
    )

    parser.add_argument(
        "--subfolder",
        type=str,
        default="",
        help="Optional subfolder placed in front of the module name",
    )

    parser.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS.keys()),
        default="warning",
        help="Logging verbosity",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Optional path to write logs to (rotated)",
    )

    parser.add_argument(
        "--camera",
        dest="cameras",
        action="append",
        default=[],
        metavar="NAME",
        help="Name of a connected camera (repeat for several)",
    )

    parser.add_argument(
        "--microphone",
        dest="microphones",
        action="append",
        default=[],
        metavar="NAME",
        help="Name of a connected microphone (repeat for several)",
    )

    parser.add_argument(
        "--no-notify",
        action="store_true",
        help="Do not print settings notifications on stdout",
    )


def configure_from_args(args: Any) -> None:
    configure_logging(
        LOG_LEVELS.get(getattr(args, "log_level", "warning"), logging.WARNING),
        force=True,
        log_file=getattr(args, "log_file", None),
    )


def parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in TRUE_WORDS:
        return True
    if normalized in FALSE_WORDS:
        return False
    raise ValueError(f"Expected a boolean, got '{value}'")


__all__ = [
    "LOG_LEVELS",
    "add_common_cli_arguments",
    "configure_from_args",
    "parse_bool",
]
