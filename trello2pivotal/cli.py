"""
Convert a Trello board export (.json) into a Pivotal Tracker import (.csv).

Usage:
    trello2pivotal board.json stories.csv
    trello2pivotal board.json stories.csv --log-file convert.log --log-level DEBUG
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .config import ConverterSettings, normalize_log_level
from .exceptions import BoardParseError, BoardReadError, ConfigurationError, OutputWriteError
from .pivotal.converter import TrelloToPivotalConverter

logger = logging.getLogger("trello2pivotal")


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """Configure logging with console output and an optional log file."""
    logger.setLevel(logging.DEBUG)
    logger.handlers = []  # Clear any existing handlers

    console = logging.StreamHandler()
    console.setLevel(level.upper())
    console.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
        ))
        logger.addHandler(file_handler)

    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert a Trello board export (.json) into a Pivotal Tracker import (.csv)."
    )
    parser.add_argument("source", nargs="?", help="Trello .JSON export to read (defaults to TRELLO2PIVOTAL_SOURCE_PATH).")
    parser.add_argument("target", nargs="?", help="Pivotal Tracker .CSV to write (defaults to TRELLO2PIVOTAL_TARGET_PATH).")
    parser.add_argument("--env-file", help="Load settings from this .env file.")
    parser.add_argument("--log-level", help="Console log level (default: INFO).")
    parser.add_argument("--log-file", help="Also write a DEBUG log to this file.")
    return parser


def load_settings(args: argparse.Namespace) -> ConverterSettings:
    """Settings from the environment / .env file, overridden by command-line values."""
    try:
        settings = ConverterSettings()
        overrides = {}
        if args.source:
            overrides["source_path"] = Path(args.source)
        if args.target:
            overrides["target_path"] = Path(args.target)
        if args.log_level:
            overrides["log_level"] = normalize_log_level(args.log_level)
        if args.log_file:
            overrides["log_file"] = Path(args.log_file)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
    return settings.model_copy(update=overrides)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.env_file:
        load_dotenv(args.env_file, override=True)

    try:
        settings = load_settings(args)
    except ConfigurationError as exc:
        setup_logging()
        logger.error(f"Error! {exc}")
        return 2

    setup_logging(settings.log_level, settings.log_file)

    try:
        converter = TrelloToPivotalConverter.from_settings(settings)
        converter.run()
    except ConfigurationError as exc:
        logger.error(f"Error! {exc}")
        return 2
    except (BoardReadError, BoardParseError, OutputWriteError) as exc:
        logger.error(f"Error! {exc}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
