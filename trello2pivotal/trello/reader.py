"""
Read and parse a Trello board export.

The export is loaded whole: read the bytes, validate them into a
``TrelloBoard``, and log a short summary of what the board contains.
"""

import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..exceptions import BoardParseError, BoardReadError
from .models import TrelloBoard

logger = logging.getLogger(__name__)


def read_content(path: Union[str, Path]) -> bytes:
    """Read the raw export; an empty file is an error."""
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise BoardReadError(f"Could not read Trello .JSON file: {path} ({exc})") from exc

    if not content:
        raise BoardReadError(f"Trello .JSON file was empty: {path}")

    logger.info(f"Did read {len(content):,} bytes from Trello .JSON file: {path}")
    return content


def parse_board(content: Union[bytes, str]) -> TrelloBoard:
    """Validate raw export content into a board."""
    try:
        board = TrelloBoard.model_validate_json(content)
    except ValidationError as exc:
        if any(error["type"] == "json_invalid" for error in exc.errors()):
            raise BoardParseError(f"Trello board input was not valid JSON: {exc}") from exc
        raise BoardParseError(f"Trello board input was not a valid board export: {exc}") from exc

    logger.info("Did parse Trello board from JSON.")
    return board


def log_board_details(board: TrelloBoard) -> None:
    """Log string attributes and collection sizes of the board."""
    logger.info("Trello Board Details:")
    for key, value in board:
        if isinstance(value, str):
            logger.info(f"  {key}: {value}")
        elif isinstance(value, list) and value:
            logger.info(f"  {key}({len(value)})")


def load_board(path: Union[str, Path]) -> TrelloBoard:
    board = parse_board(read_content(path))
    log_board_details(board)
    return board
