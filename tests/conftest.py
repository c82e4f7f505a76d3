from pathlib import Path
from typing import Any, Dict

import pytest

from board_builders import write_board


@pytest.fixture
def board_file(tmp_path: Path):
    """Write a board dict to ``board.json`` in a temp dir and return its path."""

    def _write(board: Dict[str, Any]) -> Path:
        return write_board(tmp_path / "board.json", board)

    return _write
