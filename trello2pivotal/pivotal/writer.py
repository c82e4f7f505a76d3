import csv
import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence, TextIO, Union

from ..exceptions import OutputWriteError, RowWidthError

logger = logging.getLogger(__name__)


class PivotalCsvWriter:
    """
    Writes the Pivotal Tracker CSV: the header once, then one row per call.

    Header names repeat, so rows are plain sequences matched by position and
    every row must be exactly as wide as the header.
    """

    def __init__(self, path: Union[str, Path], column_names: Sequence[str]) -> None:
        self.path = Path(path)
        self.column_names: List[str] = list(column_names)
        self.rows_written = 0
        try:
            self._file: Optional[TextIO] = open(self.path, "w", encoding="utf-8", newline="")
        except OSError as exc:
            raise OutputWriteError(f"Could not open Pivotal Tracker .CSV file for writing: {self.path} ({exc})") from exc
        self._writer = csv.writer(self._file)
        self._writer.writerow(self.column_names)

    def write_row(self, values: Sequence[Any]) -> None:
        if self._file is None:
            raise ValueError(f"CSV writer for {self.path} is closed")
        if len(values) != len(self.column_names):
            raise RowWidthError(
                f"Row has {len(values)} columns but the header has {len(self.column_names)}"
            )
        self._writer.writerow(values)
        self.rows_written += 1

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            logger.debug(f"Closed CSV file: {self.path}")

    def __enter__(self) -> "PivotalCsvWriter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
