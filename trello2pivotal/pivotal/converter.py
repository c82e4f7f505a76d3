"""
Trello board export -> Pivotal Tracker story import.

Cards become stories, written in board order; every list is then written as
an epic. The board is read and indexed once when the converter is created,
and nothing is written until ``run()`` is called.
"""

import logging
from pathlib import Path
from typing import Any, Iterator, List, Optional, Union

from ..config import ConverterSettings
from ..exceptions import ConfigurationError
from ..trello.indexer import BoardIndex
from ..trello.models import TrelloBoard, TrelloCard, TrelloList
from ..trello.reader import load_board
from . import extractors
from .layout import FIXED_COLUMNS, HeaderSizer
from .models import StoryType
from .state import classify_state
from .writer import PivotalCsvWriter

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class TrelloToPivotalConverter:
    def __init__(self, source_path: Optional[PathLike], target_path: Optional[PathLike]) -> None:
        logger.info("-=[ trello2pivotal ]=-")

        if not source_path or not str(source_path).strip():
            raise ConfigurationError("Must specify path to read Trello .JSON file.")
        if not target_path or not str(target_path).strip():
            raise ConfigurationError("Must specify path to write Pivotal Tracker .CSV file.")

        self.source_path = Path(source_path)
        self.target_path = Path(target_path)

        self.board: TrelloBoard = load_board(self.source_path)
        self.index = BoardIndex.from_board(self.board)
        self.sizer = HeaderSizer(self.board.cards, self.index)
        self.rows_written = 0

    @classmethod
    def from_settings(cls, settings: ConverterSettings) -> "TrelloToPivotalConverter":
        return cls(settings.source_path, settings.target_path)

    def build_card_row(self, card: TrelloCard) -> List[Any]:
        """One story row: fixed columns, then task pairs, owners and comments."""
        tasks = extractors.card_tasks(card, self.index)
        comments = extractors.card_comments(card, self.index)
        owners = extractors.card_owners(card, self.index)
        labels = extractors.card_labels(card, self.index)
        story_type = extractors.card_type(labels)

        trello_list = self.index.list_for(card.id_list)
        state = classify_state(
            label_names=[self.index.label_name(label_id) for label_id in card.id_labels],
            list_name=(trello_list.name or "") if trello_list else "",
            list_closed=trello_list.closed if trello_list else False,
            card_closed=card.closed,
            story_type=story_type,
        )

        row: List[Any] = [
            extractors.card_title(card),
            story_type.value,
            extractors.card_description(card),
            labels,
            state.value,
            extractors.card_created_at(card, state),
            extractors.card_accepted_at(card, state),
            extractors.ESTIMATE,
        ]
        for task_name, status in extractors.pad_to_width(tasks, self.sizer.max_task_slots, ("", "")):
            row.extend([task_name, status])
        row.extend(extractors.pad_to_width(owners, self.sizer.owner_slot_count()))
        row.extend(extractors.pad_to_width(comments, self.sizer.comment_slot_count()))
        return row

    def build_epic_row(self, trello_list: TrelloList) -> List[Any]:
        """A list as an epic: no state, no dates, and every repeated slot empty."""
        name = trello_list.name or ""
        row: List[Any] = [
            name,
            StoryType.EPIC.value,
            name,
            "",
            "",
            "",
            "",
            extractors.ESTIMATE,
        ]
        row.extend(extractors.pad_to_width([], self.sizer.width - len(FIXED_COLUMNS)))
        return row

    def iter_rows(self) -> Iterator[List[Any]]:
        for card in self.board.cards:
            yield self.build_card_row(card)
        for trello_list in self.board.lists:
            yield self.build_epic_row(trello_list)

    def run(self) -> int:
        """Write the CSV and return the number of data rows written."""
        column_names = self.sizer.column_names()
        with PivotalCsvWriter(self.target_path, column_names) as writer:
            for row in self.iter_rows():
                writer.write_row(row)
        self.rows_written = writer.rows_written

        logger.info(f"Wrote {self.rows_written} rows to CSV file.")
        return self.rows_written
