"""
Column layout of the Pivotal Tracker CSV.

Pivotal repeats the "Task", "Task Status", "Owned By" and "Comment" headers
once per value, so every row needs the same number of slots for each. Task
slots are sized from the busiest card on the board; owner and comment slots
are fixed.
"""

import logging
from functools import cached_property
from typing import List, Sequence

from ..trello.indexer import BoardIndex
from ..trello.models import TrelloCard

logger = logging.getLogger(__name__)

FIXED_COLUMNS = (
    "Title",
    "Type",
    "Description",
    "Labels",
    "Current State",
    "Created at",
    "Accepted at",
    "Estimate",
)
TASK_COLUMNS = ("Task", "Task Status")
OWNER_COLUMN = "Owned By"
COMMENT_COLUMN = "Comment"

OWNER_SLOTS = 10
COMMENT_SLOTS = 51


class HeaderSizer:
    def __init__(self, cards: Sequence[TrelloCard], index: BoardIndex) -> None:
        self.cards = cards
        self.index = index

    @cached_property
    def max_task_slots(self) -> int:
        """Most check-items on any one card, summed across the card's checklists."""
        max_tasks = 0
        for card in self.cards:
            total = sum(len(checklist.check_items) for checklist in self.index.checklists_for(card.id))
            max_tasks = max(max_tasks, total)
        logger.info(f"Will allocate {max_tasks} Task/Status column pairs.")
        return max_tasks

    def owner_slot_count(self) -> int:
        return OWNER_SLOTS

    def comment_slot_count(self) -> int:
        return COMMENT_SLOTS

    @property
    def width(self) -> int:
        return (
            len(FIXED_COLUMNS)
            + len(TASK_COLUMNS) * self.max_task_slots
            + self.owner_slot_count()
            + self.comment_slot_count()
        )

    def column_names(self) -> List[str]:
        names = list(FIXED_COLUMNS)
        names.extend(list(TASK_COLUMNS) * self.max_task_slots)
        names.extend([OWNER_COLUMN] * self.owner_slot_count())
        names.extend([COMMENT_COLUMN] * self.comment_slot_count())
        logger.info(f"Will allocate {len(names)} column names for CSV file.")
        return names
