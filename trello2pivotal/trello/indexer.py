import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .models import (
    TrelloAction,
    TrelloBoard,
    TrelloChecklist,
    TrelloLabel,
    TrelloList,
    TrelloMember,
)

logger = logging.getLogger(__name__)

INDEXED_ATTRIBUTES = ("checklists", "labels", "lists", "actions", "members")

COMMENT_ACTION_TYPE = "commentCard"
UNKNOWN_MEMBER = "Unknown"
UNNAMED_LABEL = "unnamed"


def index_by_id(board: TrelloBoard, attr: str) -> dict:
    """Map each item of ``board.<attr>`` by id; a repeated id keeps the last item."""
    if attr not in INDEXED_ATTRIBUTES:
        raise ValueError(f"Cannot index board attribute: {attr}")

    keyed = {item.id: item for item in getattr(board, attr)}
    logger.info(f"Indexed {len(keyed)} {attr}.")
    return keyed


@dataclass(frozen=True)
class BoardIndex:
    """Id lookups over a board, built once before any row is written."""

    checklists: Dict[str, TrelloChecklist]
    labels: Dict[str, TrelloLabel]
    lists: Dict[str, TrelloList]
    actions: Dict[str, TrelloAction]
    members: Dict[str, TrelloMember]
    checklists_by_card: Dict[str, List[TrelloChecklist]] = field(default_factory=dict)
    comments_by_card: Dict[str, List[TrelloAction]] = field(default_factory=dict)

    @classmethod
    def from_board(cls, board: TrelloBoard) -> "BoardIndex":
        checklists = index_by_id(board, "checklists")
        actions = index_by_id(board, "actions")

        checklists_by_card: Dict[str, List[TrelloChecklist]] = {}
        for checklist in checklists.values():
            if checklist.id_card:
                checklists_by_card.setdefault(checklist.id_card, []).append(checklist)

        comments_by_card: Dict[str, List[TrelloAction]] = {}
        for action in actions.values():
            if action.type == COMMENT_ACTION_TYPE and action.card_id:
                comments_by_card.setdefault(action.card_id, []).append(action)

        return cls(
            checklists=checklists,
            labels=index_by_id(board, "labels"),
            lists=index_by_id(board, "lists"),
            actions=actions,
            members=index_by_id(board, "members"),
            checklists_by_card=checklists_by_card,
            comments_by_card=comments_by_card,
        )

    def checklists_for(self, card_id: str) -> List[TrelloChecklist]:
        return self.checklists_by_card.get(card_id, [])

    def comments_for(self, card_id: str) -> List[TrelloAction]:
        return self.comments_by_card.get(card_id, [])

    def list_for(self, list_id: Optional[str]) -> Optional[TrelloList]:
        if list_id is None:
            return None
        return self.lists.get(list_id)

    def label_name(self, label_id: str) -> str:
        """
        Name of a label, "unnamed" when the label is unknown or has no name key.

        A colour-only label exported with an empty or null name returns "",
        which callers skip.
        """
        label = self.labels.get(label_id)
        if label is None or "name" not in label.model_fields_set:
            return UNNAMED_LABEL
        return label.name or ""

    def member_name(self, member_id: str) -> str:
        member = self.members.get(member_id)
        if member is None or member.full_name is None:
            return UNKNOWN_MEMBER
        return member.full_name
