"""
Column values for a Pivotal Tracker story, derived from a Trello card.

Every function here is pure: it reads a card (and the board index) and
returns the value of one CSV column, falling back to an empty string or a
default name when the export is sparse.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence, Tuple

from ..trello.indexer import UNKNOWN_MEMBER, BoardIndex
from ..trello.models import TrelloAction, TrelloCard, TrelloCheckItem
from .models import StoryState, StoryType, TaskStatus

ESTIMATE = 0

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def pad_to_width(values: Sequence[Any], width: int, fill: Any = "") -> List[Any]:
    """Truncate or pad ``values`` so exactly ``width`` slots are returned."""
    padded = list(values[:width])
    padded.extend([fill] * (width - len(padded)))
    return padded


def parse_trello_date(value: Optional[str]) -> Optional[datetime]:
    """Parse a Trello ISO-8601 timestamp such as ``2021-07-07T14:03:09.123Z`` into UTC."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def card_title(card: TrelloCard) -> str:
    return card.name


def card_description(card: TrelloCard) -> str:
    """Card description plus links back to the Trello card and its attachments."""
    description = f"{card.desc}\n\nImported from Trello Card: {card.url}"
    for attachment in card.attachments:
        description += f"\n\nAttachment: {attachment.url or ''}"
    return description


def card_labels(card: TrelloCard, index: BoardIndex) -> str:
    """
    Comma-separated Pivotal labels.

    Trello label names in card order, then the due date (day only) if the card
    has one, then the name of the card's list, which doubles as its epic.
    """
    labels = [name for name in (index.label_name(label_id) for label_id in card.id_labels) if name]

    if card.due:
        labels.append(card.due.split("T")[0])

    trello_list = index.list_for(card.id_list)
    if trello_list and trello_list.name:
        labels.append(trello_list.name)

    return ", ".join(labels)


def card_type(labels: str) -> StoryType:
    """Infer the story type from the rendered labels; "debt" outranks "bug"."""
    name = labels.lower()
    if "debt" in name:
        return StoryType.CHORE
    if "bug" in name:
        return StoryType.BUG
    return StoryType.FEATURE


def card_created_at(card: TrelloCard, state: StoryState) -> str:
    if state == StoryState.ACCEPTED:
        return ""
    return card.date_last_activity or ""


def card_accepted_at(card: TrelloCard, state: StoryState) -> str:
    if state == StoryState.ACCEPTED:
        return card.date_last_activity or ""
    return ""


def card_owners(card: TrelloCard, index: BoardIndex) -> List[str]:
    return [index.member_name(member_id) for member_id in card.id_members or []]


def card_checklist_items(card: TrelloCard, index: BoardIndex) -> List[TrelloCheckItem]:
    """All check-items of the card, checklist by checklist."""
    items: List[TrelloCheckItem] = []
    for checklist in index.checklists_for(card.id):
        items.extend(checklist.check_items)
    return items


def task_status(item: TrelloCheckItem) -> TaskStatus:
    if (item.state or "").strip().lower() == "complete":
        return TaskStatus.COMPLETED
    return TaskStatus.NOT_COMPLETED


def card_tasks(card: TrelloCard, index: BoardIndex) -> List[Tuple[str, str]]:
    return [(item.name or "", task_status(item).value) for item in card_checklist_items(card, index)]


def order_comments(comments: Sequence[TrelloAction]) -> List[TrelloAction]:
    """Newest first; comments with the same timestamp keep their board order."""
    return sorted(comments, key=lambda action: parse_trello_date(action.date) or _OLDEST, reverse=True)


def format_comment(action: TrelloAction) -> str:
    """Render a comment as ``text\\n*Created at: HH:MM:SS, Mon D, YYYY* (author - Mon D, YYYY)``."""
    text = action.data.text or ""
    created = parse_trello_date(action.date)
    if created is None:
        return text

    author = UNKNOWN_MEMBER
    if action.member_creator and action.member_creator.full_name:
        author = action.member_creator.full_name

    day = f"{MONTHS[created.month - 1]} {created.day}, {created.year}"
    return f"{text}\n*Created at: {created:%H:%M:%S}, {day}* ({author} - {day})"


def card_comments(card: TrelloCard, index: BoardIndex) -> List[str]:
    return [format_comment(action) for action in order_comments(index.comments_for(card.id))]
