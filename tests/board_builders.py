"""Builders for small Trello board exports used across the tests."""

import json
from pathlib import Path
from typing import Any, Dict, Optional


def make_card(card_id: str = "card1", **fields: Any) -> Dict[str, Any]:
    card = {
        "id": card_id,
        "name": f"Card {card_id}",
        "desc": "",
        "url": f"https://trello.com/c/{card_id}",
        "attachments": [],
        "idList": "list1",
        "idLabels": [],
        "idMembers": [],
        "due": None,
        "closed": False,
        "dateLastActivity": "2021-07-07T14:03:09.123Z",
    }
    card.update(fields)
    return card


def make_comment(
    action_id: str,
    card_id: str,
    date: str,
    text: str,
    author: Optional[str] = "Ada Lovelace",
) -> Dict[str, Any]:
    action = {
        "id": action_id,
        "type": "commentCard",
        "date": date,
        "data": {"text": text, "card": {"id": card_id, "name": "whatever"}},
    }
    if author is not None:
        action["memberCreator"] = {"id": "m-author", "fullName": author}
    return action


def make_board(**collections: Any) -> Dict[str, Any]:
    board = {
        "id": "board1",
        "name": "Test Board",
        "url": "https://trello.com/b/board1",
        "cards": [],
        "lists": [{"id": "list1", "name": "Backlog", "closed": False}],
        "labels": [],
        "checklists": [],
        "actions": [],
        "members": [],
    }
    board.update(collections)
    return board


def write_board(path: Path, board: Dict[str, Any]) -> Path:
    path.write_text(json.dumps(board), encoding="utf-8")
    return path
