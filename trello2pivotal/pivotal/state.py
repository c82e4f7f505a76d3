"""
Pivotal Tracker story state for a Trello card.

Labels are checked first, then the card's list:

- label "done" -- Accepted
- label "started", "on stage" or "on dev" -- Started
- list named "done" or "released" -- Accepted
- list is closed -- Accepted
- list named "review" -- Delivered (Started for a Chore, which cannot be delivered)
- list named "active" or "started" -- Started
- list named "ready" -- Unstarted
- list named "backlog" or "icebox" -- Unscheduled
- otherwise Accepted if the card is closed, else Unscheduled
"""

from typing import Iterable, Optional

from .models import StoryState, StoryType

LABEL_STATES = {
    "done": StoryState.ACCEPTED,
    "started": StoryState.STARTED,
    "on stage": StoryState.STARTED,
    "on dev": StoryState.STARTED,
}


def state_from_labels(label_names: Iterable[str]) -> Optional[StoryState]:
    for name in label_names:
        if not name:
            continue
        state = LABEL_STATES.get(name.lower())
        if state is not None:
            return state
    return None


def state_from_list(list_name: str, list_closed: bool, story_type: StoryType) -> Optional[StoryState]:
    name = list_name.lower()
    if "done" in name or "released" in name:
        return StoryState.ACCEPTED
    if list_closed:
        return StoryState.ACCEPTED
    if "review" in name:
        return StoryState.STARTED if story_type == StoryType.CHORE else StoryState.DELIVERED
    if "active" in name or "started" in name:
        return StoryState.STARTED
    if "ready" in name:
        return StoryState.UNSTARTED
    if "backlog" in name or "icebox" in name:
        return StoryState.UNSCHEDULED
    return None


def classify_state(
    label_names: Iterable[str],
    list_name: str,
    list_closed: bool,
    card_closed: bool,
    story_type: StoryType,
) -> StoryState:
    state = state_from_labels(label_names)
    if state is None:
        state = state_from_list(list_name, list_closed, story_type)
    if state is None:
        state = StoryState.ACCEPTED if card_closed else StoryState.UNSCHEDULED
    return state
