from enum import Enum


class StoryType(str, Enum):
    BUG = "Bug"
    CHORE = "Chore"
    FEATURE = "Feature"
    EPIC = "epic"


class StoryState(str, Enum):
    UNSCHEDULED = "Unscheduled"
    UNSTARTED = "Unstarted"
    STARTED = "Started"
    DELIVERED = "Delivered"
    ACCEPTED = "Accepted"


class TaskStatus(str, Enum):
    COMPLETED = "completed"
    NOT_COMPLETED = "Not Completed"
