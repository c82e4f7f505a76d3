"""
trello2pivotal package.

Converts a Trello board export (JSON) into a Pivotal Tracker story import (CSV).
"""

from .pivotal.converter import TrelloToPivotalConverter  # noqa: F401

__all__ = ["TrelloToPivotalConverter"]
