class Trello2PivotalError(Exception):
    """Base error for the converter."""


class ConfigurationError(Trello2PivotalError):
    """A required source or target path was not provided."""


class BoardReadError(Trello2PivotalError):
    """The Trello export could not be read, or was empty."""


class BoardParseError(Trello2PivotalError):
    """The Trello export was not valid JSON or not shaped like a board."""


class RowWidthError(Trello2PivotalError):
    """A row did not have the same number of columns as the header."""


class OutputWriteError(Trello2PivotalError):
    """The Pivotal Tracker .CSV could not be opened for writing."""
