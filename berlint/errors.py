"""Map validation error kinds and their user-facing messages."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Every reason a map can be rejected or the program can fail."""

    NO_ERROR = 0
    BAD_EXTENSION = 1
    BAD_WALL = 2
    BAD_CHAR = 3
    BAD_SHAPE = 4
    NO_START = 5
    TOO_MANY_STARTS = 6
    NO_COLLECTIBLE = 7
    NO_EXIT = 8
    TOO_MANY_EXITS = 9
    UNREACHABLE_COLLECTIBLE = 10
    UNREACHABLE_EXIT = 11
    TOO_LARGE = 12
    OPEN_FAILED = 13
    OUT_OF_MEMORY = 14
    UNKNOWN = 15

    def message(self) -> str:
        """Return the message shown for this kind, ending with a newline."""
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.NO_ERROR: (
        "WTF an error has been" "thrown, but no error was detected\n"
    ),
    ErrorKind.BAD_EXTENSION: "the map provided is not a .ber file\n",
    ErrorKind.BAD_WALL: "The wall hasn't been properly walled\n",
    ErrorKind.BAD_CHAR: "An unrecognize character has been found\n",
    ErrorKind.BAD_SHAPE: "The Map is not a rectangle\n",
    ErrorKind.NO_START: "The Map contains no starting point\n",
    ErrorKind.TOO_MANY_STARTS: "The map cointains too much starting point\n",
    ErrorKind.NO_COLLECTIBLE: "The Map contains no collectible\n",
    ErrorKind.NO_EXIT: "The Map contains no exit\n",
    ErrorKind.TOO_MANY_EXITS: "The map contain too much finish\n",
    ErrorKind.UNREACHABLE_COLLECTIBLE: (
        "The Map contains a not reachable collectible\n"
    ),
    ErrorKind.UNREACHABLE_EXIT: "The Map contains a not reachable exit\n",
    ErrorKind.TOO_LARGE: (
        "The map is limited to 100 * 100 du to stack limitation\n"
    ),
    ErrorKind.OPEN_FAILED: "A file couldn't be opened\n",
    ErrorKind.OUT_OF_MEMORY: "Erreur malloc\n",
    ErrorKind.UNKNOWN: (
        "WTF bro, you're giving an unknown error,"
        "do you know how to code?\n"
    ),
}


class MapError(Exception):
    """Raised when a map cannot be loaded or is invalid."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message().rstrip("\n"))
        self.kind = kind


def format_error(kind: ErrorKind) -> str:
    """Return the full diagnostic text written to standard error for ``kind``."""
    if not isinstance(kind, ErrorKind):
        kind = ErrorKind.UNKNOWN
    return "Error\n" + kind.message()