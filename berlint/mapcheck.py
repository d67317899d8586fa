"""Loading and validating ``.ber`` maps.

A map is a rectangle of characters. ``1`` is a wall, ``C`` a collectible,
``E`` the exit and ``P`` the starting point. Every other character is
walkable floor. A valid map is closed by walls and has one start, one exit
and at least one collectible. Every collectible and the exit must be
reachable from the start.
"""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, List, Sequence, Set, Tuple, Union

from .errors import ErrorKind, MapError
from .lines import LineReader

MAP_EXTENSION = ".ber"
MAX_DIMENSION = 100

WALL = "1"
COLLECTIBLE = "C"
EXIT = "E"
START = "P"
OBJECTS = COLLECTIBLE + EXIT + START

Position = Tuple[int, int]
PathType = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class MapInfo:
    """A validated map: its rows and the (row, column) of the start."""

    rows: Tuple[str, ...]
    start: Position

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def collectibles(self) -> int:
        return sum(row.count(COLLECTIBLE) for row in self.rows)


def str_end_with(text: str, pattern: str) -> bool:
    """Return True if ``text`` ends with ``pattern``."""
    if len(pattern) > len(text):
        return False
    return text.endswith(pattern)


def read_map_lines(path: PathType) -> List[str]:
    """Read the lines of a map file, each ending with a newline.

    A missing newline on the last line is added. Raises ``MapError`` with
    ``OPEN_FAILED`` when the file cannot be read.
    """
    try:
        with open(path, "rb") as stream:
            lines = [line.decode("latin-1") for line in LineReader(stream)]
    except OSError as exc:
        raise MapError(ErrorKind.OPEN_FAILED) from exc
    if lines and not str_end_with(lines[-1], "\n"):
        lines[-1] += "\n"
    return lines


def parse_map(lines: Iterable[str]) -> List[str]:
    """Turn raw lines into map rows by dropping one trailing newline each."""
    return [line[:-1] if line.endswith("\n") else line for line in lines]


def is_rectangle(rows: Sequence[str]) -> bool:
    """Return True if there is at least one row and all rows share a length."""
    if not rows:
        return False
    width = len(rows[0])
    return all(len(row) == width for row in rows)


def properly_walled(rows: Sequence[str], width: int) -> bool:
    """Return True if the first and last rows and the side columns are walls."""
    if not rows:
        return False
    last = len(rows) - 1
    for index, row in enumerate(rows):
        if index in (0, last):
            if any(char != WALL for char in row):
                return False
        elif row[:1] != WALL or row[width - 1:width] != WALL or width == 0:
            return False
    return True


def check_counts(collectibles: int, exits: int, starts: int) -> ErrorKind:
    """Check how many collectibles, exits and starts a map holds."""
    if collectibles < 1:
        return ErrorKind.NO_COLLECTIBLE
    if starts < 1:
        return ErrorKind.NO_START
    if starts > 1:
        return ErrorKind.TOO_MANY_STARTS
    if exits < 1:
        return ErrorKind.NO_EXIT
    if exits > 1:
        return ErrorKind.TOO_MANY_EXITS
    return ErrorKind.NO_ERROR


def flood_fill(rows: Sequence[str], start: Position) -> Set[Position]:
    """Return every non-wall cell reachable from ``start`` by orthogonal steps."""

    def open_cell(position: Position) -> bool:
        row, col = position
        return (
            0 <= row < len(rows)
            and 0 <= col < len(rows[row])
            and rows[row][col] != WALL
        )

    if not open_cell(start):
        return set()
    seen = {start}
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        for neighbour in ((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)):
            if neighbour not in seen and open_cell(neighbour):
                seen.add(neighbour)
                queue.append(neighbour)
    return seen


def check_reachable(rows: Sequence[str], start: Position) -> ErrorKind:
    """Check that every collectible, exit and start is reachable from ``start``."""
    reached = flood_fill(rows, start)
    missing = Counter(
        char
        for row_index, row in enumerate(rows)
        for col_index, char in enumerate(row)
        if char in OBJECTS and (row_index, col_index) not in reached
    )
    if not missing:
        return ErrorKind.NO_ERROR
    if missing[COLLECTIBLE]:
        return ErrorKind.UNREACHABLE_COLLECTIBLE
    if missing[EXIT]:
        return ErrorKind.UNREACHABLE_EXIT
    return ErrorKind.UNKNOWN


def _find_start(rows: Sequence[str]) -> Position:
    start = (0, 0)
    for row_index, row in enumerate(rows):
        for col_index, char in enumerate(row):
            if char == START:
                start = (row_index, col_index)
    return start


def validate_map(rows: Sequence[str]) -> MapInfo:
    """Validate map rows and return the map, or raise ``MapError``."""
    rows = list(rows)
    if not is_rectangle(rows):
        raise MapError(ErrorKind.BAD_SHAPE)
    width = len(rows[0])
    if not properly_walled(rows, width):
        raise MapError(ErrorKind.BAD_WALL)
    if width > MAX_DIMENSION or len(rows) > MAX_DIMENSION:
        raise MapError(ErrorKind.TOO_LARGE)
    counts = Counter(char for row in rows for char in row if char in OBJECTS)
    kind = check_counts(counts[COLLECTIBLE], counts[EXIT], counts[START])
    if kind is not ErrorKind.NO_ERROR:
        raise MapError(kind)
    start = _find_start(rows)
    kind = check_reachable(rows, start)
    if kind is not ErrorKind.NO_ERROR:
        raise MapError(kind)
    return MapInfo(tuple(rows), start)


def load_map(path: PathType) -> MapInfo:
    """Read and validate the ``.ber`` map at ``path``."""
    if not str_end_with(str(path), MAP_EXTENSION):
        raise MapError(ErrorKind.BAD_EXTENSION)
    return validate_map(parse_map(read_map_lines(path)))