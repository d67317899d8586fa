# berlint

`berlint` checks `.ber` tile maps, the plain-text level files used by small
top-down collect-and-escape puzzle games.

A map is a rectangle of characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `C`  | collectible  |
| `E`  | exit         |
| `P`  | player start |

Any other character is treated as walkable floor; `0` is the usual choice.

```
1111111
1P0C0E1
1111111
```

## What is checked

The checks run in this order, and the first one that fails is reported:

1. the file name ends in `.ber`;
2. the file can be opened and read;
3. there is at least one row and every row has the same width (a missing
   newline on the last line is tolerated);
4. the first and last rows are all walls, and every other row starts and
   ends with a wall;
5. the map is at most 100 columns wide and 100 rows high;
6. there is at least one collectible, exactly one start and exactly one exit;
7. every collectible and the exit can be reached from the start by steps up,
   down, left and right through cells that are not walls.

Characters are not checked against a fixed set, so a map holding unexpected
letters is not rejected for that reason.

## Installation

```
pip install .
```

## Command line

```
berlint path/to/level.ber
```

Call it with exactly one argument, the path of the map. Otherwise it prints
`usage: berlint <PATH_TO_MAP>` on standard error and exits with status 1.

When the map is rejected, the tool writes `Error` followed by a one-line
reason to standard error, for example:

```
Error
The Map contains a not reachable exit
```

A valid map produces no output. In both cases the exit status is 0; only a
wrong number of arguments gives a non-zero status.

## Library use

```python
from berlint.errors import MapError
from berlint.mapcheck import load_map, validate_map

try:
    info = load_map("levels/first.ber")
except MapError as err:
    print(err.kind, err.kind.message())
else:
    print(info.width, info.height, info.start, info.collectibles)
```

- `berlint.mapcheck.load_map(path)` reads and validates a file and returns a
  `MapInfo` with the `rows`, the `start` position as `(row, column)`, and
  the `width`, `height` and `collectibles` properties.
- `validate_map(rows)` runs the same checks on rows already in memory.
- `read_map_lines(path)` and `parse_map(lines)` do the reading part alone;
  `is_rectangle`, `properly_walled`, `check_counts`, `flood_fill` and
  `check_reachable` are the individual checks.
- `berlint.errors.ErrorKind` lists every reason for rejection, with
  `message()` giving its text; `MapError.kind` holds it, and
  `format_error(kind)` returns the full text the command writes.

The package also has a few small helpers:

- `berlint.lines.LineReader` reads a text or binary stream in fixed-size
  chunks and returns one line at a time, keeping newlines;
- `berlint.textutil` holds string helpers such as `atoi`, `atol`, `split`,
  `strtrim`, `itoa` and `strnstr`;
- `berlint.printf` has `sprintf` and `printf`, a small `%`-style formatter
  for the `c`, `s`, `d`, `i`, `u`, `x`, `X` and `p` conversions, and
  `format_base`;
- `berlint.hashmap.HashMap` is an open-addressing map keyed by fixed-size
  byte strings, with `insert`, `get`, `remove`, `clear` and `render`.

## What it does not do

`berlint` only validates maps. It does not open a window, draw the map or
let anyone play a level.

## Running the tests

```
pip install .[test]
pytest
```