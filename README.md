# advent2024

Solutions for days 16 to 25 of the 2024 puzzle calendar, with a small set of shared
helpers. The package uses only the standard library.

## Installing

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Shared helpers

- `advent2024.common`
  - Input loading: `read_input(day, filename, root)`, `example_input(day, number, root)`
    and `real_input(day, root)`. They read `day<NN>/<file>` below `root`, which is the
    current working directory when not given. A missing file raises `FileNotFoundError`
    and an empty file raises `ValueError`.
  - The `Day` enum.
  - Number parsing: `parse_int` (leading 32-bit integer, `ValueError` on failure),
    `try_parse_int` and `ctoi`.
  - `split`, which drops empty pieces, and `join`.
  - `check`, which raises `PuzzleAssertionError` when an internal invariant fails.
  - `time_execution`, which runs a function, prints the elapsed time and returns it as a
    `timedelta`.
- `advent2024.grid`: `Point`, `Vector`, `Direction` and a row-major character `Grid`.
  - `Grid.get` returns `None` off the grid, and indexing checks bounds.
  - Other methods are `set`, `with_mutation`, `adjacent_points`, `point_at`, `find` and
    `copy`.
  - `parse_grid(text)` builds a grid from lines of text.
- `advent2024.search`: `bfs(grid, start, end)` searches through `.` squares. It returns
  a map from each discovered point to its parent, or `None` when `end` is unreachable.
- `advent2024.tree`: `Tree` and `TreeNode`, whose nodes keep a weak link to their parent.
- `advent2024.puzzle`: `Puzzle(day, parse_input, part1, part2)`. `Puzzle.run(root)`
  parses the day's `input.txt`, runs both parts and returns a `PuzzleRunResult` with the
  time each stage took.

## Days

Every day module has `parse_input(text)`, which takes the puzzle text as a string.

| Module | Parts |
| --- | --- |
| `day16` | `part1`: cheapest maze score, where each turn costs 1000. `part2`: number of squares on any cheapest route. |
| `day17` | `Computer` runs the three-bit program. `part1`: the program output as comma-separated digits. `part2`: the lowest register A that makes the program print itself. |
| `day18` | `puzzle_part1` and `puzzle_part2` take a grid size and a byte count. `part1` and `part2` use 71 and 1024. `part2` returns the first blocking byte as a `Point`. |
| `day19` | `part1`: number of patterns that can be made. `part2`: total number of ways to make them. |
| `day20` | `cheat_savings` counts cheats by the time each saves. `part1` (cheat length 2) and `part2` (cheat length 20) count cheats saving at least 100. |
| `day21` | `part1` and `part2`: total code complexity through 2 and through 25 directional-keypad robots. |
| `day22` | `part1`: sum of each buyer's 2000th secret number. `part2`: most bananas from one change sequence. |
| `day23` | `part1`: triangles with a computer whose name starts with `t`. `part2`: the largest clique's names, sorted and comma-joined. |
| `day24` | `part1`: the number on the `z` wires. `part2`: see below. |
| `day25` | `part1`: number of key/lock pairs that fit. There is no second part. |

## Example

```python
from advent2024 import day22

parsed = day22.parse_input("1\n10\n100\n2024\n")
print(day22.part1(parsed))  # 37327623
```

## What it does not do

- There is no command-line program. You call the functions from Python.
- Puzzle inputs are not downloaded. You must supply them as text or as files on disk.
- `day24.part2` is not a general solver. It applies four output-wire swaps found by hand
  for one particular circuit: `z12`/`qdg`, `z19`/`vvf`, `fgn`/`dck` and `z37`/`nvh`. It
  then renames wires by their role in the adder, prints the operations in dependency
  order and returns them. On any other circuit it fails with `PuzzleAssertionError`.