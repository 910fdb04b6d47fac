# taskset

Three small tools in one package:

- **Search bar** (`taskset.searchbar`, `taskset.application`): stores queries in a
  trie and finds every stored query that starts with a given prefix. Text is
  lower-cased (Polish letters included), trimmed, and runs of spaces are
  collapsed into one. Queries are loaded from and saved to a text file, one
  query per line.
- **Triangle collision** (`taskset.collision`, `taskset.visualizer`): tells whether
  two triangles overlap or touch using the separating axis theorem, with an
  interactive pygame window for dragging and reshaping triangles.
- **Repeated operation** (`taskset.power`): combines `n` copies of a value with a
  binary operation using binary exponentiation.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `taskset-search [FILE]`

An interactive prompt. Each line is a command:

```
> add: Kiedy jest nowy rok w Chinach?
> add: Kiedy jest nowy rok w Tajlandii?
> ask: kiedy jest nowy rok w t
result: kiedy jest nowy rok w tajlandii?
>
```

- `add: <text>` stores an entry
- `ask: <prefix>` prints every stored entry starting with the prefix, one
  `result:` line each
- any other line prints a short (Polish) help text
- an empty line, or end of input, ends the program

Entries are read from `FILE` (default `date.txt`, created if missing) at start
and written back to it when the program ends. Saving goes through a temporary
file in the system temporary directory, which then replaces the data file.

### `taskset-triangles [--width W] [--height H] [--fps N]`

Opens a window (800×600 at 60 frames per second by default) with two triangles.

- Left-click inside a triangle and drag to move it.
- Left-click near a vertex and drag to move that vertex; a move is refused if
  the triangle's signed area would drop below 1000 (too small or flipped).
- Right-drag pans the view, the mouse wheel zooms (between 0.1× and 5×).
- The background colour changes while the two triangles collide.
- Closing the window or pressing Escape ends the program.

A display is required.

### `taskset-power`

Prints the result of concatenating `"Hello World "` with itself three times,
computed once with `calculate` and once by calling the operation directly.

## Library use

```python
from taskset.searchbar import SearchBar, normalize
from taskset.collision import Triangle, Vec2, is_colliding
from taskset.power import IntType, StringType, calculate

with SearchBar("") as bar:          # "" means no backing file
    bar.add_query("  HeLLo   WoRLd ")
    print(bar.search("hello"))      # ['hello world']

print(normalize("  TeST   CaSe  "))  # 'test case'

t1 = Triangle([Vec2(200, 150), Vec2(100, 350), Vec2(300, 350)])
t2 = Triangle([Vec2(250, 250), Vec2(150, 450), Vec2(350, 450)])
print(is_colliding(t1, t2))         # True

print(calculate(5, IntType(7), IntType.add).value)        # 35
print(calculate(2, StringType("ab"), StringType.add).value)  # 'abab'
```

### `taskset.searchbar`

- `SearchBar(file_path="data.txt")` loads queries from the file (creating it
  if it does not exist); an empty path keeps everything in memory.
- `add_query(text)` stores the normalized text; duplicates are stored once.
- `search(prefix)` returns every stored query beginning with the normalized
  prefix; `search("")` returns all of them.
- `save()` writes the queries to the file and raises `OSError` on failure;
  `close()` saves once and reports failures on stderr. Used as a context
  manager, the bar is closed on exit.

### `taskset.collision`

`Vec2`, `Triangle` (exactly three points; tuples are turned into `Vec2`,
otherwise `ValueError`), `compute_normal`, `is_separating_axis` and
`is_colliding`. Triangles that only touch at a point or edge count as colliding.

### `taskset.power`

`calculate(n, value, f)` needs the value's type to provide `identity()`
(otherwise `TypeError`) and raises `ValueError` when `n` is not positive.
`IntType` (addition) and `StringType` (concatenation) are provided.

### `taskset.visualizer`

`Visualizer(width, height, fps=60)` with `add_triangle`, `handle_input`,
`draw`, `should_close` and `close`; helpers `Camera`, `manhattan_distance`,
`signed_area` and `point_in_triangle`.