# textareas

Small building blocks for describing labelled boxes, and a helper for checking what a piece of code prints.

## Modules

- `textareas.geometry.Rectangle` is a dataclass with `x`, `y`, `width` and `height`, all defaulting to 0. `overlaps(other)` returns True when the interiors of the two rectangles intersect. Rectangles that only touch at an edge do not overlap.
- `textareas.colour.RGB` is a dataclass with `r`, `g` and `b` channels, all defaulting to 0.
  - `RGB.from_colour(value)` unpacks a `0xRRGGBB` integer.
  - The `colour` property packs the channels back into an integer. Assigning to it unpacks a new value into the channels.
  - `white()`, `black()`, `red()`, `green()` and `blue()` are named constructors.
  - `describe()` returns a short listing of the three channels.
- `textareas.textarea.TextArea` is a dataclass with these fields:
  - `dimensions`, a `Rectangle`.
  - `id` and `label`.
  - `fill` and `border` colours. Each may be given as an `RGB` or as a packed integer, and each defaults to black.

  The rectangle and colours passed in are copied. `TextArea.from_bounds(x, y, width, height, id, label, fill, border)` builds an area from numbers. The properties `x`, `y`, `width`, `height` and `text` read and write through to the dimensions and label. The methods are:
  - `set_position(x, y)`
  - `resize(width, height)`
  - `equals(id)`
  - `overlaps(other)`
  - `describe()`
- `textareas.checker` holds `OutputChecker` and two random-number helpers.
  - `OutputChecker.capture()` is a context manager. It collects everything printed inside the block, stores it in `output`, and then echoes it to standard output.
  - `find(needles)` returns the strings missing from the output.
  - `find_in_order(needles)` returns the strings not found after the previous match. After a miss, the search restarts from the beginning.
  - `confirm_absent(needles)` returns the strings that appear in the output but should not.
  - Each of these three methods also prints a line for every problem it finds.
  - `wait_for_enter(stream=None)` prompts and then reads one line.
  - `random_sample(count, limit)` returns `count` distinct integers from `0` to `limit - 1`.
  - `random_int(start, stop)` returns one integer from `start` to `stop - 1`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Example

```python
from textareas.checker import OutputChecker
from textareas.geometry import Rectangle
from textareas.textarea import TextArea

first = TextArea(Rectangle(1, 2, 3, 4), "id1", "content1")
second = TextArea.from_bounds(2, 3, 5, 5, "id2", "content2", 0xFFFFFF, 0xFF0000)
print(first.overlaps(second))  # True

checker = OutputChecker()
with checker.capture():
    print(first.describe())
    print(second.describe())
assert checker.find_in_order(["id1", "id2"]) == []
```

## What this package does not do

- It has no collection type for holding a bounded, ordered list of text areas. Keep areas in an ordinary list if you need one.
- It does not draw text areas on screen.
- It installs no command-line program.