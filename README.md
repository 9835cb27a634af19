# recursia

Small building blocks for recursive-drawing demos and the console menu that
launches them:

- `recursia.geometry`: integer `Point`, `Rectangle` and `Vector2D` types with
  vector arithmetic.
- `recursia.chi_squared`: `is_close`, a chi-squared check that a random
  experiment follows a given distribution.
- `recursia.layout`: a real-valued `Bounds` rectangle, `fit_to_bounds`,
  `mollweide_projection_of`, `trim_extension_from` and `file_choices`.
- `recursia.console`: prompting helpers (`get_integer`, `get_yes_or_no`,
  `make_selection_from`, `make_file_selection`).
- `recursia.menu`: `HandlerRegistry`, `MenuConfig`, `MenuOption`,
  `demo_file_compare` and the `console_main` loop.

The package needs nothing beyond the standard library.

## Geometry

Points minus points give vectors; points plus vectors give points. Scaling or
dividing a vector truncates each component toward zero, so results stay
integers.

```python
from recursia.geometry import Point, Vector2D

apex = Point(10, 0)
base = Point(20, 10)
mid = apex + (base - apex) / 1.618   # Point(x=16, y=6)
print(mid)                           # { 16, 6 }
print(-Vector2D(3, 4) * 2)           # { -6, -8 }
```

`Rectangle(x, y, width, height)` prints as `{ x, y, width, height }`.

## Checking a random process

```python
import random
from recursia.chi_squared import is_close

print(is_close([0.5, 0.25, 0.25], lambda: random.choice([0, 0, 1, 2])))
```

The experiment is run 100,000 times and compared against the expected
distribution at a p-value of 1e-6. Zero-probability outcomes that occur make
the check fail outright. More than 250 outcomes, or an experiment result
outside `range(len(probabilities))`, raises `ValueError`. With zero or one
outcome the answer is always `True`.

## Layout helpers

```python
from recursia.layout import Bounds, fit_to_bounds, mollweide_projection_of

fitted = fit_to_bounds(Bounds(0, 0, 200, 100), 5 / 3)
x, y = mollweide_projection_of(latitude=45.0, longitude=90.0)
```

- `fit_to_bounds` returns the largest rectangle of the given aspect ratio
  centred in the bounds; bounds with no positive area collapse to zero size.
- `mollweide_projection_of` takes degrees (with optional longitude and
  latitude offsets) and returns coordinates in `[-2, 2] x [-1, 1]`.
- `file_choices(base_dir, default_option, predicate)` lists the default
  followed by the matching file names in the directory, ordered by name with
  the extension dropped.

## Console menu

Register demos with a `HandlerRegistry`, then hand it to `console_main`:

```python
from recursia.menu import HandlerRegistry, MenuConfig, console_main

config = MenuConfig(
    title="My Demos",
    menu_order=("Hello.py",),
    test_barriers={"Hello.py": frozenset({"greeting.py"})},
)

def failing(filenames):
    return []  # names of the files whose tests failed

registry = HandlerRegistry(config, barrier_check=failing)
registry.register("demos/Hello.py", 1, "Say hello", lambda: print("Hello!"))
console_main(registry)
```

Handlers from files not named in `menu_order` are kept but not shown. Menu
entries are ordered by their file's position in `menu_order`, then by file
name, then by line. A demo whose file has a test barrier first runs the
barrier check; if any file fails, the names are reported on standard error
and the demo is skipped after the user presses ENTER. `RECURSIA_CONFIG` is a
ready-made configuration titled "A Visit to Recursia".

## What the package does not do

There is no graphics window, canvas or drawing code here: the package does not
draw the flag, render text, or provide color or font types. It installs no
command; `console_main` runs only when you call it with a registry you have
filled in.

## Running the tests

Install the `test` extra and run `pytest` from the project root.