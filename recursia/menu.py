"""Demo registry, menu construction and the console menu loop."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from recursia.console import get_yes_or_no, make_selection_from

TESTS_MENU_FILE = "TestingGUI.cpp"

_RUNNING_MESSAGE = "Running tests in {}..."
_FAILED_MESSAGE = 'Tests failed in {}. Select the "Run Tests" option to see which tests failed.'

# barrier_check(filenames) -> the filenames among them whose tests failed
BarrierCheck = Callable[[frozenset], Iterable[str]]


@dataclass(frozen=True)
class MenuConfig:
    """Program-wide menu settings: title, file ordering and test barriers."""

    title: str = ""
    menu_order: Sequence[str] = ()
    run_tests_menu_option: bool = False
    test_order: Sequence[str] = ()
    test_barriers: Mapping[str, frozenset] = field(default_factory=dict)
    initial_handler: str = ""


RECURSIA_CONFIG = MenuConfig(
    title="A Visit to Recursia",
    menu_order=("FlagGUI.cpp", "MountainGUI.cpp", "WordGUI.cpp", "TempleGUI.cpp", "CompositeGUI.cpp"),
    run_tests_menu_option=True,
    test_barriers={
        "WordGUI.cpp": frozenset({"SpeakingRecursian.cpp"}),
        "CompositeGUI.cpp": frozenset({"MountainsOfRecursia.cpp", "TempleOfRecursia.cpp"}),
    },
)


@dataclass(frozen=True)
class MenuOption:
    """A named menu entry and the function it runs."""

    name: str
    callback: Callable[[], object]


@dataclass(frozen=True)
class _Handler:
    filename: str
    line: int
    name: str
    callback: Callable[[], object]
    is_public: bool


def _demo_file_order(config: MenuConfig) -> list[str]:
    prefix = [TESTS_MENU_FILE] if config.run_tests_menu_option else []
    return prefix + list(config.menu_order)


def _file_index(filename: str, order: Sequence[str]) -> int:
    try:
        return list(order).index(filename)
    except ValueError:
        return len(order)


def demo_file_compare(lhs: str, rhs: str, order: Sequence[str]) -> int:
    """Order filenames by position in order (absent ones last), then by name.

    Returns -1, 0 or +1.
    """
    left, right = _file_index(lhs, order), _file_index(rhs, order)
    if left != right:
        return -1 if left < right else 1
    if lhs != rhs:
        return -1 if lhs < rhs else 1
    return 0


def _tail(path: str) -> str:
    return path.replace("\\", "/").rsplit("/", 1)[-1]


def _conjunction_join(names: Iterable[str], conjunction: str) -> str:
    items = sorted(names)
    if len(items) <= 1:
        return "".join(items)
    if len(items) == 2:
        return f"{items[0]} {conjunction} {items[1]}"
    return ", ".join(items[:-1]) + f", {conjunction} {items[-1]}"


class HandlerRegistry:
    """Collects demo handlers and turns them into an ordered menu."""

    def __init__(self, config: MenuConfig = RECURSIA_CONFIG, barrier_check: BarrierCheck | None = None) -> None:
        self._config = config
        self._barrier_check = barrier_check
        self._demo_order = _demo_file_order(config)
        self._handlers: list[_Handler] = []

    def register(self, filename: str, line: int, name: str, callback: Callable[[], object]) -> None:
        """Add a handler defined in filename at the given line.

        Handlers from files not listed in the menu order stay hidden.
        """
        tail = _tail(filename)
        self._handlers.append(_Handler(tail, line, name, callback, tail in self._demo_order))

    def _sorted_handlers(self) -> list[_Handler]:
        return sorted(
            self._handlers,
            key=lambda h: (_file_index(h.filename, self._demo_order), h.filename, h.line),
        )

    def _guarded(self, filenames: frozenset, callback: Callable[[], object]) -> Callable[[], object]:
        def run() -> object:
            print(_RUNNING_MESSAGE.format(_conjunction_join(filenames, "and")))
            fails = set(self._barrier_check(filenames)) if self._barrier_check else set()
            if not fails:
                return callback()
            print(_FAILED_MESSAGE.format(_conjunction_join(fails, "and")), file=sys.stderr)
            print("Press ENTER to continue.", file=sys.stderr)
            input()
            return None

        return run

    def menu_options(self) -> list[MenuOption]:
        """Public handlers in menu order, each guarded by its test barrier if any."""
        options = []
        for handler in self._sorted_handlers():
            if not handler.is_public:
                continue
            barrier = self._config.test_barriers.get(handler.filename)
            callback = handler.callback
            if barrier is not None:
                callback = self._guarded(frozenset(barrier), callback)
            options.append(MenuOption(handler.name, callback))
        return options

    def initial_demo(self) -> Callable[[], object] | None:
        """The first handler from the configured initial file, or None."""
        for handler in self._sorted_handlers():
            if handler.filename == self._config.initial_handler:
                return handler.callback
        return None

    def program_title(self) -> str:
        return self._config.title

    def test_order(self) -> list[str]:
        return list(self._config.test_order)


def console_main(registry: HandlerRegistry) -> None:
    """Run the initial demo, if any, then let the user pick demos until done."""
    print("You have switched to the console window. Press ENTER to continue.")
    input()

    initial = registry.initial_demo()
    while True:
        if initial is not None:
            initial()
            initial = None
            if not registry.menu_options():
                break
        else:
            options = registry.menu_options()
            names = [option.name for option in options] + ["Quit"]
            print(registry.program_title())
            selection = make_selection_from("Please make a selection:", names)
            if selection == len(options):
                break
            options[selection].callback()

        print()
        if not get_yes_or_no("You are back at the main menu. Would you like to pick again?"):
            break

    print()
    print("Exiting...")