from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from inquirerer.engine.errors import EmptyOptionsError
from inquirerer.questions.models import OptionQuestion, OptionValue
from inquirerer.questions.options import fuzzy_filter_indices
from inquirerer.terminal.keypress import KeyCode, KeyDispatcher

SEARCH_KEYS = string.ascii_letters + string.digits
# Space stays free for toggling; autocomplete also accepts punctuation.
FREE_TEXT_KEYS = SEARCH_KEYS + string.punctuation


def window_size(question: OptionQuestion, max_lines: int) -> int:
    if question.max_display_lines is not None:
        return question.max_display_lines
    return max(1, min(max_lines, len(question.options)))


def require_options(question: OptionQuestion) -> None:
    if not question.options:
        raise EmptyOptionsError(question.name, question.type)  # type: ignore[attr-defined]


@dataclass
class SelectState:
    """Cursor, scroll window and search buffer of one select-style prompt.

    ``visible`` holds positions into ``options``; ``cursor`` and
    ``start_index`` are positions into ``visible``.
    """

    options: list[OptionValue]
    max_lines: int
    visible: list[int] = field(default_factory=list)
    cursor: int = 0
    start_index: int = 0
    search: str = ""
    checked: list[bool] = field(default_factory=list)
    done: bool = False
    result: Any = None

    @classmethod
    def create(
        cls,
        options: list[OptionValue],
        max_lines: int,
        checked: Optional[list[bool]] = None,
        filtered: bool = False,
    ) -> SelectState:
        state = cls(
            options=options,
            max_lines=max_lines,
            checked=checked if checked is not None else [False] * len(options),
        )
        if filtered:
            state.refilter()
        else:
            state.visible = list(range(len(options)))
        return state

    @property
    def current(self) -> Optional[int]:
        if not self.visible:
            return None
        return self.visible[self.cursor]

    def move_up(self) -> None:
        if not self.visible:
            return
        if self.cursor == 0:
            self.cursor = len(self.visible) - 1
            self.start_index = max(0, len(self.visible) - self.max_lines)
        else:
            self.cursor -= 1
            if self.cursor < self.start_index:
                self.start_index = self.cursor

    def move_down(self) -> None:
        if not self.visible:
            return
        if self.cursor >= len(self.visible) - 1:
            self.cursor = 0
            self.start_index = 0
        else:
            self.cursor += 1
            if self.cursor >= self.start_index + self.max_lines:
                self.start_index = self.cursor - self.max_lines + 1

    def toggle(self) -> None:
        index = self.current
        if index is not None:
            self.checked[index] = not self.checked[index]

    def type_char(self, char: str) -> None:
        self.search += char
        self.refilter()

    def backspace(self) -> None:
        self.search = self.search[:-1]
        self.refilter()

    def refilter(self) -> None:
        self.visible = fuzzy_filter_indices(self.options, self.search)
        self.cursor = 0
        self.start_index = 0

    def window(self) -> list[tuple[int, int]]:
        """``(position in visible, option index)`` pairs currently on screen."""
        end = min(self.start_index + self.max_lines, len(self.visible))
        return [(pos, self.visible[pos]) for pos in range(self.start_index, end)]

    def finish(self, result: Any) -> None:
        self.result = result
        self.done = True


def navigation_keys(state: SelectState) -> dict[str, Callable[[], None]]:
    return {
        KeyCode.UP_ARROW: state.move_up,
        KeyCode.DOWN_ARROW: state.move_down,
    }


def search_keys(
    state: SelectState, chars: str = SEARCH_KEYS
) -> dict[str, Callable[[], None]]:
    bindings: dict[str, Callable[[], None]] = {
        KeyCode.BACKSPACE: state.backspace,
        KeyCode.BACKSPACE_LEGACY: state.backspace,
    }
    for char in chars:
        bindings[char] = lambda char=char: state.type_char(char)
    return bindings


def capture(
    keys: KeyDispatcher,
    state: SelectState,
    bindings: dict[str, Callable[[], None]],
    draw: Callable[[], None],
) -> Any:
    """Install ``bindings`` (each followed by a redraw) and listen until the
    state is finished. Returns the state's result."""
    keys.clear_all()

    def redrawing(handler: Callable[[], None]) -> Callable[[], None]:
        def on_key() -> None:
            handler()
            if not state.done:
                draw()

        return on_key

    for key, handler in bindings.items():
        keys.register(key, redrawing(handler))

    draw()
    try:
        keys.listen(lambda: state.done)
    finally:
        keys.clear_all()
    return state.result
