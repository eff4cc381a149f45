from __future__ import annotations

from typing import Any

from inquirerer.questions.models import CheckboxQuestion, PromptContext
from inquirerer.questions.options import option_keys, selection_result
from inquirerer.renderers.select import (
    SelectState,
    capture,
    navigation_keys,
    require_options,
    search_keys,
    window_size,
)
from inquirerer.terminal.keypress import KeyCode, KeyDispatcher
from inquirerer.terminal.screen import Screen


def _initial_selection(question: CheckboxQuestion) -> list[bool]:
    wanted = {str(v) for v in question.default or []}
    return [bool(option_keys(option) & wanted) for option in question.options]


def ask_checkbox(
    question: CheckboxQuestion,
    context: PromptContext,
    keys: KeyDispatcher,
    screen: Screen,
    max_lines: int,
) -> Any:
    require_options(question)
    state = SelectState.create(
        question.options,
        window_size(question, max_lines),
        checked=_initial_selection(question),
        filtered=True,
    )

    def draw() -> None:
        screen.clear()
        screen.header(question, context)
        screen.line(("class:search", f"Search: {state.search}"))
        for pos, index in state.window():
            option = question.options[index]
            mark = "◉" if state.checked[index] else "○"
            if pos == state.cursor:
                screen.line(("class:cursor", f"> {mark} {option.name}"))
            else:
                screen.text(f"  {mark} {option.name}")
        screen.flush()

    def submit() -> None:
        annotated = [
            option.model_copy(update={"selected": checked})
            for option, checked in zip(question.options, state.checked)
        ]
        state.finish(selection_result(annotated, question.return_full_results))

    bindings = navigation_keys(state)
    bindings.update(search_keys(state))
    bindings[KeyCode.SPACE] = state.toggle
    bindings[KeyCode.ENTER] = submit
    return capture(keys, state, bindings, draw)
