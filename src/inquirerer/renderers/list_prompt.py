from __future__ import annotations

from typing import Any

from inquirerer.questions.models import ListQuestion, PromptContext
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


def ask_list(
    question: ListQuestion,
    context: PromptContext,
    keys: KeyDispatcher,
    screen: Screen,
    max_lines: int,
) -> Any:
    require_options(question)
    state = SelectState.create(
        question.options, window_size(question, max_lines), filtered=True
    )

    def draw() -> None:
        screen.clear()
        screen.header(question, context)
        screen.line(("class:search", f"> {state.search}"))
        for pos, index in state.window():
            option = question.options[index]
            if pos == state.cursor:
                screen.line(("class:cursor", f"> {option.name}"))
            else:
                screen.text(f"  {option.name}")
        screen.flush()

    def submit() -> None:
        index = state.current
        if index is not None:
            state.finish(question.options[index].value)

    bindings = navigation_keys(state)
    bindings.update(search_keys(state))
    bindings[KeyCode.ENTER] = submit
    return capture(keys, state, bindings, draw)
