from __future__ import annotations

import asyncio
import logging
import sys
from collections import deque
from contextlib import ExitStack
from typing import Callable, Iterable, Optional

from prompt_toolkit.input import Input
from prompt_toolkit.input.typeahead import get_typeahead, store_typeahead
from prompt_toolkit.key_binding import KeyPress

from inquirerer.engine.errors import PromptAbortedError

logger = logging.getLogger(__name__)

KeyHandler = Callable[[], None]


class KeyCode:
    UP_ARROW = "\x1b[A"
    DOWN_ARROW = "\x1b[B"
    RIGHT_ARROW = "\x1b[C"
    LEFT_ARROW = "\x1b[D"
    ENTER = "\r"
    SPACE = " "
    CTRL_C = "\x03"
    BACKSPACE = "\x7f"
    BACKSPACE_LEGACY = "\x08"


def default_interrupt(code: int = 0) -> None:
    sys.exit(code)


class TerminalControl:
    """Raw-mode switch for one input, with an explicit enable/restore lifecycle."""

    def __init__(self, input: Input) -> None:
        self._input = input
        self._stack: Optional[ExitStack] = None

    @property
    def enabled(self) -> bool:
        return self._stack is not None

    def enable(self) -> None:
        if self._stack is not None:
            return
        stack = ExitStack()
        stack.enter_context(self._input.raw_mode())
        self._stack = stack

    def restore(self) -> None:
        if self._stack is None:
            return
        stack, self._stack = self._stack, None
        stack.close()


class KeyDispatcher:
    """Delivers raw key sequences from ``input`` to handlers registered per key.

    A key identity is the exact string the terminal sends (one character or a
    full escape sequence). Every handler registered for that string fires, in
    registration order. ``KeyCode.CTRL_C`` always calls ``on_interrupt``,
    even while paused. Without a terminal the dispatcher is inert.
    """

    def __init__(
        self,
        input: Optional[Input],
        interactive: bool = True,
        on_interrupt: Callable[[], None] = default_interrupt,
        terminal: Optional[TerminalControl] = None,
    ) -> None:
        self._input = input
        self._interactive = interactive and input is not None
        self._on_interrupt = on_interrupt
        self._terminal = terminal
        if self._terminal is None and self._interactive:
            self._terminal = TerminalControl(input)  # type: ignore[arg-type]
        self._listeners: dict[str, list[KeyHandler]] = {}
        self._active = True
        self._destroyed = False

    @property
    def interactive(self) -> bool:
        return self._interactive and not self._destroyed

    def register(self, key: str, handler: KeyHandler) -> None:
        self._listeners.setdefault(key, []).append(handler)

    def unregister(self, key: str, handler: KeyHandler) -> None:
        handlers = self._listeners.get(key)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def clear_all(self) -> None:
        self._listeners = {}

    def pause(self) -> None:
        self._active = False

    def resume(self) -> None:
        self._active = True

    def dispatch(self, key: str) -> None:
        if key == KeyCode.CTRL_C:
            self.interrupt()
            return
        if not self._active:
            return
        for handler in list(self._listeners.get(key, ())):
            handler()

    def interrupt(self) -> None:
        logger.debug("Interrupt key received")
        if self._terminal is not None:
            self._terminal.restore()
        self._on_interrupt()

    def listen(self, is_done: Callable[[], bool]) -> None:
        """Dispatch incoming keys until ``is_done()`` is true.

        Keys left over once ``is_done()`` turns true are stored as typeahead
        so the next reader of the same input sees them.
        """
        if not self.interactive:
            return
        assert self._input is not None and self._terminal is not None

        self._terminal.enable()
        try:
            self._feed(get_typeahead(self._input), is_done)
            if not is_done():
                asyncio.run(self._wait(is_done))
        finally:
            self._terminal.restore()

    def _feed(self, keys: Iterable[KeyPress], is_done: Callable[[], bool]) -> None:
        pending = deque(keys)
        while pending:
            if is_done():
                assert self._input is not None
                store_typeahead(self._input, list(pending))
                return
            self.dispatch(pending.popleft().data)

    async def _wait(self, is_done: Callable[[], bool]) -> None:
        assert self._input is not None
        input = self._input
        finished: asyncio.Future[None] = asyncio.get_running_loop().create_future()

        def on_ready() -> None:
            if finished.done():
                return
            try:
                keys = input.read_keys()
                keys.extend(input.flush_keys())
                self._feed(keys, is_done)
                if not is_done() and input.closed:
                    raise PromptAbortedError("Input stream closed")
            except Exception as e:
                finished.set_exception(e)
                return
            if is_done():
                finished.set_result(None)

        with input.attach(on_ready):
            await finished

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        if self._terminal is not None:
            self._terminal.restore()
        self._listeners = {}
