from __future__ import annotations

from typing import Callable, Optional, Union

from prompt_toolkit import PromptSession
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output

from inquirerer.engine.errors import PromptAbortedError
from inquirerer.questions.models import (
    BaseQuestion,
    ConfirmQuestion,
    NumberQuestion,
    PromptContext,
    TextQuestion,
)
from inquirerer.terminal.screen import Screen


class LineReader:
    """Single-line reads over the same input/output the key dispatcher uses."""

    def __init__(
        self,
        input: Input,
        output: Output,
        on_interrupt: Callable[[], None],
    ) -> None:
        self._session: PromptSession[str] = PromptSession(input=input, output=output)
        self._on_interrupt = on_interrupt

    def read(self, message: str) -> str:
        try:
            return self._session.prompt(message)
        except KeyboardInterrupt:
            self._on_interrupt()
            raise PromptAbortedError("Interrupted")
        except EOFError as e:
            raise PromptAbortedError("Input stream closed") from e


def parse_confirm(raw: str, default: Optional[bool]) -> bool:
    raw = raw.strip()
    if not raw:
        return bool(default)
    return raw.lower() in ("y", "yes")


def parse_number(raw: str) -> Optional[Union[int, float]]:
    raw = raw.strip()
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return None


def _prepare(screen: Screen, question: BaseQuestion, context: PromptContext) -> None:
    screen.clear()
    screen.header(question, context)
    screen.flush()


def ask_confirm(
    question: ConfirmQuestion,
    context: PromptContext,
    reader: LineReader,
    screen: Screen,
) -> bool:
    _prepare(screen, question, context)
    hint = "(Y/n)" if question.default else "(y/N)"
    return parse_confirm(reader.read(f"{hint} > "), question.default)


def ask_text(
    question: TextQuestion,
    context: PromptContext,
    reader: LineReader,
    screen: Screen,
) -> Optional[str]:
    _prepare(screen, question, context)
    hint = f"[{question.default}] " if question.default is not None else ""
    raw = reader.read(f"{hint}> ")
    if raw == "":
        return question.default
    return raw


def ask_number(
    question: NumberQuestion,
    context: PromptContext,
    reader: LineReader,
    screen: Screen,
) -> Optional[Union[int, float]]:
    _prepare(screen, question, context)
    hint = f"[{question.default}] " if question.default is not None else ""
    raw = reader.read(f"{hint}> ")
    if not raw.strip():
        return question.default
    # Unparseable input is left for the required check to reject.
    return parse_number(raw)
