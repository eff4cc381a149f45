from __future__ import annotations

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from inquirerer.questions.models import BaseQuestion, PromptContext
from inquirerer.questions.validation import describe_failure

STYLE = Style.from_dict(
    {
        "question": "bold",
        "required": "ansired",
        "description": "ansibrightblack",
        "error": "ansired bold",
        "cursor": "ansicyan bold",
        "search": "ansiyellow",
    }
)


class Screen:
    """Clear-and-repaint drawing over a prompt_toolkit output."""

    def __init__(self, output: Output) -> None:
        self._output = output

    def clear(self) -> None:
        self._output.erase_screen()
        self._output.cursor_goto(0, 0)

    def line(self, *fragments: tuple[str, str]) -> None:
        print_formatted_text(
            FormattedText(list(fragments)), output=self._output, style=STYLE
        )

    def text(self, value: str) -> None:
        self.line(("", value))

    def header(self, question: BaseQuestion, context: PromptContext | None = None) -> None:
        marker = [("class:required", " *")] if question.required else []
        self.line(("class:question", f"[?] {question.label}"), *marker)
        if question.description:
            self.line(("class:description", f"    {question.description}"))
        if context is not None and not context.validation.success:
            self.line(("class:error", f"[!] {describe_failure(context.validation)}"))

    def flush(self) -> None:
        self._output.flush()
