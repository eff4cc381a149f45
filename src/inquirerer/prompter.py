from __future__ import annotations

import functools
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional, TypeVar, Union

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.output import Output, create_output

from inquirerer.config.settings import PrompterConfig
from inquirerer.engine.defaults import default_answer, find_missing_required
from inquirerer.engine.dependencies import reorder
from inquirerer.engine.errors import (
    MissingRequiredArgumentsError,
    PrompterError,
    ValidationFailedError,
)
from inquirerer.engine.overrides import apply_overrides
from inquirerer.questions.models import (
    AutocompleteQuestion,
    BaseQuestion,
    CheckboxQuestion,
    ConfirmQuestion,
    FailureType,
    ListQuestion,
    NumberQuestion,
    PromptContext,
    TextQuestion,
    ValidationResult,
    parse_questions,
)
from inquirerer.questions.validation import (
    is_unanswered,
    sanitize_answer,
    validate_answer,
)
from inquirerer.renderers.autocomplete import ask_autocomplete
from inquirerer.renderers.checkbox import ask_checkbox
from inquirerer.renderers.line import LineReader, ask_confirm, ask_number, ask_text
from inquirerer.renderers.list_prompt import ask_list
from inquirerer.renderers.select import require_options
from inquirerer.terminal.keypress import KeyDispatcher, default_interrupt
from inquirerer.terminal.screen import Screen
from inquirerer.usage.man_page import ManPageInfo, render_man_page

logger = logging.getLogger(__name__)

Q = TypeVar("Q", bound=BaseQuestion)
QuestionInput = Union[BaseQuestion, Mapping[str, Any]]


def _coerce(question: QuestionInput, model: type[Q]) -> Q:
    if isinstance(question, model):
        return question
    if isinstance(question, BaseQuestion):
        raise TypeError(
            f"Expected {model.__name__}, got {type(question).__name__}"
        )
    return model.model_validate(dict(question))


class Prompter:
    """Fills in missing answers from defaults or an interactive terminal.

    Whether a terminal is present is decided by the caller through ``no_tty``;
    nothing is probed. Without a terminal no input or output is opened and
    every question resolves from its default.
    """

    def __init__(
        self,
        no_tty: Optional[bool] = None,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
        *,
        use_defaults: Optional[bool] = None,
        max_display_lines: Optional[int] = None,
        on_interrupt: Optional[Callable[[], None]] = None,
        config: Optional[PrompterConfig] = None,
    ) -> None:
        config = config or PrompterConfig()
        self.no_tty = config.no_tty if no_tty is None else no_tty
        self.use_defaults = config.use_defaults if use_defaults is None else use_defaults
        self.max_display_lines = max_display_lines or config.max_display_lines
        self._mutate_args = config.mutate_args
        self._on_interrupt = on_interrupt or functools.partial(
            default_interrupt, config.interrupt_exit_code
        )

        self._input: Optional[Input] = None
        self._output: Optional[Output] = None
        self._keys: Optional[KeyDispatcher] = None
        self._screen: Optional[Screen] = None
        self._reader: Optional[LineReader] = None
        if not self.no_tty:
            self._input = input or create_input()
            self._output = output or create_output()
            self._keys = KeyDispatcher(self._input, on_interrupt=self._on_interrupt)
            self._screen = Screen(self._output)

    def __enter__(self) -> Prompter:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def prompt(
        self,
        argv: dict[str, Any],
        questions: Sequence[QuestionInput],
        usage_text: Optional[str] = None,
        man_page_info: Optional[ManPageInfo] = None,
        mutate_args: Optional[bool] = None,
    ) -> dict[str, Any]:
        """Resolve every question into ``argv`` (or a copy of it) and return it."""
        mutate = self._mutate_args if mutate_args is None else mutate_args
        answers = argv if mutate else dict(argv)

        parsed = parse_questions(list(questions))
        ordered = reorder(parsed)
        resolved = apply_overrides(answers, parsed, set())

        missing = find_missing_required(ordered, answers)
        if missing:
            if self.no_tty:
                reference = None
                if man_page_info is not None:
                    reference = render_man_page(man_page_info, parsed)
                raise MissingRequiredArgumentsError(missing, usage_text, reference)
            if usage_text:
                self._require_screen().text(usage_text)
                self._require_screen().flush()

        for question in ordered:
            if question.name in resolved:
                continue
            resolved.add(question.name)

            if question.when is not None and not question.when(answers):
                logger.debug("Skipping '%s': condition not met", question.name)
                continue

            if self.use_defaults and question.default is not None:
                answers[question.name] = default_answer(question)
                continue

            answers[question.name] = self._resolve(question, answers)

        return answers

    def _resolve(self, question: BaseQuestion, answers: dict[str, Any]) -> Any:
        context = PromptContext()
        answer: Any = None
        while context.needs_input:
            answer = sanitize_answer(question, self._ask(question, context), answers)
            if is_unanswered(question, answer):
                if question.required:
                    validation = ValidationResult(
                        success=False, type=FailureType.REQUIRED
                    )
                else:
                    validation = ValidationResult(success=True)
            else:
                validation = validate_answer(question, answer, answers)

            if validation.success:
                context.next_question()
            elif self.no_tty:
                raise ValidationFailedError(question.name, validation)
            else:
                logger.debug(
                    "Retrying '%s' after attempt %d: %s",
                    question.name,
                    context.num_tries + 1,
                    validation.type,
                )
                context.try_again(validation)
        logger.debug("Resolved '%s'", question.name)
        return answer

    def _ask(self, question: BaseQuestion, context: PromptContext) -> Any:
        if isinstance(question, ConfirmQuestion):
            return self.confirm(question, context)
        if isinstance(question, TextQuestion):
            return self.text(question, context)
        if isinstance(question, NumberQuestion):
            return self.number(question, context)
        if isinstance(question, CheckboxQuestion):
            return self.checkbox(question, context)
        if isinstance(question, AutocompleteQuestion):
            return self.autocomplete(question, context)
        if isinstance(question, ListQuestion):
            return self.list(question, context)
        raise TypeError(f"Unsupported question: {type(question).__name__}")

    def confirm(
        self, question: QuestionInput, context: Optional[PromptContext] = None
    ) -> Optional[bool]:
        q = _coerce(question, ConfirmQuestion)
        if self.no_tty:
            return default_answer(q)
        return ask_confirm(q, context or PromptContext(), self._line_reader(), self._require_screen())

    def text(
        self, question: QuestionInput, context: Optional[PromptContext] = None
    ) -> Optional[str]:
        q = _coerce(question, TextQuestion)
        if self.no_tty:
            return default_answer(q)
        return ask_text(q, context or PromptContext(), self._line_reader(), self._require_screen())

    def number(
        self, question: QuestionInput, context: Optional[PromptContext] = None
    ) -> Optional[Union[int, float]]:
        q = _coerce(question, NumberQuestion)
        if self.no_tty:
            return default_answer(q)
        return ask_number(q, context or PromptContext(), self._line_reader(), self._require_screen())

    def list(self, question: QuestionInput, context: Optional[PromptContext] = None) -> Any:
        q = _coerce(question, ListQuestion)
        require_options(q)
        if self.no_tty:
            return default_answer(q)
        return ask_list(
            q, context or PromptContext(), self._require_keys(), self._require_screen(),
            self.max_display_lines,
        )

    def checkbox(
        self, question: QuestionInput, context: Optional[PromptContext] = None
    ) -> Any:
        q = _coerce(question, CheckboxQuestion)
        require_options(q)
        if self.no_tty:
            return default_answer(q)
        return ask_checkbox(
            q, context or PromptContext(), self._require_keys(), self._require_screen(),
            self.max_display_lines,
        )

    def autocomplete(
        self, question: QuestionInput, context: Optional[PromptContext] = None
    ) -> Any:
        q = _coerce(question, AutocompleteQuestion)
        require_options(q)
        if self.no_tty:
            return default_answer(q)
        return ask_autocomplete(
            q, context or PromptContext(), self._require_keys(), self._require_screen(),
            self.max_display_lines,
        )

    def _line_reader(self) -> LineReader:
        if self._reader is None:
            if self._input is None or self._output is None:
                raise PrompterError("line input is not available without a terminal")
            self._reader = LineReader(self._input, self._output, self._on_interrupt)
        return self._reader

    def _require_keys(self) -> KeyDispatcher:
        if self._keys is None:
            raise PrompterError("key input is not available without a terminal")
        return self._keys

    def _require_screen(self) -> Screen:
        if self._screen is None:
            raise PrompterError("output is not available without a terminal")
        return self._screen

    def close(self) -> None:
        self._reader = None
        if self._keys is not None:
            self._keys.destroy()
