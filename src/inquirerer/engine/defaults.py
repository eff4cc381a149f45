from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from inquirerer.questions.models import (
    AutocompleteQuestion,
    BaseQuestion,
    CheckboxQuestion,
    ListQuestion,
)
from inquirerer.questions.options import annotate_selection, find_option, selection_result
from inquirerer.questions.validation import is_unanswered


def default_answer(question: BaseQuestion) -> Any:
    """The question's default in the shape its renderer would return, or None."""
    if question.default is None:
        return None
    if isinstance(question, CheckboxQuestion):
        annotated = annotate_selection(
            question.options, question.default, allow_custom=question.allow_custom_options
        )
        return selection_result(annotated, question.return_full_results)
    if isinstance(question, (ListQuestion, AutocompleteQuestion)):
        option = find_option(question.options, question.default)
        return option.value if option is not None else question.default
    return question.default


def find_missing_required(
    ordered: Sequence[BaseQuestion], answers: dict[str, Any]
) -> list[str]:
    """Names of required questions that defaults alone cannot satisfy.

    Walks the questions in dependency order, filling a scratch copy of
    ``answers`` with defaults so ``when`` predicates see what a
    non-interactive run would see.
    """
    scratch = dict(answers)
    missing: list[str] = []
    for question in ordered:
        if question.name in scratch:
            continue
        if question.when is not None and not question.when(scratch):
            continue
        value = default_answer(question)
        if question.required and is_unanswered(question, value):
            missing.append(question.name)
            continue
        scratch[question.name] = value
    return missing
