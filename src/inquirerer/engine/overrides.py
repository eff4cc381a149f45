from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from inquirerer.questions.models import (
    AutocompleteQuestion,
    BaseQuestion,
    CheckboxQuestion,
    ListQuestion,
)
from inquirerer.questions.options import annotate_selection, find_option, selection_result

logger = logging.getLogger(__name__)

_MISSING = object()


def resolve_checkbox_override(question: CheckboxQuestion, raw: Any) -> list[Any]:
    # A scalar override selects a single option.
    values = list(raw) if isinstance(raw, (list, tuple, set)) else [raw]
    annotated = annotate_selection(
        question.options, values, allow_custom=question.allow_custom_options
    )
    return selection_result(annotated, question.return_full_results)


def resolve_choice_override(
    question: ListQuestion | AutocompleteQuestion, raw: Any
) -> Any:
    """Map a raw override onto an option value. Returns ``_MISSING`` when the
    override cannot be used and the question has to be asked."""
    option = find_option(question.options, raw)
    if option is not None:
        return option.value
    if question.allow_custom_options:
        return raw
    return _MISSING


def apply_overrides(
    answers: dict[str, Any],
    questions: Iterable[BaseQuestion],
    resolved: set[str],
) -> set[str]:
    """Reconcile values already present in ``answers`` with their questions.

    Mutates ``answers`` into the shape the interactive path would produce and
    adds every accepted name to ``resolved``. Names already in ``resolved`` are
    left alone. Unusable list/autocomplete overrides are removed so the
    question gets asked.
    """
    for question in questions:
        if question.name in resolved or question.name not in answers:
            continue
        raw = answers[question.name]

        if isinstance(question, CheckboxQuestion):
            answers[question.name] = resolve_checkbox_override(question, raw)
        elif isinstance(question, (ListQuestion, AutocompleteQuestion)):
            value = resolve_choice_override(question, raw)
            if value is _MISSING:
                logger.warning(
                    "Ignoring value %r for '%s': not one of its options",
                    raw,
                    question.name,
                )
                del answers[question.name]
                continue
            answers[question.name] = value

        logger.debug("Using supplied value for '%s'", question.name)
        resolved.add(question.name)
    return resolved
