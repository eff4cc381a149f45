from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from inquirerer.questions.models import (
    BaseQuestion,
    CheckboxQuestion,
    FailureType,
    OptionValue,
    ValidationResult,
)

SUCCESS = ValidationResult(success=True)


def is_empty_answer(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def is_unanswered(question: BaseQuestion, answer: Any) -> bool:
    """Required-check for ``answer``. A checkbox with nothing selected counts
    as unanswered even when it returns every option."""
    if is_empty_answer(answer):
        return True
    if isinstance(question, CheckboxQuestion) and isinstance(answer, list):
        options = [option for option in answer if isinstance(option, OptionValue)]
        if len(options) == len(answer):
            return not any(option.selected for option in options)
    return False


def sanitize_answer(question: BaseQuestion, answer: Any, answers: dict[str, Any]) -> Any:
    if question.sanitizer is None:
        return answer
    return question.sanitizer(answer, answers)


def _normalize(result: Any) -> ValidationResult:
    if isinstance(result, ValidationResult):
        outcome = result
    elif isinstance(result, bool):
        outcome = ValidationResult(success=result)
    elif isinstance(result, Mapping):
        outcome = ValidationResult.model_validate(result)
    elif result is None:
        outcome = SUCCESS
    else:
        raise TypeError(f"Validator returned unsupported value: {result!r}")

    if not outcome.success and outcome.type is None:
        outcome = outcome.model_copy(update={"type": FailureType.VALIDATION})
    return outcome


def validate_answer(
    question: BaseQuestion, answer: Any, answers: dict[str, Any]
) -> ValidationResult:
    if question.pattern and isinstance(answer, str):
        if re.search(question.pattern, answer) is None:
            return ValidationResult(
                success=False, type=FailureType.PATTERN, reason=question.pattern
            )

    if question.validator is not None:
        return _normalize(question.validator(answer, answers))

    return SUCCESS


def describe_failure(validation: ValidationResult) -> str:
    if validation.type == FailureType.REQUIRED:
        return validation.reason or "This field is required."
    if validation.type == FailureType.PATTERN:
        return f"Input does not match pattern: {validation.reason}"
    return validation.reason or "Invalid input."
