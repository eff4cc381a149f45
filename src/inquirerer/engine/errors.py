from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inquirerer.questions.models import ValidationResult


class PrompterError(Exception):
    pass


class ConfigurationError(PrompterError):
    """A question set that can never be resolved. Never retried."""


class UnknownDependencyError(ConfigurationError):
    def __init__(self, question: str, dependency: str) -> None:
        self.question = question
        self.dependency = dependency
        super().__init__(
            f"Question '{question}' depends on '{dependency}', which is not defined"
        )


class CyclicDependencyError(ConfigurationError):
    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        super().__init__("Cyclic dependency: " + " -> ".join(cycle))


class DuplicateQuestionError(ConfigurationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Question '{name}' is defined more than once")


class EmptyOptionsError(ConfigurationError):
    def __init__(self, question: str, question_type: str) -> None:
        self.question = question
        self.question_type = question_type
        super().__init__(
            f"Question '{question}' of type {question_type} requires at least one option"
        )


class QuestionFileError(ConfigurationError):
    pass


class ValidationFailedError(PrompterError):
    def __init__(self, question: str, validation: ValidationResult) -> None:
        self.question = question
        self.validation = validation
        kind = getattr(validation.type, "value", validation.type)
        detail = validation.reason or kind or "invalid"
        super().__init__(f"Invalid value for '{question}': {detail}")


class MissingRequiredArgumentsError(PrompterError):
    def __init__(
        self,
        missing: list[str],
        usage_text: str | None = None,
        reference: str | None = None,
    ) -> None:
        self.missing = missing
        self.usage_text = usage_text
        self.reference = reference
        super().__init__("Missing required arguments: " + ", ".join(missing))


class PromptAbortedError(PrompterError):
    pass
