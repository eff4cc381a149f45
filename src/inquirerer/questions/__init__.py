from inquirerer.questions.models import (
    AutocompleteQuestion,
    BaseQuestion,
    CheckboxQuestion,
    ConfirmQuestion,
    FailureType,
    ListQuestion,
    NumberQuestion,
    OptionQuestion,
    OptionValue,
    PromptContext,
    Question,
    QuestionType,
    TextQuestion,
    ValidationResult,
    parse_question,
    parse_questions,
)
from inquirerer.questions.options import fuzzy_filter, fuzzy_match
from inquirerer.questions.validation import (
    is_empty_answer,
    sanitize_answer,
    validate_answer,
)

__all__ = [
    "AutocompleteQuestion",
    "BaseQuestion",
    "CheckboxQuestion",
    "ConfirmQuestion",
    "FailureType",
    "ListQuestion",
    "NumberQuestion",
    "OptionQuestion",
    "OptionValue",
    "PromptContext",
    "Question",
    "QuestionType",
    "TextQuestion",
    "ValidationResult",
    "fuzzy_filter",
    "fuzzy_match",
    "is_empty_answer",
    "parse_question",
    "parse_questions",
    "sanitize_answer",
    "validate_answer",
]
