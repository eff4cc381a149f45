from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Callable, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


class QuestionType(str, Enum):
    CONFIRM = "confirm"
    TEXT = "text"
    NUMBER = "number"
    LIST = "list"
    CHECKBOX = "checkbox"
    AUTOCOMPLETE = "autocomplete"


class FailureType(str, Enum):
    REQUIRED = "required"
    PATTERN = "pattern"
    VALIDATION = "validation"


class ValidationResult(BaseModel):
    success: bool
    type: Optional[Union[FailureType, str]] = None
    reason: Optional[str] = None


class OptionValue(BaseModel):
    """Canonical option record. ``name`` is the label and matching key,
    ``value`` is what the caller gets back."""

    name: str
    value: Any = None
    selected: Optional[bool] = None

    @model_validator(mode="before")
    @classmethod
    def _from_raw(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data, "value": data}
        if isinstance(data, Mapping) and "value" not in data:
            return {**data, "value": data.get("name")}
        return data


Validator = Callable[[Any, dict[str, Any]], Any]
Sanitizer = Callable[[Any, dict[str, Any]], Any]
Predicate = Callable[[dict[str, Any]], bool]


class BaseQuestion(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    name: str
    message: Optional[str] = None
    description: Optional[str] = None
    default: Any = None
    required: bool = False
    pattern: Optional[str] = None
    validator: Optional[Validator] = Field(default=None, alias="validate")
    sanitizer: Optional[Sanitizer] = Field(default=None, alias="sanitize")
    depends_on: list[str] = Field(default_factory=list)
    when: Optional[Predicate] = None

    @property
    def label(self) -> str:
        return self.message or self.name


class ConfirmQuestion(BaseQuestion):
    type: Literal["confirm"] = "confirm"
    default: Optional[bool] = None


class TextQuestion(BaseQuestion):
    type: Literal["text"] = "text"
    default: Optional[str] = None


class NumberQuestion(BaseQuestion):
    type: Literal["number"] = "number"
    default: Optional[Union[int, float]] = None


class OptionQuestion(BaseQuestion):
    options: list[OptionValue] = Field(default_factory=list)
    max_display_lines: Optional[int] = Field(default=None, ge=1)
    allow_custom_options: bool = False


class ListQuestion(OptionQuestion):
    type: Literal["list"] = "list"


class AutocompleteQuestion(OptionQuestion):
    type: Literal["autocomplete"] = "autocomplete"


class CheckboxQuestion(OptionQuestion):
    type: Literal["checkbox"] = "checkbox"
    default: Optional[list[Any]] = None
    return_full_results: bool = False

    @field_validator("default", mode="before")
    @classmethod
    def _listify_default(cls, value: Any) -> Any:
        if value is None or isinstance(value, (list, tuple)):
            return value
        return [value]


Question = Annotated[
    Union[
        ConfirmQuestion,
        TextQuestion,
        NumberQuestion,
        ListQuestion,
        CheckboxQuestion,
        AutocompleteQuestion,
    ],
    Field(discriminator="type"),
]

_question_adapter: TypeAdapter[Any] = TypeAdapter(Question)


def parse_question(data: BaseQuestion | Mapping[str, Any]) -> BaseQuestion:
    """Build a question model from a mapping. Untyped mappings are text questions."""
    if isinstance(data, BaseQuestion):
        return data
    raw = dict(data)
    raw.setdefault("type", QuestionType.TEXT.value)
    if isinstance(raw["type"], QuestionType):
        raw["type"] = raw["type"].value
    return _question_adapter.validate_python(raw)


def parse_questions(items: list[BaseQuestion | Mapping[str, Any]]) -> list[BaseQuestion]:
    return [parse_question(item) for item in items]


@dataclass
class PromptContext:
    """Transient state of one question while it is being asked."""

    num_tries: int = 0
    needs_input: bool = True
    validation: ValidationResult = field(
        default_factory=lambda: ValidationResult(success=True)
    )

    def try_again(self, validation: ValidationResult) -> None:
        self.num_tries += 1
        self.needs_input = True
        self.validation = validation

    def next_question(self) -> None:
        self.num_tries += 1
        self.needs_input = False
        self.validation = ValidationResult(success=True)
