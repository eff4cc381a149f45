from __future__ import annotations

import pytest

from inquirerer.config.settings import PrompterConfig
from inquirerer.engine.errors import (
    CyclicDependencyError,
    EmptyOptionsError,
    MissingRequiredArgumentsError,
    PrompterError,
    UnknownDependencyError,
    ValidationFailedError,
)
from inquirerer.prompter import Prompter
from inquirerer.questions.models import FailureType, OptionValue, TextQuestion
from inquirerer.usage.man_page import ManPageInfo


@pytest.fixture
def prompter():
    with Prompter(no_tty=True) as p:
        yield p


def test_no_terminal_resources_opened(prompter: Prompter) -> None:
    assert prompter._input is None
    assert prompter._keys is None
    assert prompter._screen is None


def test_terminal_helpers_raise_without_terminal(prompter: Prompter) -> None:
    with pytest.raises(PrompterError, match="without a terminal"):
        prompter._require_keys()
    with pytest.raises(PrompterError, match="without a terminal"):
        prompter._require_screen()
    with pytest.raises(PrompterError, match="without a terminal"):
        prompter._line_reader()


class TestMissingRequired:
    def test_required_without_default_fails(self, prompter: Prompter) -> None:
        with pytest.raises(MissingRequiredArgumentsError) as exc_info:
            prompter.prompt({}, [{"name": "age", "type": "number", "required": True}])
        assert exc_info.value.missing == ["age"]
        assert "age" in str(exc_info.value)

    def test_usage_text_attached(self, prompter: Prompter) -> None:
        with pytest.raises(MissingRequiredArgumentsError) as exc_info:
            prompter.prompt(
                {}, [{"name": "name", "required": True}], usage_text="usage: tool --name NAME"
            )
        assert exc_info.value.usage_text == "usage: tool --name NAME"
        assert exc_info.value.reference is None

    def test_reference_page_rendered(self, prompter: Prompter) -> None:
        info = ManPageInfo(command_name="tool", description="does things")
        with pytest.raises(MissingRequiredArgumentsError) as exc_info:
            prompter.prompt(
                {},
                [{"name": "name", "message": "Your name", "required": True}],
                man_page_info=info,
            )
        reference = exc_info.value.reference
        assert reference is not None
        assert "NAME" in reference
        assert "--name" in reference
        assert "Your name (required)" in reference

    def test_reports_every_missing_name(self, prompter: Prompter) -> None:
        questions = [
            {"name": "a", "required": True},
            {"name": "b", "required": True, "default": "ok"},
            {"name": "c", "required": True},
        ]
        with pytest.raises(MissingRequiredArgumentsError) as exc_info:
            prompter.prompt({}, questions)
        assert exc_info.value.missing == ["a", "c"]

    def test_required_skipped_by_condition_is_not_missing(self, prompter: Prompter) -> None:
        questions = [
            {"name": "remote", "type": "confirm", "default": False},
            {
                "name": "url",
                "required": True,
                "dependsOn": ["remote"],
                "when": lambda answers: answers["remote"],
            },
        ]
        answers = prompter.prompt({}, questions)
        assert answers == {"remote": False}


class TestResolution:
    def test_override_used_without_prompt(self, prompter: Prompter) -> None:
        answers = prompter.prompt(
            {"fruit": "Banana"},
            [{"name": "fruit", "type": "list", "options": ["Apple", "Banana", "Cherry"]}],
        )
        assert answers == {"fruit": "Banana"}

    def test_defaults_shaped_per_type(self, prompter: Prompter) -> None:
        questions = [
            {"name": "title", "default": "Untitled"},
            {"name": "count", "type": "number", "default": 3},
            {"name": "ok", "type": "confirm", "default": True},
            {"name": "size", "type": "list", "options": [{"name": "Large", "value": "L"}], "default": "Large"},
            {"name": "tags", "type": "checkbox", "options": ["x", "y"], "default": ["y"]},
        ]
        answers = prompter.prompt({}, questions)
        assert answers == {
            "title": "Untitled",
            "count": 3,
            "ok": True,
            "size": "L",
            "tags": [OptionValue(name="y", value="y", selected=True)],
        }

    def test_optional_without_default_resolves_to_none(self, prompter: Prompter) -> None:
        assert prompter.prompt({}, [{"name": "nick"}]) == {"nick": None}

    def test_condition_false_leaves_answer_absent(self, prompter: Prompter) -> None:
        questions = [{"name": "secret", "default": "x", "when": lambda answers: False}]
        assert prompter.prompt({}, questions) == {}

    def test_condition_sees_earlier_answers(self, prompter: Prompter) -> None:
        questions = [
            {"name": "extra", "default": "yes", "dependsOn": ["mode"], "when": lambda a: a["mode"] == "full"},
            {"name": "mode", "default": "full"},
        ]
        assert prompter.prompt({}, questions) == {"mode": "full", "extra": "yes"}

    def test_sanitizer_applied_to_default(self, prompter: Prompter) -> None:
        questions = [{"name": "t", "default": "  Hi ", "sanitize": lambda a, _: a.strip()}]
        assert prompter.prompt({}, questions) == {"t": "Hi"}

    def test_invalid_default_fails(self, prompter: Prompter) -> None:
        questions = [{"name": "port", "default": "http", "pattern": "^[0-9]+$"}]
        with pytest.raises(ValidationFailedError) as exc_info:
            prompter.prompt({}, questions)
        assert exc_info.value.question == "port"
        assert exc_info.value.validation.type == FailureType.PATTERN

    def test_validator_sees_answers(self, prompter: Prompter) -> None:
        questions = [
            {"name": "pw", "default": "secret"},
            {"name": "again", "default": "other", "validate": lambda a, answers: a == answers["pw"]},
        ]
        with pytest.raises(ValidationFailedError):
            prompter.prompt({}, questions)

    def test_question_models_accepted(self, prompter: Prompter) -> None:
        answers = prompter.prompt({}, [TextQuestion(name="t", default="v")])
        assert answers == {"t": "v"}


class TestArguments:
    def test_mutates_input_by_default(self, prompter: Prompter) -> None:
        argv = {"a": "1"}
        answers = prompter.prompt(argv, [{"name": "b", "default": "2"}])
        assert answers is argv
        assert argv == {"a": "1", "b": "2"}

    def test_copy_when_not_mutating(self, prompter: Prompter) -> None:
        argv = {"a": "1"}
        answers = prompter.prompt(argv, [{"name": "b", "default": "2"}], mutate_args=False)
        assert answers is not argv
        assert argv == {"a": "1"}
        assert answers == {"a": "1", "b": "2"}

    def test_config_controls_mutation(self) -> None:
        argv = {"a": "1"}
        with Prompter(config=PrompterConfig(no_tty=True, mutate_args=False)) as p:
            p.prompt(argv, [{"name": "b", "default": "2"}])
        assert argv == {"a": "1"}

    def test_unrelated_keys_kept(self, prompter: Prompter) -> None:
        answers = prompter.prompt({"verbose": True}, [{"name": "t", "default": "v"}])
        assert answers["verbose"] is True


class TestConfigurationErrors:
    def test_cycle(self, prompter: Prompter) -> None:
        questions = [{"name": "a", "dependsOn": ["b"]}, {"name": "b", "dependsOn": ["a"]}]
        with pytest.raises(CyclicDependencyError):
            prompter.prompt({}, questions)

    def test_unknown_dependency(self, prompter: Prompter) -> None:
        with pytest.raises(UnknownDependencyError):
            prompter.prompt({}, [{"name": "a", "dependsOn": ["nope"]}])

    def test_list_without_options(self, prompter: Prompter) -> None:
        with pytest.raises(EmptyOptionsError):
            prompter.prompt({}, [{"name": "pick", "type": "list"}])


class TestDirectCalls:
    def test_return_defaults(self, prompter: Prompter) -> None:
        assert prompter.confirm({"name": "c", "default": True}) is True
        assert prompter.text({"name": "t", "default": "x"}) == "x"
        assert prompter.number({"name": "n", "default": 2.5}) == 2.5
        assert prompter.list({"name": "l", "options": ["a", "b"], "default": "b"}) == "b"
        assert prompter.autocomplete({"name": "ac", "options": ["a"]}) is None
        assert prompter.checkbox({"name": "cb", "options": ["a"], "default": "a"}) == [
            OptionValue(name="a", value="a", selected=True)
        ]

    def test_wrong_model_type_rejected(self, prompter: Prompter) -> None:
        with pytest.raises(TypeError):
            prompter.confirm(TextQuestion(name="t"))

    def test_checkbox_without_options(self, prompter: Prompter) -> None:
        with pytest.raises(EmptyOptionsError):
            prompter.checkbox({"name": "cb"})
