import pytest

from inquirerer.engine.dependencies import index_by_name, reorder
from inquirerer.engine.errors import (
    ConfigurationError,
    CyclicDependencyError,
    DuplicateQuestionError,
    UnknownDependencyError,
)
from inquirerer.questions.models import parse_questions


def _names(questions) -> list[str]:
    return [q.name for q in questions]


def test_dependency_pulled_forward() -> None:
    questions = parse_questions(
        [{"name": "b", "dependsOn": ["a"]}, {"name": "a"}]
    )
    assert _names(reorder(questions)) == ["a", "b"]


def test_independent_questions_keep_order() -> None:
    questions = parse_questions([{"name": "x"}, {"name": "y"}, {"name": "z"}])
    assert _names(reorder(questions)) == ["x", "y", "z"]


def test_transitive_dependencies() -> None:
    questions = parse_questions(
        [
            {"name": "deploy", "dependsOn": ["region"]},
            {"name": "region", "dependsOn": ["cloud"]},
            {"name": "cloud"},
            {"name": "notes"},
        ]
    )
    assert _names(reorder(questions)) == ["cloud", "region", "deploy", "notes"]


def test_shared_dependency_emitted_once() -> None:
    questions = parse_questions(
        [
            {"name": "b", "dependsOn": ["a"]},
            {"name": "c", "dependsOn": ["a"]},
            {"name": "a"},
        ]
    )
    assert _names(reorder(questions)) == ["a", "b", "c"]


def test_reorder_is_idempotent() -> None:
    questions = parse_questions(
        [
            {"name": "c", "dependsOn": ["b"]},
            {"name": "a"},
            {"name": "b", "dependsOn": ["a"]},
        ]
    )
    once = reorder(questions)
    assert _names(reorder(once)) == _names(once)


def test_every_dependency_precedes_its_dependent() -> None:
    questions = parse_questions(
        [
            {"name": "e", "dependsOn": ["d", "a"]},
            {"name": "d", "dependsOn": ["c"]},
            {"name": "c", "dependsOn": ["b"]},
            {"name": "b"},
            {"name": "a", "dependsOn": ["b"]},
        ]
    )
    ordered = reorder(questions)
    position = {q.name: i for i, q in enumerate(ordered)}
    assert sorted(position) == ["a", "b", "c", "d", "e"]
    for question in ordered:
        for dependency in question.depends_on:
            assert position[dependency] < position[question.name]


def test_unknown_dependency() -> None:
    questions = parse_questions([{"name": "b", "dependsOn": ["ghost"]}])
    with pytest.raises(UnknownDependencyError) as exc_info:
        reorder(questions)
    assert exc_info.value.question == "b"
    assert exc_info.value.dependency == "ghost"
    assert isinstance(exc_info.value, ConfigurationError)


def test_cycle_detected() -> None:
    questions = parse_questions(
        [{"name": "a", "dependsOn": ["b"]}, {"name": "b", "dependsOn": ["a"]}]
    )
    with pytest.raises(CyclicDependencyError) as exc_info:
        reorder(questions)
    assert exc_info.value.cycle == ["a", "b", "a"]
    assert "a -> b -> a" in str(exc_info.value)


def test_self_dependency_is_a_cycle() -> None:
    questions = parse_questions([{"name": "a", "dependsOn": ["a"]}])
    with pytest.raises(CyclicDependencyError):
        reorder(questions)


def test_duplicate_names_rejected() -> None:
    questions = parse_questions([{"name": "a"}, {"name": "a"}])
    with pytest.raises(DuplicateQuestionError):
        index_by_name(questions)
    with pytest.raises(DuplicateQuestionError):
        reorder(questions)
