from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from inquirerer.engine.errors import (
    CyclicDependencyError,
    DuplicateQuestionError,
    UnknownDependencyError,
)
from inquirerer.questions.models import BaseQuestion

logger = logging.getLogger(__name__)

Q = TypeVar("Q", bound=BaseQuestion)


def index_by_name(questions: Sequence[Q]) -> dict[str, Q]:
    by_name: dict[str, Q] = {}
    for question in questions:
        if question.name in by_name:
            raise DuplicateQuestionError(question.name)
        by_name[question.name] = question
    return by_name


def reorder(questions: Sequence[Q]) -> list[Q]:
    """Order ``questions`` so every ``depends_on`` entry comes before its dependent.

    Depth-first: questions keep their original relative order unless a
    dependency has to be pulled forward. Unknown names and cycles are fatal.
    """
    by_name = index_by_name(questions)
    ordered: list[Q] = []
    emitted: set[str] = set()
    visiting: list[str] = []

    def visit(question: Q) -> None:
        if question.name in emitted:
            return
        if question.name in visiting:
            start = visiting.index(question.name)
            raise CyclicDependencyError(visiting[start:] + [question.name])

        visiting.append(question.name)
        for dependency in question.depends_on:
            target = by_name.get(dependency)
            if target is None:
                raise UnknownDependencyError(question.name, dependency)
            visit(target)
        visiting.pop()

        emitted.add(question.name)
        ordered.append(question)

    for question in questions:
        visit(question)

    logger.debug("Resolved question order: %s", [q.name for q in ordered])
    return ordered
