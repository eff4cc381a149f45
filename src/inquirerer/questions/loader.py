from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from inquirerer.engine.errors import QuestionFileError
from inquirerer.questions.models import BaseQuestion, parse_questions
from inquirerer.usage.man_page import ManPageInfo


@dataclass
class QuestionDocument:
    questions: list[BaseQuestion]
    usage: Optional[str] = None
    man_page: Optional[ManPageInfo] = None


def parse_question_document(raw: Any, source: str = "<string>") -> QuestionDocument:
    """Accept either a bare list of questions or a mapping with a ``questions``
    key and optional ``usage`` text and ``man`` page info."""
    usage = None
    man_page = None
    if isinstance(raw, dict):
        if "questions" not in raw:
            raise QuestionFileError(f"{source}: missing top-level 'questions' key")
        usage = raw.get("usage")
        if raw.get("man") is not None:
            try:
                man_page = ManPageInfo.model_validate(raw["man"])
            except ValidationError as e:
                raise QuestionFileError(f"{source}: invalid 'man' section: {e}") from e
        raw = raw["questions"]

    if not isinstance(raw, list):
        raise QuestionFileError(
            f"{source}: questions must be a list, got {type(raw).__name__}"
        )
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            raise QuestionFileError(f"{source}: question #{index} must be a mapping")

    try:
        questions = parse_questions(raw)
    except ValidationError as e:
        raise QuestionFileError(f"{source}: {e}") from e
    return QuestionDocument(questions=questions, usage=usage, man_page=man_page)


def load_question_document(path: Path) -> QuestionDocument:
    """Load a YAML or JSON question file (JSON is read as YAML)."""
    if not path.is_file():
        raise QuestionFileError(f"Question file not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise QuestionFileError(f"{path}: {e}") from e
    return parse_question_document(raw, source=str(path))


def load_questions(path: Path) -> list[BaseQuestion]:
    return load_question_document(path).questions
