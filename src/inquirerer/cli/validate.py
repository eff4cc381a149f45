from __future__ import annotations

from pathlib import Path

import typer

from inquirerer.engine.dependencies import reorder
from inquirerer.engine.errors import ConfigurationError
from inquirerer.questions.loader import load_question_document


def validate(spec: Path = typer.Argument(..., help="YAML or JSON question file")) -> None:
    """Check a question file and print the order questions will be asked in."""
    try:
        document = load_question_document(spec)
        ordered = reorder(document.questions)
    except ConfigurationError as e:
        typer.echo(f"  ERROR: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Questions: {len(ordered)}")
    for position, question in enumerate(ordered, start=1):
        flags = " (required)" if question.required else ""
        depends = f" <- {', '.join(question.depends_on)}" if question.depends_on else ""
        typer.echo(f"  {position}. {question.name} [{question.type}]{flags}{depends}")
