from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import BaseModel

from inquirerer.config.settings import load_config
from inquirerer.engine.errors import (
    ConfigurationError,
    MissingRequiredArgumentsError,
    PromptAbortedError,
    ValidationFailedError,
)
from inquirerer.prompter import Prompter
from inquirerer.questions.loader import load_question_document
from inquirerer.questions.models import BaseQuestion, ConfirmQuestion, NumberQuestion
from inquirerer.renderers.line import parse_confirm, parse_number


def _parse_vars(raw: list[str]) -> dict[str, Any]:
    """Parse ``key=value`` pairs from CLI arguments. Repeated keys collect into a list.

    Raises :class:`typer.BadParameter` on malformed input.
    """
    result: dict[str, Any] = {}
    for item in raw:
        if "=" not in item:
            raise typer.BadParameter(f"Expected key=value, got: {item!r}")
        key, _, value = item.partition("=")
        if not key:
            raise typer.BadParameter(f"Empty key in: {item!r}")
        if key in result:
            previous = result[key]
            result[key] = [*previous, value] if isinstance(previous, list) else [previous, value]
        else:
            result[key] = value
    return result


def _coerce_vars(values: dict[str, Any], questions: list[BaseQuestion]) -> dict[str, Any]:
    """Turn command-line strings into the types confirm/number questions produce."""
    by_name = {q.name: q for q in questions}
    for key, value in values.items():
        question = by_name.get(key)
        if not isinstance(value, str):
            continue
        if isinstance(question, ConfirmQuestion):
            values[key] = parse_confirm(value, None)
        elif isinstance(question, NumberQuestion):
            number = parse_number(value)
            if number is None:
                raise typer.BadParameter(f"Expected a number for {key}, got: {value!r}")
            values[key] = number
    return values


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(exclude_none=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def ask(
    spec: Path = typer.Argument(..., help="YAML or JSON question file"),
    vars: Optional[list[str]] = typer.Argument(None, help="Known answers as key=value pairs"),
    no_tty: bool = typer.Option(False, "--no-tty", help="Resolve from supplied values and defaults only"),
    use_defaults: bool = typer.Option(False, "--use-defaults", help="Accept every default without asking"),
    json_indent: int = typer.Option(2, "--json-indent", help="Indentation of the JSON output"),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
) -> None:
    """Ask the questions in SPEC and print the answers as JSON."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = load_config(start=spec.resolve().parent)
    if no_tty:
        config.no_tty = True
    if use_defaults:
        config.use_defaults = True

    try:
        document = load_question_document(spec)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    argv = _coerce_vars(_parse_vars(vars or []), document.questions)

    prompter = Prompter(config=config)
    try:
        answers = prompter.prompt(
            argv,
            document.questions,
            usage_text=document.usage,
            man_page_info=document.man_page,
        )
    except MissingRequiredArgumentsError as e:
        typer.echo(e.reference or e.usage_text or str(e), err=True)
        if e.reference or e.usage_text:
            typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    except (ConfigurationError, ValidationFailedError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    except PromptAbortedError as e:
        typer.echo(f"Aborted: {e}", err=True)
        raise typer.Exit(code=1)
    finally:
        prompter.close()

    typer.echo(json.dumps(answers, indent=json_indent or None, default=_json_default))
