from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from inquirerer.questions.models import BaseQuestion


class ManPageOption(BaseModel):
    flag: str
    description: str = ""


class ManPageInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    command_name: str
    description: str = ""
    usage: str = ""
    options: list[ManPageOption] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)
    author: str = ""
    version: str = ""


def _question_options(questions: Sequence[BaseQuestion]) -> list[ManPageOption]:
    options = []
    for question in questions:
        text = question.message or question.description or ""
        if question.required:
            text = f"{text} (required)".strip()
        options.append(ManPageOption(flag=f"--{question.name}", description=text))
    return options


def _section(title: str, lines: list[str]) -> list[str]:
    return [title, *(f"    {line}" for line in lines), ""]


def render_man_page(info: ManPageInfo, questions: Sequence[BaseQuestion] = ()) -> str:
    """Plain-text reference page. Questions stand in for undeclared options."""
    name_line = info.command_name
    if info.description:
        name_line = f"{info.command_name} - {info.description}"

    lines = _section("NAME", [name_line])
    lines += _section("SYNOPSIS", [info.usage or f"{info.command_name} [OPTIONS]"])
    if info.description:
        lines += _section("DESCRIPTION", [info.description])

    options = info.options or _question_options(questions)
    if options:
        body: list[str] = []
        for option in options:
            body.append(option.flag)
            if option.description:
                body.append(f"    {option.description}")
        lines += _section("OPTIONS", body)

    if info.examples:
        lines += _section("EXAMPLES", info.examples)

    if info.author:
        lines += _section("AUTHOR", [info.author])

    footer = info.command_name
    if info.version:
        footer = f"{info.command_name} {info.version}"
    lines.append(footer)
    return "\n".join(lines)
