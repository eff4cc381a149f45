from inquirerer.questions.models import parse_questions
from inquirerer.usage.man_page import ManPageInfo, ManPageOption, render_man_page


def test_minimal_page() -> None:
    page = render_man_page(ManPageInfo(command_name="tool"))
    assert page.splitlines() == ["NAME", "    tool", "", "SYNOPSIS", "    tool [OPTIONS]", "", "tool"]


def test_full_page_sections_in_order() -> None:
    info = ManPageInfo(
        command_name="tool",
        description="Does a thing",
        usage="tool --name NAME",
        options=[ManPageOption(flag="--name", description="Who to greet")],
        examples=["tool --name ada"],
        author="Ada Lovelace",
        version="2.0.0",
    )
    page = render_man_page(info)
    headings = [line for line in page.splitlines() if line and not line.startswith(" ")]
    assert headings == ["NAME", "SYNOPSIS", "DESCRIPTION", "OPTIONS", "EXAMPLES", "AUTHOR", "tool 2.0.0"]
    assert "    tool - Does a thing" in page
    assert "    tool --name NAME" in page
    assert "    --name\n        Who to greet" in page


def test_questions_fill_in_options() -> None:
    questions = parse_questions(
        [
            {"name": "name", "message": "Project name", "required": True},
            {"name": "quiet", "type": "confirm", "description": "Less output"},
            {"name": "bare"},
        ]
    )
    page = render_man_page(ManPageInfo(command_name="tool"), questions)
    assert "    --name\n        Project name (required)" in page
    assert "    --quiet\n        Less output" in page
    assert "    --bare\n" in page


def test_declared_options_win_over_questions() -> None:
    questions = parse_questions([{"name": "name"}])
    info = ManPageInfo(command_name="tool", options=[ManPageOption(flag="-n")])
    page = render_man_page(info, questions)
    assert "-n" in page
    assert "--name" not in page


def test_camel_case_keys_accepted() -> None:
    info = ManPageInfo.model_validate({"commandName": "tool"})
    assert info.command_name == "tool"
