from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

import canvasr
from canvasr import cli

from .conftest import BASE_URL, COURSES_URL, MockCanvas


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def mock_server(server: MockCanvas, monkeypatch: pytest.MonkeyPatch) -> MockCanvas:
    def make_canvas(config: canvasr.CanvasConfig) -> canvasr.Canvas:
        return canvasr.Canvas(config, transport=server.transport())

    monkeypatch.setattr(cli, "Canvas", make_canvas)
    monkeypatch.delenv("CANVAS_API_URL", raising=False)
    monkeypatch.delenv("CANVAS_API_TOKEN", raising=False)
    return server


def invoke(runner: CliRunner, *args: str, **kwargs):
    return runner.invoke(
        cli.main, ["courses", "--url", BASE_URL, "--token", "tok", *args], **kwargs
    )


def test_first_page_plain(runner: CliRunner, server: MockCanvas) -> None:
    server.add_page(
        COURSES_URL,
        [
            {"id": 1, "course_code": "BIO101", "name": "Biology", "workflow_state": "available"},
            {"id": 2, "name": "Chemistry"},
        ],
        {"next": COURSES_URL + "?page=2"},
    )

    result = invoke(runner)

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "id\tcourse_code\tname\tworkflow_state"
    assert lines[1] == "1\tBIO101\tBiology\tavailable"
    assert lines[2] == "2\t\tChemistry\t"
    assert server.requested_urls() == [COURSES_URL]


def test_all_pages_json(runner: CliRunner, server: MockCanvas) -> None:
    urls = [COURSES_URL + "?per_page=2", COURSES_URL + "?page=2&per_page=2"]
    server.add_chain(urls)

    result = invoke(runner, "--all", "--json", "--per-page", "2")

    assert result.exit_code == 0, result.output
    records = [json.loads(line) for line in result.output.splitlines()]
    assert [record["id"] for record in records] == [1, 2, 3, 4]
    assert "uuid" not in records[0]
    assert server.requested_urls() == urls


def test_bearer_token_sent(runner: CliRunner, server: MockCanvas) -> None:
    server.add_page(COURSES_URL, [])

    result = invoke(runner)

    assert result.exit_code == 0, result.output
    assert server.requests[0].headers["authorization"] == "Bearer tok"


def test_environment_variables(
    runner: CliRunner, server: MockCanvas
) -> None:
    server.add_page(COURSES_URL, [{"id": 5}])

    result = runner.invoke(
        cli.main,
        ["courses", "--json"],
        env={"CANVAS_API_URL": BASE_URL, "CANVAS_API_TOKEN": "envtok"},
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"id": 5}
    assert server.requests[0].headers["authorization"] == "Bearer envtok"


def test_request_failure_exits_nonzero(runner: CliRunner) -> None:
    result = invoke(runner)

    assert result.exit_code == 1
    assert "RequestFailure" in result.output


def test_invalid_url(runner: CliRunner) -> None:
    result = runner.invoke(
        cli.main, ["courses", "--url", "canvas.example.edu", "--token", "tok"]
    )

    assert result.exit_code == 1
    assert "InvalidBaseURL" in result.output


def test_missing_token(runner: CliRunner) -> None:
    result = runner.invoke(cli.main, ["courses", "--url", BASE_URL])

    assert result.exit_code == 2
    assert "--token" in result.output


def test_verbose_flag(runner: CliRunner, server: MockCanvas) -> None:
    server.add_page(COURSES_URL, [])

    result = runner.invoke(
        cli.main, ["-v", "courses", "--url", BASE_URL, "--token", "tok", "--no-color"]
    )

    assert result.exit_code == 0, result.output


def test_format_courses_plain() -> None:
    courses = [canvasr.Course(id=9, name="Art", course_code="ART1")]
    assert cli.format_courses_plain(courses) == (
        "id\tcourse_code\tname\tworkflow_state\n9\tART1\tArt\t"
    )


def test_print_courses_rich() -> None:
    from rich.console import Console

    console = Console(record=True, width=120)
    cli.print_courses_rich(
        console,
        [canvasr.Course(id=9, name="Art", workflow_state="available")],
    )

    text = console.export_text()
    assert "Art" in text
    assert "1 course(s)" in text


@pytest.mark.parametrize(
    "name, code",
    [
        ("Intro [/lab] 101", "LAB[/x]"),
        ("Chem [bold]Lab", "[red]CHEM"),
    ],
)
def test_print_courses_rich_keeps_brackets(name: str, code: str) -> None:
    from rich.console import Console

    console = Console(record=True, width=120)
    cli.print_courses_rich(console, [canvasr.Course(id=3, name=name, course_code=code)])

    text = console.export_text()
    assert name in text
    assert code in text


def test_bracketed_names_in_table_output(
    runner: CliRunner, mock_server: MockCanvas, monkeypatch: pytest.MonkeyPatch
) -> None:
    mock_server.add_page(COURSES_URL, [{"id": 3, "name": "Intro [/lab] 101"}])
    monkeypatch.setattr(cli, "_use_rich", lambda no_color, as_json: True)

    result = invoke(runner)

    assert result.exit_code == 0, result.output
    assert "Intro [/lab] 101" in result.output


def test_rich_error_message_keeps_brackets(
    runner: CliRunner, mock_server: MockCanvas, monkeypatch: pytest.MonkeyPatch
) -> None:
    mock_server.add_page(COURSES_URL, [{"name": "no id"}])
    monkeypatch.setattr(cli, "_use_rich", lambda no_color, as_json: True)

    result = invoke(runner)

    assert result.exit_code == 1
    assert "DecodeFailure" in result.output
    assert "[type=missing" in result.output
