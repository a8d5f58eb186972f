from __future__ import annotations

import logging
import sys
import typing

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ._client import Canvas
from ._config import TOKEN_ENV_VAR, URL_ENV_VAR, CanvasConfig
from ._exceptions import CanvasError
from .models import Course

# ---------------------------------------------------------------------------
# Row helpers
# ---------------------------------------------------------------------------

COLUMNS = ("id", "course_code", "name", "workflow_state")


def _state_color(state: str) -> str:
    return {
        "available": "green",
        "unpublished": "yellow",
        "completed": "dim",
        "deleted": "red",
    }.get(state, "")


def course_row(course: Course) -> tuple[str, ...]:
    state = course.workflow_state.value if course.workflow_state else ""
    return (
        str(course.id),
        course.course_code or "",
        course.name or "",
        state,
    )


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def format_courses_plain(courses: typing.Iterable[Course]) -> str:
    lines = ["\t".join(COLUMNS)]
    for course in courses:
        lines.append("\t".join(course_row(course)))
    return "\n".join(lines)


def print_courses_rich(console: Console, courses: typing.Iterable[Course]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Code")
    table.add_column("Name")
    table.add_column("State")

    count = 0
    for course in courses:
        course_id, code, name, state = course_row(course)
        color = _state_color(state)
        table.add_row(course_id, Text(code), Text(name), Text(state, style=color))
        count += 1

    console.print(table)
    console.print(f"[dim]{count} course(s)[/dim]")


# ---------------------------------------------------------------------------
# CLI commands
# ---------------------------------------------------------------------------


@click.group(help="Command line access to the Canvas LMS API.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
def main(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _use_rich(no_color: bool, as_json: bool) -> bool:
    return not as_json and not no_color and sys.stdout.isatty()


@main.command(help="List the courses of the authenticated user.")
@click.option(
    "--url",
    envvar=URL_ENV_VAR,
    required=True,
    help=f"Canvas base URL, e.g. https://canvas.example.edu/ (or ${URL_ENV_VAR}).",
)
@click.option(
    "--token",
    envvar=TOKEN_ENV_VAR,
    required=True,
    help=f"API access token (or ${TOKEN_ENV_VAR}).",
)
@click.option(
    "--all", "fetch_all", is_flag=True, default=False, help="Follow every page."
)
@click.option(
    "--per-page", type=click.IntRange(min=1), default=None, help="Page size."
)
@click.option(
    "--json", "as_json", is_flag=True, default=False, help="One JSON object per line."
)
@click.option(
    "--no-color", is_flag=True, default=False, help="Disable colored output."
)
def courses(
    url: str,
    token: str,
    fetch_all: bool,
    per_page: int | None,
    as_json: bool,
    no_color: bool,
) -> None:
    use_rich = _use_rich(no_color, as_json)
    params = {"per_page": per_page} if per_page is not None else None

    try:
        config = CanvasConfig.build(url, token)
        with Canvas(config) as canvas:
            handler = canvas.courses()
            if fetch_all:
                items: list[Course] = handler.iter_my_courses(params).collect()
            else:
                items = list(handler.my_courses(params))

            if as_json:
                for course in items:
                    click.echo(course.model_dump_json(exclude_none=True))
            elif use_rich:
                print_courses_rich(Console(), items)
            else:
                click.echo(format_courses_plain(items))

    except CanvasError as exc:
        if use_rich:
            console = Console(stderr=True)
            console.print(
                Text.assemble((type(exc).__name__, "bold red"), ": ", str(exc))
            )
        else:
            click.echo(f"{type(exc).__name__}: {exc}", err=True)
        sys.exit(1)
