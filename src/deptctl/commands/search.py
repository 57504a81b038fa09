"""Command: print the lines of a file that contain a query string."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import click

from deptctl.commands._base import DeptCommand
from deptctl.services.search import SearchService

if TYPE_CHECKING:
    from deptctl.commands._context import AppContext

# Presence of this variable (any value) selects case-insensitive search.
CASE_INSENSITIVE_ENV = "CASE_INSENSITIVE"


@click.command(
    cls=DeptCommand,
    examples="""\
  deptctl search the poem.txt
  deptctl search -i rust notes.txt
  CASE_INSENSITIVE=1 deptctl search to poem.txt
  deptctl search -n body poem.txt
  deptctl --json search frog poem.txt""",
)
@click.argument("query")
@click.argument("path", type=click.Path())
@click.option("-i", "--ignore-case", is_flag=True, help="Match regardless of case.")
@click.option(
    "--case-sensitive",
    is_flag=True,
    help="Match case exactly, even when CASE_INSENSITIVE is set.",
)
@click.option("-n", "--line-number", is_flag=True, help="Prefix each line with its number.")
@click.pass_obj
def search(
    app: AppContext,
    query: str,
    path: str,
    ignore_case: bool,
    case_sensitive: bool,
    line_number: bool,
) -> None:
    """Print every line of PATH that contains QUERY.

    Case-insensitive when -i is given, when the CASE_INSENSITIVE
    environment variable is set, or when [search] case_insensitive is
    enabled in deptctl.toml.
    """
    if ignore_case and case_sensitive:
        raise click.UsageError("--ignore-case and --case-sensitive are mutually exclusive")

    if case_sensitive:
        insensitive = False
    elif ignore_case:
        insensitive = True
    else:
        insensitive = CASE_INSENSITIVE_ENV in os.environ or app.settings.search.case_insensitive

    svc = SearchService(encoding=app.settings.search.encoding)
    result = svc.search_file(query, path, case_sensitive=not insensitive)
    app.emit(result, line_numbers=line_number or app.settings.search.line_numbers)
