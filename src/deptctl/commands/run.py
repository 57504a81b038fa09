"""Command: execute command lines given as arguments."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deptctl.commands._base import DeptCommand

if TYPE_CHECKING:
    from deptctl.commands._context import AppContext


@click.command(
    cls=DeptCommand,
    examples="""\
  deptctl run "Add Sally to Engineering" "Add Amir to Sales" "Print"
  deptctl run "Add Sally to Engineering" "Move Sally from Engineering to Sales" "Print Sales"
  deptctl --json run "Add Sally to Engineering" Print""",
)
@click.argument("lines", nargs=-1, required=True)
@click.pass_obj
def run(app: AppContext, lines: tuple[str, ...]) -> None:
    """Run each LINE as a command against one fresh directory.

    Every line is executed even after a failure; the exit code is 1 if any
    command failed.
    """
    svc = app.directory_service
    failed = 0
    for line in lines:
        result = svc.execute(line)
        if not app.report(result, compact=app.settings.json_output):
            failed += 1
        if result.ok and result.op == "exit":
            break
    if failed:
        raise SystemExit(1)
