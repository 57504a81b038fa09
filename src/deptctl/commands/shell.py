"""Command: interactive read-dispatch loop over an in-memory directory."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import click

from deptctl.commands._base import DeptCommand

if TYPE_CHECKING:
    from deptctl.commands._context import AppContext


@click.command(
    cls=DeptCommand,
    examples="""\
  deptctl shell
  deptctl shell --script commands.txt
  printf 'Add Sally to Engineering\\nPrint\\n' | deptctl shell
  deptctl --json shell --script commands.txt""",
)
@click.option(
    "--script",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Read commands from a file instead of stdin.",
)
@click.option("--no-prompt", is_flag=True, help="Never print the prompt or banner.")
@click.pass_obj
def shell(app: AppContext, script: TextIO | None, no_prompt: bool) -> None:
    """Run directory commands one line at a time until Exit or end of input.

    A failed command is reported on stderr and the session continues.
    """
    stream = script if script is not None else sys.stdin
    interactive = script is None and not no_prompt and stream.isatty()
    svc = app.directory_service
    compact = app.settings.json_output

    if interactive and app.settings.shell.banner:
        click.echo("Employee directory. Type 'Help' for commands, 'Exit' to quit.")

    try:
        while True:
            if interactive:
                click.echo(app.settings.shell.prompt, nl=False)
            line = stream.readline()
            if not line:
                break
            result = svc.execute(line)
            app.report(result, compact=compact)
            if result.ok and result.op == "exit":
                break
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Cannot read input: {exc}") from exc
