"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the session's Directory and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deptctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from deptctl.config.settings import DeptSettings
    from deptctl.services.directory import DirectoryService
    from deptctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The directory service is created lazily so ``--help`` and
    ``--version`` never build one.  Each invocation gets its own empty
    Directory; nothing is persisted.
    """

    def __init__(self, settings: DeptSettings) -> None:
        self.settings = settings
        self._directory_service: DirectoryService | None = None

        from deptctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from deptctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def directory_service(self) -> DirectoryService:
        """Service over this invocation's Directory (created on first access)."""
        if self._directory_service is None:
            from deptctl.domain.directory import Directory
            from deptctl.services.directory import DirectoryService

            self._directory_service = DirectoryService(
                Directory(),
                suggest_cutoff=self.settings.shell.suggest_cutoff,
            )
        return self._directory_service

    def output_settings(self, *, line_numbers: bool = False, compact: bool = False) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            line_numbers=line_numbers,
            json_compact=compact,
        )

    def report(self, result: ServiceResult, *, compact: bool = False) -> bool:
        """Write a result without exiting; return ``result.ok``.

        Successes go to stdout, failures to stderr.  Used by loops that
        keep going after a failed command.
        """
        output = format_result(result, settings=self.output_settings(compact=compact))
        if output:
            click.echo(output, err=not result.ok)
        return result.ok

    def emit(self, result: ServiceResult, *, line_numbers: bool = False) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, settings=self.output_settings(line_numbers=line_numbers))
        if result.ok:
            if output:
                click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
