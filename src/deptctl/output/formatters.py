"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). The formatter layer adapts ServiceResult to the requested
output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from deptctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from deptctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, resolved once per invocation."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    line_numbers: bool = False
    json_compact: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; defaults to human-readable output.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        if settings.json_compact:
            return result.model_dump_json()
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        line_numbers=settings.line_numbers,
    )
