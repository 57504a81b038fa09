"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Search results bypass Rich unless verbose output is requested.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from deptctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from deptctl.services.result import ServiceResult

    _Renderer = Callable[[ServiceResult, Console, bool], None]

# Ops that print nothing on success.
_SILENT_OPS = frozenset({"noop"})


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    line_numbers: bool = False,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    if result.ok and result.op == "search" and not verbose:
        return format_search_lines(result, line_numbers=line_numbers)

    console = create_console()

    if not result.ok:
        _render_error(result, console)
    elif result.op in _SILENT_OPS:
        pass
    elif result.op == "search":
        _render_search(result, console, line_numbers)
    else:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose)

    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def format_search_lines(result: ServiceResult, *, line_numbers: bool = False) -> str:
    """Matching lines exactly as they appear in the file, one per line.

    Bypasses Rich so tabs and long lines reach stdout untouched.
    """
    matches = result.data.get("matches", [])
    if line_numbers:
        return "\n".join(f"{m['line_number']}:{m['line']}" for m in matches)
    return "\n".join(m["line"] for m in matches)


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if result.op in _SILENT_OPS or result.op == "exit":
        return ""
    lines = _listing(result)
    if lines is not None:
        return "\n".join(lines)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _listing(result: ServiceResult) -> list[str] | None:
    """The line-per-entry payload of listing ops, if any."""
    if result.op == "print":
        return list(result.data.get("employees", []))
    if result.op == "search":
        return list(result.data.get("lines", []))
    if result.op == "help":
        return list(result.data.get("commands", []))
    return None


def _line(console: Console, *parts: Text | str) -> None:
    console.print(Text.assemble(*parts), soft_wrap=True)


def _name(value: Any) -> Text:
    return Text(str(value), style="dept.name")


def _dept(value: Any) -> Text:
    return Text(str(value), style="dept.department")


def _render_error(result: ServiceResult, console: Console) -> None:
    msg = result.error.message if result.error else "Unknown error"
    _line(
        console,
        Text("ERROR", style="dept.error"),
        Text(f"  {result.op}  ", style="dept.op"),
        msg,
    )


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree."""
    if not result.meta:
        return

    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            _line(console, f"    {k}: {v}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    """Render a span tree with color-coded timing."""
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"

    text = Text(prefix)
    text.append(f"{duration:>8.2f}ms", style=style)
    text.append(f"  {span_data.get('name', '?')}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        text.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(text, soft_wrap=True)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 2)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_add(result: ServiceResult, console: Console, verbose: bool) -> None:
    d = result.data
    _line(console, "Added ", _name(d["name"]), " to ", _dept(d["department"]))


def _render_remove(result: ServiceResult, console: Console, verbose: bool) -> None:
    d = result.data
    _line(console, "Removed ", _name(d["name"]), " from ", _dept(d["department"]))
    if d.get("department_removed"):
        _line(console, Text("Department is now empty and was removed", style="dept.hint"))


def _render_move(result: ServiceResult, console: Console, verbose: bool) -> None:
    d = result.data
    _line(
        console,
        "Moved ",
        _name(d["name"]),
        " from ",
        _dept(d["from_department"]),
        " to ",
        _dept(d["to_department"]),
    )


def _render_rename(result: ServiceResult, console: Console, verbose: bool) -> None:
    d = result.data
    _line(
        console,
        "Renamed ",
        _name(d["name"]),
        " to ",
        _name(d["new_name"]),
        " in ",
        _dept(d["department"]),
    )


def _render_print(result: ServiceResult, console: Console, verbose: bool) -> None:
    employees = result.data.get("employees", [])
    if not employees:
        _line(console, Text("No employees.", style="dept.hint"))
        return
    department = result.data.get("department")
    if department:
        _line(console, _dept(department), Text(f" ({len(employees)})", style="dept.key"))
        for name in employees:
            _line(console, "  ", name)
    else:
        for entry in employees:
            _line(console, entry)


def _render_help(result: ServiceResult, console: Console, verbose: bool) -> None:
    _line(console, "Commands:")
    for usage in result.data.get("commands", []):
        _line(console, f"  {usage}")


def _render_exit(result: ServiceResult, console: Console, verbose: bool) -> None:
    _line(console, Text("Bye.", style="dept.hint"))


def _render_search(result: ServiceResult, console: Console, line_numbers: bool) -> None:
    for m in result.data.get("matches", []):
        if line_numbers:
            _line(console, Text(f"{m['line_number']}:", style="dept.lineno"), m["line"])
        else:
            _line(console, m["line"])


_OP_RENDERERS: dict[str, _Renderer] = {
    "add": _render_add,
    "remove": _render_remove,
    "move": _render_move,
    "rename": _render_rename,
    "print": _render_print,
    "help": _render_help,
    "exit": _render_exit,
}
