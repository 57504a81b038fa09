"""DirectoryService: directory operations and command-line dispatch.

Pipeline for ``execute``: PARSE → DISPATCH → RESPOND.
Every failure comes back as a ``ServiceResult`` with one of the codes
``MISSING_ARGUMENT``, ``MALFORMED``, ``DEPARTMENT_NOT_FOUND``,
``EMPLOYEE_NOT_FOUND``, ``DUPLICATE_EMPLOYEE`` or ``UNKNOWN_COMMAND``.
"""

from __future__ import annotations

import logging

from deptctl.domain.commands import (
    DEFAULT_SUGGEST_CUTOFF,
    GRAMMAR,
    Command,
    CommandParseError,
    Verb,
    parse_command,
)
from deptctl.domain.directory import Directory, DirectoryError
from deptctl.services.base import BaseService
from deptctl.services.result import ServiceResult
from deptctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class DirectoryService(BaseService):
    """Operates on one caller-owned :class:`Directory`."""

    def __init__(
        self,
        directory: Directory,
        *,
        suggest_cutoff: float = DEFAULT_SUGGEST_CUTOFF,
    ) -> None:
        self._directory = directory
        self._suggest_cutoff = suggest_cutoff

    @property
    def directory(self) -> Directory:
        return self._directory

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    @traced
    def add(self, name: str, department: str) -> ServiceResult:
        """Add *name* to *department*, creating the department if needed."""
        return self._add(name, department)

    @traced
    def remove(self, name: str, department: str) -> ServiceResult:
        """Remove *name* from *department*; drop the department once empty."""
        return self._remove(name, department)

    @traced
    def move(self, name: str, from_department: str, to_department: str) -> ServiceResult:
        """Move *name* between departments; nothing changes on failure."""
        return self._move(name, from_department, to_department)

    @traced
    def rename(self, old_name: str, department: str, new_name: str) -> ServiceResult:
        """Rename an employee in place, keeping the department sorted."""
        return self._rename(old_name, department, new_name)

    @traced
    def print(self, department: str | None = None) -> ServiceResult:
        """List one department, or everyone as ``"name (department)"``."""
        return self._print(department)

    def help(self) -> ServiceResult:
        return ServiceResult.success("help", commands=list(GRAMMAR))

    # ------------------------------------------------------------------
    # Command lines
    # ------------------------------------------------------------------

    @traced
    def execute(self, line: str) -> ServiceResult:
        """Parse one command line and run it against the directory.

        Dispatch goes to the untraced operation bodies so the whole line
        is timed as a single span tree.
        """
        with trace_span("parse"):
            try:
                command = parse_command(line, suggest_cutoff=self._suggest_cutoff)
            except CommandParseError as exc:
                op = exc.verb.value.lower() if exc.verb else "parse"
                return ServiceResult.failure(op, exc.code, exc.message, {"line": line})

        if command is None:
            return ServiceResult.success("noop")

        with trace_span("dispatch") as span:
            if span is not None:
                span.annotate("verb", command.verb.value)
            return self._dispatch(command)

    def _dispatch(self, command: Command) -> ServiceResult:
        verb = command.verb
        if verb is Verb.ADD:
            return self._add(command.name, command.department)
        if verb is Verb.REMOVE:
            return self._remove(command.name, command.department)
        if verb is Verb.MOVE:
            return self._move(command.name, command.department, command.target)
        if verb is Verb.RENAME:
            return self._rename(command.name, command.department, command.target)
        if verb is Verb.PRINT:
            return self._print(command.department)
        if verb is Verb.HELP:
            return self.help()
        if verb is Verb.EXIT:
            return ServiceResult.success("exit")
        return self._unknown(command)

    # ------------------------------------------------------------------
    # Operation bodies
    # ------------------------------------------------------------------

    def _add(self, name: str, department: str) -> ServiceResult:
        try:
            self._directory.add(name, department)
        except DirectoryError as exc:
            return self._fail_from("add", exc)
        logger.debug("Added %s to %s", name, department)
        return ServiceResult.success("add", name=name, department=department)

    def _remove(self, name: str, department: str) -> ServiceResult:
        try:
            self._directory.remove(name, department)
        except DirectoryError as exc:
            return self._fail_from("remove", exc)
        return ServiceResult.success(
            "remove",
            name=name,
            department=department,
            department_removed=department not in self._directory,
        )

    def _move(self, name: str, from_department: str, to_department: str) -> ServiceResult:
        try:
            self._directory.move(name, from_department, to_department)
        except DirectoryError as exc:
            return self._fail_from("move", exc)
        return ServiceResult.success(
            "move",
            name=name,
            from_department=from_department,
            to_department=to_department,
        )

    def _rename(self, old_name: str, department: str, new_name: str) -> ServiceResult:
        try:
            self._directory.rename(old_name, department, new_name)
        except DirectoryError as exc:
            return self._fail_from("rename", exc)
        return ServiceResult.success(
            "rename",
            name=old_name,
            new_name=new_name,
            department=department,
        )

    def _print(self, department: str | None) -> ServiceResult:
        try:
            employees = self._directory.listing(department)
        except DirectoryError as exc:
            return self._fail_from("print", exc)
        return ServiceResult.success(
            "print",
            department=department or None,
            employees=employees,
            count=len(employees),
        )

    def _unknown(self, command: Command) -> ServiceResult:
        if command.suggestion is not None:
            message = f"Unknown command '{command.raw}'. Did you mean '{command.suggestion}'?"
        else:
            message = f"Unknown command '{command.raw}'. Try 'Help'."
        return ServiceResult.failure(
            "unknown",
            "UNKNOWN_COMMAND",
            message,
            {
                "verb": command.raw,
                "suggestion": command.suggestion.value if command.suggestion else None,
            },
        )
