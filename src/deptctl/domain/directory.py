"""In-memory employee directory grouped by department.

INVARIANTS:
- A department key exists if and only if it has at least one employee.
- Each department's names are unique and kept sorted by codepoint.
- A failed operation leaves the directory untouched.
"""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import ClassVar


class DirectoryError(Exception):
    """Base class for directory rule violations."""

    code: ClassVar[str] = "DIRECTORY_ERROR"

    def __init__(self, message: str, **detail: str) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class MissingArgumentError(DirectoryError):
    code = "MISSING_ARGUMENT"


class DepartmentNotFoundError(DirectoryError):
    code = "DEPARTMENT_NOT_FOUND"


class EmployeeNotFoundError(DirectoryError):
    code = "EMPLOYEE_NOT_FOUND"


class DuplicateEmployeeError(DirectoryError):
    code = "DUPLICATE_EMPLOYEE"


def _index_of(names: list[str], name: str) -> int | None:
    """Binary search for *name* in a sorted list."""
    i = bisect_left(names, name)
    if i < len(names) and names[i] == name:
        return i
    return None


class Directory:
    """Department name -> sorted list of employee names.

    Owned by a single driving loop; no locking is done here.
    """

    def __init__(self) -> None:
        self._departments: dict[str, list[str]] = {}

    def __len__(self) -> int:
        return sum(len(names) for names in self._departments.values())

    def __contains__(self, department: object) -> bool:
        return department in self._departments

    def departments(self) -> list[str]:
        return sorted(self._departments)

    def members(self, department: str) -> list[str]:
        """Return a copy of *department*'s sorted names."""
        return list(self._names(department))

    def _names(self, department: str) -> list[str]:
        names = self._departments.get(department)
        if names is None:
            raise DepartmentNotFoundError(
                f"Department '{department}' not found", department=department
            )
        return names

    def has_employee(self, name: str, department: str) -> bool:
        names = self._departments.get(department)
        return names is not None and _index_of(names, name) is not None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, name: str, department: str) -> None:
        _require(name=name, department=department)
        if self.has_employee(name, department):
            raise DuplicateEmployeeError(
                f"{name} is already in {department}", name=name, department=department
            )
        insort(self._departments.setdefault(department, []), name)

    def remove(self, name: str, department: str) -> None:
        _require(name=name, department=department)
        names = self._names(department)
        i = _index_of(names, name)
        if i is None:
            raise EmployeeNotFoundError(
                f"{name} is not in {department}", name=name, department=department
            )
        del names[i]
        if not names:
            del self._departments[department]

    def move(self, name: str, from_department: str, to_department: str) -> None:
        _require(name=name, from_department=from_department, to_department=to_department)
        if not self.has_employee(name, from_department):
            raise EmployeeNotFoundError(
                f"{name} is not in {from_department}", name=name, department=from_department
            )
        if self.has_employee(name, to_department):
            raise DuplicateEmployeeError(
                f"{name} is already in {to_department}", name=name, department=to_department
            )
        self.remove(name, from_department)
        insort(self._departments.setdefault(to_department, []), name)

    def rename(self, old_name: str, department: str, new_name: str) -> None:
        _require(old_name=old_name, department=department, new_name=new_name)
        names = self._names(department)
        i = _index_of(names, old_name)
        if i is None:
            raise EmployeeNotFoundError(
                f"{old_name} is not in {department}", name=old_name, department=department
            )
        if new_name == old_name:
            return
        if _index_of(names, new_name) is not None:
            raise DuplicateEmployeeError(
                f"{new_name} is already in {department}", name=new_name, department=department
            )
        del names[i]
        insort(names, new_name)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def listing(self, department: str | None = None) -> list[str]:
        """Sorted names for *department*, or every ``"name (department)"``."""
        if department:
            return self.members(department)
        return sorted(
            f"{name} ({dept})" for dept, names in self._departments.items() for name in names
        )


def _require(**fields: str) -> None:
    for label, value in fields.items():
        if not value:
            raise MissingArgumentError(f"Missing {label.replace('_', ' ')}", field=label)
