from __future__ import annotations

"""
Build a validated management hierarchy from a flat roster.

The builder is a single pass over the input that either returns a complete, read-only
`Hierarchy` or raises; there is no partial result and no mutation API afterwards.
Any change to the roster means building a new hierarchy.
"""

from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .employee import Employee
from .errors import (
    CyclicReportingLineError,
    DuplicateIdError,
    MissingRootError,
    MultipleRootsError,
    UnknownManagerError,
)


@dataclass(frozen=True)
class Hierarchy:
    root: Employee
    employees: tuple[Employee, ...]
    by_id: Mapping[str, Employee]
    children_of: Mapping[str, tuple[Employee, ...]]

    def get(self, employee_id: str) -> Employee | None:
        return self.by_id.get(employee_id)

    def direct_reports(self, employee_id: str) -> tuple[Employee, ...]:
        # Unknown ids and leaves both answer with an empty tuple.
        return self.children_of.get(employee_id, ())

    def managers(self) -> tuple[Employee, ...]:
        """Employees with at least one direct report, in roster order."""
        return tuple(e for e in self.employees if self.children_of.get(e.id))

    def __len__(self) -> int:
        return len(self.employees)


def build_hierarchy(employees: Iterable[Employee]) -> Hierarchy:
    """
    Validate and index a roster.

    Checks run in this order and fail on the first problem found:
    - exactly one employee without a manager (MissingRootError / MultipleRootsError)
    - unique ids (DuplicateIdError)
    - every manager_id resolves (UnknownManagerError, first offender in roster order)
    - every employee is reachable from the root (CyclicReportingLineError)
    """
    roster = tuple(employees)

    roots = [e for e in roster if e.is_root]
    if not roots:
        raise MissingRootError()
    if len(roots) > 1:
        raise MultipleRootsError(tuple(roots))
    root_emp = roots[0]

    by_id: dict[str, Employee] = {}
    for e in roster:
        if e.id in by_id:
            raise DuplicateIdError(e.id)
        by_id[e.id] = e

    grouped: dict[str, list[Employee]] = {}
    for e in roster:
        if e.is_root:
            continue
        if e.manager_id not in by_id:
            raise UnknownManagerError(e.id, str(e.manager_id))
        grouped.setdefault(str(e.manager_id), []).append(e)

    # A single root plus resolving references can still hide a closed loop
    # (A -> B -> A) that never reaches the root.
    reached = {root_emp.id}
    queue = deque([root_emp.id])
    while queue:
        for child in grouped.get(queue.popleft(), []):
            if child.id not in reached:
                reached.add(child.id)
                queue.append(child.id)
    for e in roster:
        if e.id not in reached:
            raise CyclicReportingLineError(e.id)

    return Hierarchy(
        root=root_emp,
        employees=roster,
        by_id=MappingProxyType(by_id),
        children_of=MappingProxyType({k: tuple(v) for k, v in grouped.items()}),
    )


def root(hierarchy: Hierarchy) -> Employee:
    return hierarchy.root


def direct_reports(hierarchy: Hierarchy, employee_id: str) -> tuple[Employee, ...]:
    return hierarchy.direct_reports(employee_id)
