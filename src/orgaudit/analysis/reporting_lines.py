from __future__ import annotations

"""
Reporting-line depth.

Counts the managers between an employee and the CEO (the CEO included) and flags
anyone above `max_reporting_depth`.
"""

from dataclasses import dataclass

from ..config import DEFAULT_POLICY, AnalysisPolicy
from ..employee import Employee
from ..errors import CyclicReportingLineError, UnknownManagerError
from ..hierarchy import Hierarchy


@dataclass(frozen=True)
class ReportingLineViolation:
    employee: Employee
    total_managers: int
    excess_managers: int


def count_managers_to_root(hierarchy: Hierarchy, employee: Employee) -> int:
    """
    Follow manager_id references up to the root, one count per hop.

    build_hierarchy already rejects cycles and dangling references; the checks here
    keep the walk finite and the count honest if a Hierarchy was assembled some
    other way.
    """
    visited: set[str] = set()
    count = 0
    current = employee

    while not current.is_root:
        if current.id in visited:
            raise CyclicReportingLineError(employee.id)
        visited.add(current.id)

        manager = hierarchy.by_id.get(str(current.manager_id))
        if manager is None:
            raise UnknownManagerError(current.id, str(current.manager_id))
        current = manager
        count += 1

    return count


def analyze_reporting_lines(
    hierarchy: Hierarchy, *, policy: AnalysisPolicy = DEFAULT_POLICY
) -> tuple[ReportingLineViolation, ...]:
    limit = int(policy.max_reporting_depth)
    violations: list[ReportingLineViolation] = []

    for e in hierarchy.employees:
        if e.is_root:
            continue
        n = count_managers_to_root(hierarchy, e)
        if n > limit:
            violations.append(ReportingLineViolation(employee=e, total_managers=n, excess_managers=n - limit))

    return tuple(violations)
