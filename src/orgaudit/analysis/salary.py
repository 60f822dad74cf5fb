from __future__ import annotations

"""
Salary compliance.

A manager should earn at least `min_raise` and at most `max_raise` more than the
average salary of their direct reports (only direct reports count; the average is
not weighted and not recursive). Salaries exactly on a bound are compliant.
"""

from dataclasses import dataclass
from typing import Literal

import numpy as np

from ..config import DEFAULT_POLICY, AnalysisPolicy
from ..employee import Employee
from ..hierarchy import Hierarchy

ViolationKind = Literal["underpaid", "overpaid"]


@dataclass(frozen=True)
class SalaryViolation:
    manager: Employee
    amount: float
    subordinate_average: float
    kind: ViolationKind

    @property
    def allowed_salary(self) -> float:
        """The bound that was crossed: minimum for underpaid, maximum for overpaid."""
        if self.kind == "underpaid":
            return self.manager.salary + self.amount
        return self.manager.salary - self.amount


@dataclass(frozen=True)
class SalaryAnalysis:
    underpaid: tuple[SalaryViolation, ...]
    overpaid: tuple[SalaryViolation, ...]

    def __iter__(self):
        # Allows `underpaid, overpaid = analyze_salaries(h)`.
        return iter((self.underpaid, self.overpaid))


def subordinate_average(hierarchy: Hierarchy, manager_id: str) -> float | None:
    reports = hierarchy.direct_reports(manager_id)
    if not reports:
        return None
    return float(np.mean([r.salary for r in reports]))


def analyze_salaries(hierarchy: Hierarchy, *, policy: AnalysisPolicy = DEFAULT_POLICY) -> SalaryAnalysis:
    underpaid: list[SalaryViolation] = []
    overpaid: list[SalaryViolation] = []

    for manager in hierarchy.employees:
        avg = subordinate_average(hierarchy, manager.id)
        if avg is None:
            continue

        min_allowed = avg * (1.0 + policy.min_raise)
        max_allowed = avg * (1.0 + policy.max_raise)

        if manager.salary < min_allowed:
            underpaid.append(
                SalaryViolation(manager=manager, amount=min_allowed - manager.salary, subordinate_average=avg, kind="underpaid")
            )
        elif manager.salary > max_allowed:
            overpaid.append(
                SalaryViolation(manager=manager, amount=manager.salary - max_allowed, subordinate_average=avg, kind="overpaid")
            )

    return SalaryAnalysis(underpaid=tuple(underpaid), overpaid=tuple(overpaid))
