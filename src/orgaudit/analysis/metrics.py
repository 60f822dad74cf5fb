from __future__ import annotations

"""
Collect both analyses into report-ready structures:
- `compute_org_metrics`: a dict ready to be dumped as JSON
- `violations_frame`: one row per violation (pandas), for CSV export
"""

from typing import Any

from ..config import DEFAULT_POLICY, AnalysisPolicy
from ..hierarchy import Hierarchy
from .reporting_lines import ReportingLineViolation, analyze_reporting_lines, count_managers_to_root
from .salary import SalaryAnalysis, SalaryViolation, analyze_salaries

FRAME_COLUMNS = [
    "category",
    "employee_id",
    "name",
    "salary",
    "amount",
    "allowed_salary",
    "subordinate_average",
    "total_managers",
    "excess_managers",
]


def _salary_record(v: SalaryViolation) -> dict[str, Any]:
    return {
        "employee_id": v.manager.id,
        "name": v.manager.name,
        "salary": round(float(v.manager.salary), 2),
        "allowed_salary": round(float(v.allowed_salary), 2),
        "amount": round(float(v.amount), 2),
        "subordinate_average": round(float(v.subordinate_average), 2),
    }


def _reporting_record(v: ReportingLineViolation) -> dict[str, Any]:
    return {
        "employee_id": v.employee.id,
        "name": v.employee.name,
        "total_managers": int(v.total_managers),
        "excess_managers": int(v.excess_managers),
    }


def compute_org_metrics(
    hierarchy: Hierarchy,
    *,
    policy: AnalysisPolicy = DEFAULT_POLICY,
    salary: SalaryAnalysis | None = None,
    reporting: tuple[ReportingLineViolation, ...] | None = None,
) -> dict[str, Any]:
    """
    Summarise both analyses.

    Args:
        salary/reporting: results already computed for this hierarchy and policy;
            either one is computed here when omitted.

    Returns:
        dict with `salary`, `reporting_lines` and `meta` sections; amounts are rounded
        to cents, lists keep roster order.
    """
    if salary is None:
        salary = analyze_salaries(hierarchy, policy=policy)
    if reporting is None:
        reporting = analyze_reporting_lines(hierarchy, policy=policy)

    depths = [count_managers_to_root(hierarchy, e) for e in hierarchy.employees]
    meta = {
        "n_employees": len(hierarchy),
        "n_managers": len(hierarchy.managers()),
        "root": {"employee_id": hierarchy.root.id, "name": hierarchy.root.name},
        "max_depth": max(depths) if depths else 0,
        "policy": policy.to_dict(),
    }

    return {
        "salary": {
            "underpaid": [_salary_record(v) for v in salary.underpaid],
            "overpaid": [_salary_record(v) for v in salary.overpaid],
        },
        "reporting_lines": {
            "violations": [_reporting_record(v) for v in reporting],
        },
        "meta": meta,
    }


def violations_frame(salary: SalaryAnalysis, reporting: tuple[ReportingLineViolation, ...]) -> Any:
    try:
        import pandas as pd  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("violations_frame requires pandas.") from e

    rows: list[dict[str, Any]] = []
    for v in list(salary.underpaid) + list(salary.overpaid):
        rec = _salary_record(v)
        rec["category"] = v.kind
        rows.append(rec)
    for rv in reporting:
        rec = _reporting_record(rv)
        rec["category"] = "reporting_line"
        rec["salary"] = round(float(rv.employee.salary), 2)
        rows.append(rec)

    return pd.DataFrame(rows, columns=FRAME_COLUMNS)
