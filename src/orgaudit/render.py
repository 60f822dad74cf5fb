from __future__ import annotations

"""
Console report for the two analyses.
"""

from .analysis.reporting_lines import ReportingLineViolation
from .analysis.salary import SalaryAnalysis
from .config import DEFAULT_POLICY, AnalysisPolicy


def _money(x: float) -> str:
    return f"${x:,.2f}"


def render_salary_section(result: SalaryAnalysis) -> list[str]:
    lines = ["=== SALARY ANALYSIS ==="]

    if not result.underpaid:
        lines.append("✓ No managers earning less than they should.")
    else:
        lines.append("⚠ Managers earning LESS than they should:")
        for v in result.underpaid:
            m = v.manager
            lines.append(
                f"  • {m.name} (ID: {m.id}): earning {_money(m.salary)}, "
                f"should earn at least {_money(v.allowed_salary)} (shortage: {_money(v.amount)})"
            )
            lines.append(f"    Direct subordinates average: {_money(v.subordinate_average)}")
    lines.append("")

    if not result.overpaid:
        lines.append("✓ No managers earning more than they should.")
    else:
        lines.append("⚠ Managers earning MORE than they should:")
        for v in result.overpaid:
            m = v.manager
            lines.append(
                f"  • {m.name} (ID: {m.id}): earning {_money(m.salary)}, "
                f"should earn at most {_money(v.allowed_salary)} (excess: {_money(v.amount)})"
            )
            lines.append(f"    Direct subordinates average: {_money(v.subordinate_average)}")
    lines.append("")
    return lines


def render_reporting_section(
    violations: tuple[ReportingLineViolation, ...], *, max_depth: int = DEFAULT_POLICY.max_reporting_depth
) -> list[str]:
    lines = ["=== REPORTING LINE ANALYSIS ==="]
    if not violations:
        lines.append(f"✓ No employees with reporting lines longer than {max_depth} managers.")
    else:
        lines.append(f"⚠ Employees with reporting lines longer than {max_depth} managers:")
        for v in violations:
            e = v.employee
            lines.append(
                f"  • {e.name} (ID: {e.id}): {v.total_managers} managers to CEO "
                f"({v.excess_managers} more than recommended)"
            )
    lines.append("")
    return lines


def render_text_report(
    *,
    salary: SalaryAnalysis,
    reporting: tuple[ReportingLineViolation, ...],
    policy: AnalysisPolicy = DEFAULT_POLICY,
    n_loaded: int | None = None,
    source: str | None = None,
) -> str:
    lines: list[str] = []
    if n_loaded is not None:
        lines.append(f"Loaded {n_loaded} employees" + (f" from {source}" if source else ""))
        lines.append("")
    lines += render_salary_section(salary)
    lines += render_reporting_section(reporting, max_depth=policy.max_reporting_depth)
    return "\n".join(lines)
