from __future__ import annotations

import argparse
import json
import pathlib
import sys

from .analysis.metrics import compute_org_metrics, violations_frame
from .analysis.reporting_lines import analyze_reporting_lines
from .analysis.salary import analyze_salaries
from .config import AnalysisPolicy, load_config, policy_from_config, resolve_config_path
from .errors import OrgAuditError
from .hierarchy import build_hierarchy
from .io.roster_csv import read_employees
from .render import render_text_report


def _load_policy(config_arg: str | None) -> AnalysisPolicy:
    cfg_path = resolve_config_path(config_arg)
    if cfg_path is None:
        return policy_from_config(None)
    policy = policy_from_config(load_config(cfg_path))
    print(f"[info] policy from {cfg_path}: {policy.to_dict()}", file=sys.stderr)
    return policy


def _run(args: argparse.Namespace) -> None:
    policy = _load_policy(args.config)

    csv_path = pathlib.Path(args.csv_path).expanduser().resolve()
    employees = read_employees(csv_path)
    print(f"[ok] loaded {len(employees)} employee(s) from {csv_path}", file=sys.stderr)

    hierarchy = build_hierarchy(employees)
    salary = analyze_salaries(hierarchy, policy=policy)
    reporting = analyze_reporting_lines(hierarchy, policy=policy)

    if args.format == "json":
        metrics = compute_org_metrics(hierarchy, policy=policy, salary=salary, reporting=reporting)
        print(json.dumps(metrics, ensure_ascii=False, indent=2))
    else:
        report = render_text_report(
            salary=salary, reporting=reporting, policy=policy, n_loaded=len(employees), source=str(csv_path)
        )
        print(report)

    if args.out_csv:
        out_path = pathlib.Path(args.out_csv).expanduser().resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        df = violations_frame(salary, reporting)
        df.to_csv(out_path, index=False)
        print(f"[ok] wrote {len(df)} violation row(s) to: {out_path}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="orgaudit",
        description="Check an employee roster for manager salary bands and overly long reporting lines.",
    )
    p.add_argument("csv_path", help="Roster CSV with header id,name,salary,managerId.")
    p.add_argument(
        "--config",
        default=None,
        help="JSON/YAML config with a 'policy' section (default: $ORGAUDIT_CONFIG, else built-in policy).",
    )
    p.add_argument("--format", choices=["text", "json"], default="text", help="Report format on stdout.")
    p.add_argument("--out_csv", default=None, help="Optional path for a one-row-per-violation CSV.")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        _run(args)
    except FileNotFoundError as e:
        raise SystemExit(f"[error] file not found: {e.filename or e}") from e
    except OrgAuditError as e:
        if args.format == "json":
            print(json.dumps({"error": e.to_dict()}, ensure_ascii=False, indent=2))
        raise SystemExit(f"[error] {e}") from e
    except (OSError, RuntimeError, ValueError) as e:
        raise SystemExit(f"[error] {e}") from e
