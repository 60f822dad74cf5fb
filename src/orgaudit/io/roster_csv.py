from __future__ import annotations

"""
Roster reader for delimited text.

Format: a header line `id,name,salary,managerId` followed by one employee per row.
- Standard CSV quoting (`"Smith, Jane"`, doubled quotes for a literal quote).
- Blank lines are skipped; fields are trimmed.
- An empty managerId marks the CEO.
- Every row must carry exactly four fields. pandas pads short rows and may turn an
  extra leading field into the index, so records are tokenized with `csv` first and
  only rows of the right width reach the DataFrame.
"""

import csv
import pathlib
from collections.abc import Iterator
from typing import Any

from ..employee import Employee
from ..errors import RosterFormatError

EXPECTED_FIELDS = ("id", "name", "salary", "managerId")
COLUMNS = ["id", "name", "salary", "manager_id"]

_HEADER_ALIASES = {
    "id": "id",
    "name": "name",
    "salary": "salary",
    "managerid": "manager_id",
    "manager_id": "manager_id",
}


def _require_pandas() -> Any:
    try:
        import pandas as pd  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("read_employees requires pandas.") from e
    return pd


def _iter_records(p: pathlib.Path) -> Iterator[tuple[int, list[str]]]:
    """Yield (line number, fields) for every non-blank record."""
    with p.open("r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f, skipinitialspace=True)
        for fields in reader:
            if not any(x.strip() for x in fields):
                continue
            yield reader.line_num, fields


def _header_columns(fields: list[str], *, line: int) -> list[str]:
    cols: list[str] = []
    for c in fields:
        key = _HEADER_ALIASES.get(c.strip().lower())
        if key is None:
            raise RosterFormatError(f"Unexpected header column: {c!r} (expected {','.join(EXPECTED_FIELDS)})", line=line)
        if key in cols:
            raise RosterFormatError(f"Duplicate header column: {c!r}", line=line)
        cols.append(key)

    missing = [f for f, k in zip(EXPECTED_FIELDS, COLUMNS) if k not in cols]
    if missing:
        raise RosterFormatError(f"Missing header column(s): {', '.join(missing)}", line=line)
    return cols


def read_roster_frame(path: str | pathlib.Path) -> Any:
    """
    Read a roster file into a DataFrame of trimmed string columns.

    Returns:
        DataFrame with columns id, name, salary, manager_id (always in that order)
        plus `line`, the physical line each row came from. Empty for a header-only
        or zero-byte file.
    """
    pd = _require_pandas()

    p = pathlib.Path(path).expanduser()
    if not p.exists():
        raise FileNotFoundError(p)

    records = _iter_records(p)
    first = next(records, None)
    if first is None:
        return pd.DataFrame(columns=COLUMNS + ["line"])
    header_line, header_fields = first
    cols = _header_columns(header_fields, line=header_line)

    rows: list[list[Any]] = []
    lines: list[int] = []
    for line, fields in records:
        if len(fields) != len(cols):
            raise RosterFormatError(
                f"Expected {len(EXPECTED_FIELDS)} fields ({','.join(EXPECTED_FIELDS)}) but found {len(fields)}",
                line=line,
            )
        rows.append(fields)
        lines.append(line)

    df = pd.DataFrame(rows, columns=cols, dtype=object)[COLUMNS]
    if rows:
        for c in COLUMNS:
            df[c] = df[c].str.strip()
    df["line"] = lines
    return df.reset_index(drop=True)


def read_employees(path: str | pathlib.Path) -> list[Employee]:
    """
    Read a roster file into Employee values, in file order.

    Structural checks (single CEO, known managers) are left to `build_hierarchy`.
    """
    pd = _require_pandas()
    df = read_roster_frame(path)

    salaries = pd.to_numeric(df["salary"], errors="coerce")

    employees: list[Employee] = []
    for rec, salary in zip(df.to_dict(orient="records"), salaries.tolist()):
        line = int(rec["line"])
        if pd.isna(salary):
            raise RosterFormatError(f"Invalid salary format: {rec['salary']}", line=line)
        try:
            employees.append(
                Employee(id=rec["id"], name=rec["name"], salary=float(salary), manager_id=rec["manager_id"])
            )
        except ValueError as e:
            raise RosterFormatError(str(e), line=line) from e

    return employees
