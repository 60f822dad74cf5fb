from __future__ import annotations

"""
Error taxonomy for roster loading and hierarchy validation.

Every error carries its structured fields plus a stable `code`, so callers can branch
on the kind of failure (or dump it as JSON) without parsing the message text.
All of them describe invalid input; none is transient.
"""

from typing import Any


class OrgAuditError(ValueError):
    code = "UNCLASSIFIED"

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": str(self)}


class OrgStructureError(OrgAuditError):
    """Raised while building a hierarchy; no partial hierarchy is ever returned."""


class MissingRootError(OrgStructureError):
    code = "MISSING_ROOT"

    def __init__(self) -> None:
        super().__init__("No CEO found (employee with no manager)")


class MultipleRootsError(OrgStructureError):
    code = "MULTIPLE_ROOTS"

    def __init__(self, candidates: tuple[Any, ...]) -> None:
        self.candidates = tuple(candidates)
        names = ", ".join(f"{e.name} ({e.id})" for e in self.candidates)
        super().__init__(f"Multiple CEOs found: {names}")

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["candidate_ids"] = [e.id for e in self.candidates]
        return out


class DuplicateIdError(OrgStructureError):
    code = "DUPLICATE_ID"

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Duplicate employee id: {employee_id}")

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["employee_id"] = self.employee_id
        return out


class UnknownManagerError(OrgStructureError):
    code = "UNKNOWN_MANAGER"

    def __init__(self, employee_id: str, manager_id: str) -> None:
        self.employee_id = employee_id
        self.manager_id = manager_id
        super().__init__(f"Employee {employee_id} references non-existent manager {manager_id}")

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["employee_id"] = self.employee_id
        out["manager_id"] = self.manager_id
        return out


class CyclicReportingLineError(OrgStructureError):
    code = "CYCLIC_REPORTING_LINE"

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Circular reference detected in reporting line for employee {employee_id}")

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["employee_id"] = self.employee_id
        return out


class RosterFormatError(OrgAuditError):
    code = "ROSTER_FORMAT"

    def __init__(self, detail: str, *, line: int | None = None) -> None:
        self.line = line
        self.detail = detail
        if line is None:
            super().__init__(detail)
        else:
            super().__init__(f"Error parsing line {line}: {detail}")

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["line"] = self.line
        out["detail"] = self.detail
        return out


class ConfigError(OrgAuditError):
    code = "CONFIG"
