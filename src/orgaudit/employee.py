from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Employee:
    """
    One roster entry.

    Identity is the id alone: two records with the same id compare equal even when
    name/salary/manager differ. An empty or missing manager_id marks the CEO.
    """

    id: str
    name: str = field(compare=False)
    salary: float = field(compare=False)
    manager_id: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        emp_id = str(self.id or "").strip()
        name = str(self.name or "").strip()
        if not emp_id:
            raise ValueError("Employee ID cannot be null or empty")
        if not name:
            raise ValueError("Employee name cannot be null or empty")

        try:
            salary = float(self.salary)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid salary: {self.salary!r}") from e
        if not math.isfinite(salary) or salary <= 0:
            raise ValueError(f"Salary must be positive, got: {self.salary!r}")

        manager_id = str(self.manager_id).strip() if self.manager_id is not None else ""

        # Frozen dataclass: normalised values go through object.__setattr__.
        object.__setattr__(self, "id", emp_id)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "salary", salary)
        object.__setattr__(self, "manager_id", manager_id or None)

    @property
    def is_root(self) -> bool:
        return self.manager_id is None
