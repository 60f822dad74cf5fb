import unittest

from orgaudit.employee import Employee
from orgaudit.errors import (
    CyclicReportingLineError,
    DuplicateIdError,
    MissingRootError,
    MultipleRootsError,
    OrgStructureError,
    UnknownManagerError,
)
from orgaudit.hierarchy import build_hierarchy, direct_reports, root


def sample_roster() -> list[Employee]:
    # CEO (1)
    # |-- Manager A (2): A1 (3), A2 (4)
    # `-- Manager B (5): B1 (6), Manager C (7) -> C1 (8) -> Manager D (9) -> D1 (10)
    return [
        Employee("1", "CEO", 200000.0, None),
        Employee("2", "Manager A", 120000.0, "1"),
        Employee("3", "Employee A1", 80000.0, "2"),
        Employee("4", "Employee A2", 85000.0, "2"),
        Employee("5", "Manager B", 160000.0, "1"),
        Employee("6", "Employee B1", 90000.0, "5"),
        Employee("7", "Manager C", 95000.0, "5"),
        Employee("8", "Employee C1", 70000.0, "7"),
        Employee("9", "Manager D", 75000.0, "8"),
        Employee("10", "Employee D1", 60000.0, "9"),
    ]


class TestEmployee(unittest.TestCase):
    def test_normalizes_fields(self) -> None:
        e = Employee("  7 ", " Ann ", "1000.5", "   ")
        self.assertEqual(e.id, "7")
        self.assertEqual(e.name, "Ann")
        self.assertEqual(e.salary, 1000.5)
        self.assertIsNone(e.manager_id)
        self.assertTrue(e.is_root)

    def test_rejects_invalid_values(self) -> None:
        with self.assertRaises(ValueError):
            Employee("", "Ann", 100.0)
        with self.assertRaises(ValueError):
            Employee("1", "  ", 100.0)
        with self.assertRaises(ValueError):
            Employee("1", "Ann", 0.0)
        with self.assertRaises(ValueError):
            Employee("1", "Ann", -5.0)
        with self.assertRaises(ValueError):
            Employee("1", "Ann", float("nan"))

    def test_identity_is_the_id(self) -> None:
        a = Employee("1", "Ann", 100.0, None)
        b = Employee("1", "Someone Else", 999.0, "2")
        self.assertEqual(a, b)
        self.assertEqual(len({a, b}), 1)
        self.assertNotEqual(a, Employee("2", "Ann", 100.0, None))


class TestBuildHierarchy(unittest.TestCase):
    def test_builds_index(self) -> None:
        h = build_hierarchy(sample_roster())
        self.assertEqual(root(h).id, "1")
        self.assertEqual(h.root.name, "CEO")
        self.assertEqual(len(h), 10)
        self.assertEqual(h.get("7").name, "Manager C")
        self.assertIsNone(h.get("404"))

    def test_direct_reports_keep_roster_order(self) -> None:
        h = build_hierarchy(sample_roster())
        self.assertEqual([e.id for e in direct_reports(h, "1")], ["2", "5"])
        self.assertEqual([e.id for e in direct_reports(h, "2")], ["3", "4"])
        self.assertEqual([e.id for e in h.managers()], ["1", "2", "5", "7", "8", "9"])

    def test_direct_reports_empty_for_leaf_and_unknown(self) -> None:
        h = build_hierarchy(sample_roster())
        self.assertEqual(direct_reports(h, "10"), ())
        self.assertEqual(direct_reports(h, "10"), ())
        self.assertEqual(direct_reports(h, "does-not-exist"), ())

    def test_roster_order_does_not_matter(self) -> None:
        h = build_hierarchy(list(reversed(sample_roster())))
        self.assertEqual(h.root.id, "1")
        self.assertEqual([e.id for e in h.direct_reports("1")], ["5", "2"])

    def test_single_employee(self) -> None:
        h = build_hierarchy([Employee("1", "Solo", 100.0)])
        self.assertEqual(h.root.id, "1")
        self.assertEqual(h.managers(), ())

    def test_hierarchy_is_read_only(self) -> None:
        h = build_hierarchy(sample_roster())
        with self.assertRaises(TypeError):
            h.by_id["99"] = Employee("99", "X", 1.0, "1")  # type: ignore[index]
        with self.assertRaises(TypeError):
            h.children_of["1"] = ()  # type: ignore[index]

    def test_empty_roster_has_no_root(self) -> None:
        with self.assertRaises(MissingRootError):
            build_hierarchy([])

    def test_no_root(self) -> None:
        roster = [
            Employee("1", "Manager", 100000.0, "2"),
            Employee("2", "Manager", 100000.0, "1"),
        ]
        with self.assertRaises(MissingRootError):
            build_hierarchy(roster)

    def test_multiple_roots(self) -> None:
        roster = [
            Employee("1", "CEO 1", 200000.0, None),
            Employee("2", "CEO 2", 200000.0, None),
            Employee("3", "Staff", 50000.0, "1"),
        ]
        with self.assertRaises(MultipleRootsError) as ctx:
            build_hierarchy(roster)
        self.assertEqual([e.id for e in ctx.exception.candidates], ["1", "2"])
        self.assertIn("CEO 1", str(ctx.exception))
        self.assertIn("CEO 2", str(ctx.exception))
        self.assertEqual(ctx.exception.to_dict()["candidate_ids"], ["1", "2"])

    def test_unknown_manager(self) -> None:
        roster = [
            Employee("1", "CEO", 200000.0, None),
            Employee("2", "Employee", 80000.0, "999"),
            Employee("3", "Employee", 80000.0, "998"),
        ]
        with self.assertRaises(UnknownManagerError) as ctx:
            build_hierarchy(roster)
        self.assertEqual(ctx.exception.employee_id, "2")
        self.assertEqual(ctx.exception.manager_id, "999")
        self.assertEqual(ctx.exception.code, "UNKNOWN_MANAGER")

    def test_duplicate_id(self) -> None:
        roster = [
            Employee("1", "CEO", 200000.0, None),
            Employee("2", "First", 80000.0, "1"),
            Employee("2", "Second", 81000.0, "1"),
        ]
        with self.assertRaises(DuplicateIdError) as ctx:
            build_hierarchy(roster)
        self.assertEqual(ctx.exception.employee_id, "2")

    def test_detached_cycle_is_rejected(self) -> None:
        roster = [
            Employee("1", "CEO", 200000.0, None),
            Employee("2", "Loop A", 80000.0, "3"),
            Employee("3", "Loop B", 80000.0, "2"),
        ]
        with self.assertRaises(CyclicReportingLineError) as ctx:
            build_hierarchy(roster)
        self.assertEqual(ctx.exception.employee_id, "2")

    def test_structural_errors_share_a_base(self) -> None:
        for exc in (MissingRootError, MultipleRootsError, UnknownManagerError, DuplicateIdError, CyclicReportingLineError):
            self.assertTrue(issubclass(exc, OrgStructureError))
            self.assertTrue(issubclass(exc, ValueError))


if __name__ == "__main__":
    unittest.main()
