"""Pruebas unitarias para la extracción de ramas."""

import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from iupacname.branches import Branch, attached_carbon_index, extract_branches
from iupacname.errors import (
    BranchTooLongError,
    EmptyBranchError,
    LocantLookupError,
    NoAttachedCarbonError,
)
from iupacname.main_chain import index_main_chain


def branches_of(smiles: str) -> list[Branch]:
    return extract_branches(smiles, index_main_chain(smiles))


class BranchExtractionTest(unittest.TestCase):
    """Casos de prueba para ramas y su locante de unión."""

    def test_no_branches(self):
        self.assertEqual(branches_of("CCCC"), [])

    def test_single_methyl(self):
        self.assertEqual(branches_of("CC(C)CC"), [Branch("C", 2, 1)])

    def test_discovery_order(self):
        self.assertEqual(
            branches_of("CC(C)C(CC)C(C)C"),
            [Branch("C", 2, 1), Branch("CC", 3, 2), Branch("C", 4, 1)],
        )

    def test_sibling_branches_share_carbon(self):
        self.assertEqual(
            branches_of("CC(C)(C)CC"),
            [Branch("C", 2, 1), Branch("C", 2, 1)],
        )

    def test_attached_index_skips_previous_sibling(self):
        self.assertEqual(attached_carbon_index("CC(C)(C)CC", 5), 1)

    def test_attached_index_steps_over_open_paren(self):
        self.assertEqual(attached_carbon_index("C((C))", 2), 0)

    def test_branch_too_long(self):
        with self.assertRaises(BranchTooLongError) as ctx:
            branches_of("CCCCCCCC(CCCCCCCCCCCCCCC)CC")
        self.assertEqual(
            str(ctx.exception),
            "Cannot determine carbon molecule for chain longer than 10",
        )

    def test_branch_of_ten_allowed(self):
        branches = branches_of("CC(CCCCCCCCCC)C")
        self.assertEqual(branches[0].carbon_count, 10)

    def test_empty_branch(self):
        with self.assertRaises(EmptyBranchError):
            branches_of("C()C")

    def test_no_attached_carbon(self):
        with self.assertRaises(NoAttachedCarbonError):
            branches_of("(C)C")

    def test_nested_branch_is_not_on_main_chain(self):
        with self.assertRaises(LocantLookupError):
            branches_of("CC(C(C)C)C")


if __name__ == "__main__":
    unittest.main()
