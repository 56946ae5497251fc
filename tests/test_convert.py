"""Pruebas de extremo a extremo para `convert` e `iupac_name`."""

import os
import sys
import unittest
from concurrent.futures import ThreadPoolExecutor

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from iupacname import ConversionError, NameOptions, convert, iupac_name
from iupacname.errors import (
    BranchTooLongError,
    ChainTooLongError,
    EmptyInputError,
    InvalidCharacterError,
    TooManyBranchesError,
    UnbalancedParenthesesError,
)

ALKANES = [
    "methane",
    "ethane",
    "propane",
    "butane",
    "pentane",
    "hexane",
    "heptane",
    "octane",
    "nonane",
    "decane",
]


class ConvertLinearTest(unittest.TestCase):
    """Alcanos lineales de 1 a 10 carbonos."""

    def test_linear_alkanes(self):
        for n, name in enumerate(ALKANES, start=1):
            with self.subTest(n=n):
                self.assertEqual(convert("C" * n), name)

    def test_case_and_whitespace_ignored(self):
        self.assertEqual(convert("c"), "methane")
        self.assertEqual(convert(" c "), "methane")
        self.assertEqual(convert("\tccc\n"), "propane")

    def test_eleven_carbons(self):
        with self.assertRaises(ChainTooLongError) as ctx:
            convert("C" * 11)
        self.assertIn("11", str(ctx.exception))


class ConvertBranchedTest(unittest.TestCase):
    def test_examples(self):
        cases = {
            "CC(C)CC": "2-methylbutane",
            "CC(C)C(C)C": "2,3-dimethylbutane",
            "CC(C)C(CC)C": "3-ethyl-2-methylbutane",
            "CC(C)C(CC)C(C)C": "3-ethyl-2,4-dimethylpentane",
            "CC(C)(C)CC": "2-dimethylbutane",
            "cc(c)cc": "2-methylbutane",
            "CCCCC(CCC)CCCC": "5-propylnonane",
        }
        for smiles, expected in cases.items():
            with self.subTest(smiles=smiles):
                self.assertEqual(convert(smiles), expected)

    def test_branch_too_long_regardless_of_chain(self):
        for smiles in ("CCCCCCCC(CCCCCCCCCCCCCCC)CC", "C(CCCCCCCCCCC)"):
            with self.subTest(smiles=smiles):
                with self.assertRaises(BranchTooLongError):
                    convert(smiles)

    def test_too_many_identical_branches(self):
        with self.assertRaises(TooManyBranchesError):
            convert("C" + "(C)" * 11)


class ConvertErrorsTest(unittest.TestCase):
    def test_error_kinds(self):
        cases = {
            "": (EmptyInputError, "EmptyInput"),
            "12334sdhjhkkjsd": (InvalidCharacterError, "InvalidCharacter"),
            "C(C": (UnbalancedParenthesesError, "UnbalancedParentheses"),
            "C" * 11: (ChainTooLongError, "ChainTooLong"),
        }
        for smiles, (error_cls, kind) in cases.items():
            with self.subTest(smiles=smiles):
                with self.assertRaises(error_cls) as ctx:
                    convert(smiles)
                self.assertIsInstance(ctx.exception, ConversionError)
                self.assertEqual(ctx.exception.kind, kind)

    def test_empty_message(self):
        with self.assertRaises(EmptyInputError) as ctx:
            convert("")
        self.assertEqual(str(ctx.exception), "Cannot set data from empty SMILES string")


class IupacNameTest(unittest.TestCase):
    def test_success(self):
        self.assertEqual(iupac_name("CC(C)CC"), "2-methylbutane")

    def test_raises_by_default(self):
        with self.assertRaises(InvalidCharacterError):
            iupac_name("CCO")

    def test_returns_nd_when_enabled(self):
        opts = NameOptions(return_nd_on_fail=True)
        self.assertEqual(iupac_name("CCO", opts), "N/D")
        self.assertEqual(iupac_name("C" * 11, opts), "N/D")


class DeterminismTest(unittest.TestCase):
    def test_repeated_and_concurrent_calls(self):
        inputs = ["CC(C)C(CC)C(C)C", "CC(C)(C)CC", "CCCCCCCCCC"] * 20
        expected = [convert(smiles) for smiles in inputs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(convert, inputs))
        self.assertEqual(results, expected)

        def error_kind(smiles):
            try:
                convert(smiles)
            except ConversionError as exc:
                return exc.kind
            return None

        with ThreadPoolExecutor(max_workers=4) as pool:
            kinds = set(pool.map(error_kind, ["C(C"] * 16))
        self.assertEqual(kinds, {"UnbalancedParentheses"})


if __name__ == "__main__":
    unittest.main()
