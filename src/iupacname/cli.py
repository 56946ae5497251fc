"""Interfaz de línea de comandos del conversor SMILES -> IUPAC.

Uso:

    iupacname "CC(C)CC"            # 2-methylbutane
    iupacname --formula "CC(C)CC"  # añade fórmula y masa molecular
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from chemcalc import format_formula, molecular_weight, smiles_formula
from chemio.rdkit_io import rdkit_formula

from .engine import convert
from .errors import ConversionError

logger = logging.getLogger(__name__)

PROG_USAGE = "iupacname [SMILES string]"
USAGE = f"Usage: {PROG_USAGE}"


class UsageError(Exception):
    """Argumentos de línea de comandos no válidos."""


class _Parser(argparse.ArgumentParser):
    """`ArgumentParser` que delega los errores en `main` en vez de salir con 2."""

    def error(self, message):
        raise UsageError(f"Error: {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="iupacname",
        usage=PROG_USAGE,
        description="Convert an alkane SMILES string (C, ( and ) only) into its IUPAC name.",
    )
    parser.add_argument("smiles", nargs="?", help="molecule in restricted SMILES format")
    parser.add_argument(
        "--formula",
        action="store_true",
        help="also print the molecular formula and weight",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="cross-check the molecular formula with RDKit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show debug logs of each conversion stage",
    )
    return parser


def _fail(message: str) -> int:
    print(message)
    print(USAGE)
    return 1


def _verify_with_rdkit(smiles: str, formula: str) -> Optional[str]:
    """Devuelve un mensaje de error si RDKit no coincide, o `None`."""
    try:
        expected = rdkit_formula(smiles)
    except (RuntimeError, ValueError) as exc:
        return f"Error: {exc}"
    if expected != formula:
        return f"Error: formula mismatch ({formula} != RDKit {expected})"
    logger.debug("RDKit formula %s matches", expected)
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """Ejecuta la CLI y devuelve el código de salida del proceso.

    Args:
        argv: Argumentos sin el nombre del programa (por defecto `sys.argv`).

    Returns:
        0 si la conversión tuvo éxito, 1 en caso de error.
    """
    try:
        args, extra = build_parser().parse_known_args(argv)
    except UsageError as exc:
        return _fail(str(exc))
    # Solo se convierte el primer SMILES; los demás posicionales se ignoran.
    unknown = [arg for arg in extra if arg.startswith("-")]
    if unknown:
        return _fail(f"Error: unrecognized arguments: {' '.join(unknown)}")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.smiles is None:
        return _fail("Error: Please provide a SMILES string")

    try:
        name = convert(args.smiles)
    except ConversionError as exc:
        logger.debug("Conversion failed with %s", exc.kind)
        return _fail(str(exc))
    print(name)

    if args.formula or args.verify:
        counts = smiles_formula(args.smiles)
        formula = format_formula(counts)
        if args.formula:
            print(f"{formula} {molecular_weight(counts):.2f}")
        if args.verify:
            error = _verify_with_rdkit(args.smiles, formula)
            if error is not None:
                return _fail(error)
    return 0


if __name__ == "__main__":
    sys.exit(main())
