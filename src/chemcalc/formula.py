"""Cálculo y formateo de fórmulas moleculares.

Cuenta elementos sobre el esqueleto de un SMILES de alcano y formatea la
fórmula siguiendo el orden de Hill.
"""

from __future__ import annotations

from typing import Dict

from iupacname.skeleton import MolGraph, smiles_to_molgraph
from .valence import implicit_h_count


def molecular_formula(graph: MolGraph) -> Dict[str, int]:
    """Calcula la fórmula molecular como diccionario de elemento -> conteo.

    Args:
        graph: Grafo molecular.

    Returns:
        Diccionario con símbolos atómicos y sus cantidades totales.
    """
    counts: Dict[str, int] = {}

    for atom in graph.atoms.values():
        counts[atom.element] = counts.get(atom.element, 0) + 1

    for atom in graph.atoms.values():
        if atom.element == "H":
            continue
        implicit = implicit_h_count(graph, atom.id)
        if implicit:
            counts["H"] = counts.get("H", 0) + int(implicit)

    return {element: count for element, count in counts.items() if count > 0}


def format_formula(formula_dict: Dict[str, int]) -> str:
    """Formatea una fórmula usando el orden de Hill (C, H, luego alfabético).

    Args:
        formula_dict: Diccionario con símbolos de elementos y cantidades.

    Returns:
        Cadena con la fórmula formateada (p. ej., "C5H12").
    """
    if not formula_dict:
        return ""
    order = []
    if "C" in formula_dict:
        order.append("C")
    if "H" in formula_dict:
        order.append("H")
    for element in sorted(e for e in formula_dict.keys() if e not in {"C", "H"}):
        order.append(element)

    parts = []
    for element in order:
        count = formula_dict.get(element, 0)
        if count <= 0:
            continue
        parts.append(element if count == 1 else f"{element}{count}")
    return "".join(parts)


def smiles_formula(text: str) -> Dict[str, int]:
    """Atajo: fórmula molecular directamente desde un SMILES de alcano."""
    return molecular_formula(smiles_to_molgraph(text))
