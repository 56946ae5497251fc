"""Cálculo de hidrógenos implícitos según valencias típicas."""

from __future__ import annotations

from typing import Dict

from iupacname.skeleton import MolGraph

# Valencias típicas usadas para inferir H implícitos.
TYPICAL_VALENCE: Dict[str, int] = {
    "H": 1,
    "C": 4,
}


def implicit_h_count(graph: MolGraph, atom_id: int) -> int:
    """Calcula los hidrógenos implícitos para un átomo.

    Args:
        graph: Grafo molecular.
        atom_id: Identificador del átomo a evaluar.

    Returns:
        Número de H implícitos estimados (>= 0).
    """
    atom = graph.atoms[atom_id]
    typical = TYPICAL_VALENCE.get(atom.element)
    if typical is None:
        return 0

    # Todos los enlaces del esqueleto son simples: la suma de órdenes es el grado.
    bond_order_sum = len(graph.neighbors(atom_id))

    implicit = typical - bond_order_sum
    if implicit < 0:
        return 0
    return int(implicit)
