"""Grafo molecular mínimo construido a partir de un SMILES de alcano.

A diferencia del indexado de cadena principal, aquí se usa la semántica
real de SMILES: cada `(` recuerda el átomo anterior y cada `)` vuelve a él,
de modo que las ramas anidadas quedan bien conectadas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from .brackets import CLOSE, OPEN
from .validate import CARBON, validate_smiles


@dataclass
class Atom:
    """Representa un átomo en el grafo molecular."""
    id: int
    element: str


@dataclass
class Bond:
    """Enlace simple entre dos átomos."""
    id: int
    a1_id: int
    a2_id: int


class MolGraph:
    """Grafo no dirigido de átomos y enlaces."""

    def __init__(self) -> None:
        self.atoms: Dict[int, Atom] = {}
        self.bonds: Dict[int, Bond] = {}
        self._adj: Dict[int, Set[int]] = {}
        self._next_atom_id = 1
        self._next_bond_id = 1

    def add_atom(self, element: str) -> Atom:
        atom = Atom(self._next_atom_id, element)
        self.atoms[atom.id] = atom
        self._adj[atom.id] = set()
        self._next_atom_id += 1
        return atom

    def add_bond(self, a1_id: int, a2_id: int) -> Bond:
        """Añade un enlace simple entre dos átomos existentes.

        Raises:
            ValueError: Si algún átomo no existe o el enlace es un bucle.
        """
        if a1_id not in self.atoms or a2_id not in self.atoms:
            raise ValueError("Bond references unknown atom")
        if a1_id == a2_id:
            raise ValueError("Bond cannot join an atom to itself")
        bond = Bond(self._next_bond_id, a1_id, a2_id)
        self.bonds[bond.id] = bond
        self._adj[a1_id].add(a2_id)
        self._adj[a2_id].add(a1_id)
        self._next_bond_id += 1
        return bond

    def neighbors(self, atom_id: int) -> List[int]:
        return sorted(self._adj.get(atom_id, set()))


def smiles_to_molgraph(text: str) -> MolGraph:
    """Construye el esqueleto de carbonos de un SMILES de alcano.

    Args:
        text: Cadena SMILES; se valida igual que en la conversión.

    Returns:
        Grafo con un átomo "C" por carbono y enlaces simples.

    Raises:
        ConversionError: Si la entrada no supera la validación.
    """
    smiles = validate_smiles(text)
    graph = MolGraph()
    previous: Optional[int] = None
    branch_points: List[Optional[int]] = []
    for char in smiles:
        if char == CARBON:
            atom = graph.add_atom("C")
            if previous is not None:
                graph.add_bond(previous, atom.id)
            previous = atom.id
        elif char == OPEN:
            branch_points.append(previous)
        elif char == CLOSE:
            previous = branch_points.pop()
    return graph
