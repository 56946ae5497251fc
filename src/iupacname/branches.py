"""Detección de ramas (sustituyentes alquilo) y su punto de unión.

Cada `(` de la cadena abre una rama. Para cada una se obtiene el texto
entre paréntesis, el número de carbonos propios y el locante del carbono de
la cadena principal al que se une.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from .brackets import CLOSE, OPEN, matching_close_index, matching_open_index
from .errors import (
    BranchTooLongError,
    EmptyBranchError,
    LocantLookupError,
    NoAttachedCarbonError,
)
from .main_chain import count_outer_carbons
from .prefixes import MAX_CHAIN_LENGTH
from .validate import CARBON

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Branch:
    """Rama encontrada en la cadena SMILES."""
    substring: str
    attached_locant: int
    carbon_count: int


def attached_carbon_index(smiles: str, open_index: int) -> int:
    """Busca hacia atrás el carbono al que se une la rama en `open_index`.

    Las ramas hermanas previas (`C(C)(C)`) se saltan completas saltando de
    cada `)` a su `(`.

    Args:
        smiles: Cadena SMILES validada.
        open_index: Índice del `(` que abre la rama.

    Returns:
        Índice del carbono de unión.

    Raises:
        NoAttachedCarbonError: Si se alcanza el inicio sin encontrar carbono.
    """
    current = open_index
    while current > 0:
        previous = current - 1
        char = smiles[previous]
        if char == CARBON:
            return previous
        if char == CLOSE:
            current = matching_open_index(smiles, previous)
        else:
            current = previous
    raise NoAttachedCarbonError(
        f"No attached carbon found for branch at index {open_index}"
    )


def extract_branches(smiles: str, locants: Dict[int, int]) -> List[Branch]:
    """Extrae todas las ramas en orden de aparición.

    Args:
        smiles: Cadena SMILES validada.
        locants: Posición -> locante de la cadena principal.

    Returns:
        Lista de ramas, una por cada `(`, de izquierda a derecha.

    Raises:
        BranchTooLongError: Si una rama tiene más de `MAX_CHAIN_LENGTH` carbonos.
        EmptyBranchError: Si una rama no tiene carbonos propios.
        NoAttachedCarbonError: Si la rama no cuelga de ningún carbono.
        LocantLookupError: Si el carbono de unión no es de la cadena principal.
    """
    branches: List[Branch] = []
    for index, char in enumerate(smiles):
        if char != OPEN:
            continue
        close_index = matching_close_index(smiles, index)
        substring = smiles[index + 1:close_index]

        carbon_count = count_outer_carbons(substring)
        if carbon_count > MAX_CHAIN_LENGTH:
            raise BranchTooLongError(
                f"Cannot determine carbon molecule for chain longer than {MAX_CHAIN_LENGTH}"
            )
        if carbon_count == 0:
            raise EmptyBranchError(f"Branch at index {index} has no carbon atoms")

        carbon_index = attached_carbon_index(smiles, index)
        locant = locants.get(carbon_index)
        if locant is None:
            raise LocantLookupError(
                f"Cannot determine carbon molecule order for branch {index}"
            )

        branch = Branch(substring, locant, carbon_count)
        logger.debug("Branch %r (%d C) attached at locant %d", substring, carbon_count, locant)
        branches.append(branch)
    return branches
