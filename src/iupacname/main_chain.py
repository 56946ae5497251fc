"""Cadena principal: carbonos fuera de paréntesis y sus locantes."""

from __future__ import annotations

import logging
from typing import Dict

from .brackets import CLOSE, OPEN
from .errors import ChainTooLongError, EmptyChainError
from .prefixes import MAX_CHAIN_LENGTH
from .validate import CARBON

logger = logging.getLogger(__name__)


def count_outer_carbons(text: str) -> int:
    """Cuenta los carbonos que no están dentro de un paréntesis.

    El estado "dentro de rama" es un simple indicador que `(` activa y `)`
    desactiva, no un contador de profundidad. Tras `CC(C(C)C)C` el carbono
    que sigue al primer `)` interno cuenta como exterior.

    Args:
        text: Cadena SMILES (completa o el contenido de una rama).

    Returns:
        Número de carbonos fuera de paréntesis.
    """
    count = 0
    in_branch = False
    for char in text:
        if char == OPEN:
            in_branch = True
        elif char == CLOSE:
            in_branch = False
        elif char == CARBON and not in_branch:
            count += 1
    return count


def index_main_chain(smiles: str) -> Dict[int, int]:
    """Asigna locantes 1..n a los carbonos de la cadena principal.

    Args:
        smiles: Cadena SMILES validada.

    Returns:
        Diccionario posición en la cadena -> locante (base 1), en orden.

    Raises:
        EmptyChainError: Si no hay carbonos fuera de paréntesis.
        ChainTooLongError: Si la cadena principal supera `MAX_CHAIN_LENGTH`.
    """
    locants: Dict[int, int] = {}
    in_branch = False
    for position, char in enumerate(smiles):
        if char == OPEN:
            in_branch = True
        elif char == CLOSE:
            in_branch = False
        elif char == CARBON and not in_branch:
            locants[position] = len(locants) + 1

    length = len(locants)
    if length == 0:
        raise EmptyChainError("Cannot determine name for hydrocarbon of length 0")
    if length > MAX_CHAIN_LENGTH:
        raise ChainTooLongError(
            f"Cannot determine name for hydrocarbon of length {length}"
        )

    logger.debug("Main chain of %d carbons at positions %s", length, locants)
    return locants
