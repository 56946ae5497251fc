"""Normalización y validación de la entrada SMILES restringida."""

from __future__ import annotations

import logging

from .brackets import CLOSE, OPEN, parentheses_are_balanced
from .errors import EmptyInputError, InvalidCharacterError, UnbalancedParenthesesError

logger = logging.getLogger(__name__)

CARBON = "C"
ALLOWED_CHARACTERS = frozenset({CARBON, OPEN, CLOSE})


def normalize_smiles(text: str) -> str:
    """Recorta espacios y pasa a mayúsculas (`" cc "` -> `"CC"`)."""
    return text.strip().upper()


def validate_smiles(text: str) -> str:
    """Normaliza y valida una cadena SMILES de alcano.

    Args:
        text: Entrada tal como la proporciona el usuario.

    Returns:
        Cadena normalizada y validada.

    Raises:
        EmptyInputError: Si la cadena queda vacía tras recortarla.
        InvalidCharacterError: Si contiene caracteres fuera de `C`, `(`, `)`.
        UnbalancedParenthesesError: Si los paréntesis no están balanceados.
    """
    smiles = normalize_smiles(text)
    if not smiles:
        raise EmptyInputError("Cannot set data from empty SMILES string")

    for index, char in enumerate(smiles):
        if char not in ALLOWED_CHARACTERS:
            raise InvalidCharacterError(
                f"SMILES string contains invalid characters ({char!r} at position {index})"
            )

    if not parentheses_are_balanced(smiles):
        raise UnbalancedParenthesesError(
            "Invalid input string. Parentheses are not balanced."
        )

    logger.debug("Validated SMILES %r", smiles)
    return smiles
