"""Emparejamiento de paréntesis mediante una pila de caracteres.

Las funciones de este módulo trabajan sobre índices de la cadena SMILES ya
normalizada y son la base del validador y del extractor de ramas.
"""

from __future__ import annotations

from typing import List, Optional

from .errors import NoMatchingParenthesisError

OPEN = "("
CLOSE = ")"


class CharStack:
    """Pila LIFO mínima de caracteres."""

    def __init__(self) -> None:
        self._items: List[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, char: str) -> None:
        self._items.append(char)

    def pop(self) -> Optional[str]:
        """Extrae el último carácter o devuelve `None` si la pila está vacía."""
        if not self._items:
            return None
        return self._items.pop()


def matching_close_index(text: str, open_index: int) -> int:
    """Devuelve el índice del `)` que cierra el `(` en `open_index`.

    Args:
        text: Cadena SMILES normalizada.
        open_index: Índice de un paréntesis de apertura.

    Returns:
        Índice del paréntesis de cierre correspondiente.

    Raises:
        NoMatchingParenthesisError: Si se agota la cadena sin vaciar la pila.
    """
    stack = CharStack()
    for index in range(open_index, len(text)):
        char = text[index]
        if char == OPEN:
            stack.push(char)
        elif char == CLOSE:
            stack.pop()
            if not stack:
                return index
    raise NoMatchingParenthesisError(
        f"Could not find closing parenthesis for index {open_index}"
    )


def matching_open_index(text: str, close_index: int) -> int:
    """Devuelve el índice del `(` que abre el `)` en `close_index`.

    Args:
        text: Cadena SMILES normalizada.
        close_index: Índice de un paréntesis de cierre.

    Returns:
        Índice del paréntesis de apertura correspondiente.

    Raises:
        NoMatchingParenthesisError: Si se llega al inicio sin vaciar la pila.
    """
    stack = CharStack()
    for index in range(close_index, -1, -1):
        char = text[index]
        if char == CLOSE:
            stack.push(char)
        elif char == OPEN:
            stack.pop()
            if not stack:
                return index
    raise NoMatchingParenthesisError(
        f"Could not find opening parenthesis for index {close_index}"
    )


def parentheses_are_balanced(text: str) -> bool:
    """Indica si los paréntesis de `text` están balanceados.

    Un `)` sin `(` pendiente rompe el balance de inmediato, aunque más
    adelante se compense.
    """
    stack = CharStack()
    for char in text:
        if char == OPEN:
            stack.push(char)
        elif char == CLOSE:
            if stack.pop() is None:
                return False
    return len(stack) == 0
