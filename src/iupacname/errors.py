"""Excepciones específicas del conversor SMILES -> IUPAC."""


class ConversionError(Exception):
    """Base de todos los fallos de conversión.

    Cada subclase expone `kind`, el nombre corto del tipo de fallo.
    """

    kind = "ConversionError"


class EmptyInputError(ConversionError):
    """La cadena queda vacía tras recortar espacios."""

    kind = "EmptyInput"


class InvalidCharacterError(ConversionError):
    """Aparece un carácter distinto de `C`, `(` o `)`."""

    kind = "InvalidCharacter"


class UnbalancedParenthesesError(ConversionError):
    """Los paréntesis no están balanceados."""

    kind = "UnbalancedParentheses"


class ChainTooLongError(ConversionError):
    """La cadena principal supera los 10 carbonos."""

    kind = "ChainTooLong"


class EmptyChainError(ConversionError):
    """No hay ningún carbono fuera de paréntesis."""

    kind = "EmptyChain"


class BranchTooLongError(ConversionError):
    """Una rama supera los 10 carbonos propios."""

    kind = "BranchTooLong"


class EmptyBranchError(ConversionError):
    """Una rama no contiene carbonos propios (p. ej., `C()`)."""

    kind = "EmptyBranch"


class TooManyBranchesError(ConversionError):
    """Hay más ramas idénticas que prefijos multiplicativos conocidos."""

    kind = "TooManyBranches"


class NoAttachedCarbonError(ConversionError):
    """No se encuentra el carbono al que se une una rama."""

    kind = "NoAttachedCarbon"


class LocantLookupError(ConversionError):
    """La posición de unión no corresponde a un carbono de la cadena principal."""

    kind = "LocantLookupFailure"


class NoMatchingParenthesisError(ConversionError):
    """El escáner de paréntesis llega al final sin cerrar su pila."""

    kind = "NoMatchingParenthesis"


class ConversionInternalError(Exception):
    """Se lanza ante errores internos inesperados del motor."""
