"""Conversor de SMILES de alcanos a nombres IUPAC.

Soporta únicamente el subconjunto `C`, `(`, `)` de SMILES:
- Alcanos lineales de 1 a 10 carbonos (methane ... decane).
- Ramas alquilo lineales de 1 a 10 carbonos unidas a la cadena principal.
- Agrupación de ramas idénticas con prefijos multiplicativos (di, tri, ...).

Los errores se comunican con subclases de `ConversionError`.
"""

from .engine import convert, iupac_name
from .errors import ConversionError
from .options import NameOptions

__all__ = ["convert", "iupac_name", "ConversionError", "NameOptions"]
