from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from .branches import Branch, extract_branches
from .errors import ConversionError, ConversionInternalError
from .main_chain import index_main_chain
from .options import NameOptions
from .prefixes import CHAIN_LENGTH_PREFIX
from .render import render_name
from .validate import validate_smiles

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/D"


@dataclass
class ConversionContext:
    """Estado de una única conversión; no se comparte entre llamadas."""
    smiles: str
    branches: List[Branch] = field(default_factory=list)
    base_stem: str = ""
    chain_locants: Dict[int, int] = field(default_factory=dict)

    @property
    def chain_length(self) -> int:
        return len(self.chain_locants)

    @property
    def parent_name(self) -> str:
        return f"{self.base_stem}ane"


def build_context(text: str) -> ConversionContext:
    """Ejecuta validación, indexado de cadena y extracción de ramas.

    Raises:
        ConversionError: Con la subclase de la primera etapa que falle.
    """
    ctx = ConversionContext(validate_smiles(text))
    ctx.chain_locants = index_main_chain(ctx.smiles)
    ctx.base_stem = CHAIN_LENGTH_PREFIX[ctx.chain_length]
    ctx.branches = extract_branches(ctx.smiles, ctx.chain_locants)
    return ctx


def convert(text: str) -> str:
    """Convierte un SMILES de alcano (`C`, `(`, `)`) en su nombre IUPAC.

    Args:
        text: Cadena SMILES; se ignoran mayúsculas y espacios exteriores.

    Returns:
        Nombre IUPAC, p. ej. "2-methylbutane" para "CC(C)CC".

    Raises:
        ConversionError: Si la entrada no es válida o no tiene nombre.
    """
    ctx = build_context(text)
    name = render_name(ctx.branches, ctx.parent_name)
    logger.debug("Converted %r to %r", ctx.smiles, name)
    return name


def iupac_name(text: str, opts: NameOptions = NameOptions()) -> str:
    """Public entry point that can degrade to "N/D" instead of raising."""
    try:
        return convert(text)
    except ConversionError:
        if opts.return_nd_on_fail:
            return NOT_AVAILABLE
        raise
    except Exception as exc:  # pragma: no cover - defensive
        if opts.return_nd_on_fail:
            return NOT_AVAILABLE
        raise ConversionInternalError(str(exc)) from exc
