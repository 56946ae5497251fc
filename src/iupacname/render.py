"""Renderizado final de nombres IUPAC para alcanos ramificados."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .branches import Branch
from .errors import TooManyBranchesError
from .prefixes import CHAIN_LENGTH_PREFIX, MULTIPLICITY_PREFIX


@dataclass
class GroupedBranches:
    """Ramas de igual longitud con sus locantes en orden de aparición."""
    carbon_count: int
    attached_locants: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class FormattedBranch:
    """Fragmento de nombre (`"2,3-dimethyl"`) y su raíz para ordenar."""
    rendered: str
    chain_prefix: str


def group_branches(branches: Iterable[Branch]) -> Dict[int, GroupedBranches]:
    """Agrupa las ramas por número de carbonos.

    Los locantes repetidos se conservan: dos ramas sobre el mismo carbono
    aportan dos veces el mismo locante.
    """
    groups: Dict[int, GroupedBranches] = {}
    for branch in branches:
        group = groups.setdefault(branch.carbon_count, GroupedBranches(branch.carbon_count))
        group.attached_locants.append(branch.attached_locant)
    return groups


def format_group(group: GroupedBranches) -> FormattedBranch:
    """Formatea un grupo como `"{locantes}-{multiplicador}{raíz}yl"`.

    Los locantes impresos se deduplican en orden de aparición, pero el
    multiplicador se elige con el número total de ramas del grupo:
    `CC(C)(C)CC` da `"2-dimethyl"`.

    Raises:
        TooManyBranchesError: Si no hay prefijo para tantas ramas idénticas.
    """
    unique_locants = list(dict.fromkeys(group.attached_locants))
    multiplicity = MULTIPLICITY_PREFIX.get(len(group.attached_locants))
    if multiplicity is None:
        raise TooManyBranchesError("Too many identical substituents")
    stem = CHAIN_LENGTH_PREFIX[group.carbon_count]
    locant_str = ",".join(str(loc) for loc in unique_locants)
    return FormattedBranch(f"{locant_str}-{multiplicity}{stem}yl", stem)


def render_name(branches: Iterable[Branch], parent: str) -> str:
    """Renderiza el nombre combinando sustituyentes y cadena principal.

    Args:
        branches: Ramas detectadas, en orden de aparición.
        parent: Nombre del alcano padre (p. ej., "pentane").

    Returns:
        Nombre final (p. ej., "3-ethyl-2,4-dimethylpentane").

    Raises:
        TooManyBranchesError: Si hay demasiados sustituyentes idénticos.
    """
    groups = group_branches(branches)
    if not groups:
        return parent

    # Orden alfabético por la raíz, sin contar locantes ni multiplicadores.
    formatted = sorted(
        (format_group(group) for group in groups.values()),
        key=lambda item: item.chain_prefix,
    )
    return "-".join(item.rendered for item in formatted) + parent
