"""Tablas de prefijos para nombres de alcanos y sustituyentes alquilo."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Número máximo de carbonos con nombre conocido (cadena o rama).
MAX_CHAIN_LENGTH = 10

# Raíces por número de carbonos ("meth" + "ane", "meth" + "yl").
CHAIN_LENGTH_PREFIX: Mapping[int, str] = MappingProxyType(
    {
        1: "meth",
        2: "eth",
        3: "prop",
        4: "but",
        5: "pent",
        6: "hex",
        7: "hept",
        8: "oct",
        9: "non",
        10: "dec",
    }
)

# Prefijos multiplicativos para sustituyentes idénticos.
MULTIPLICITY_PREFIX: Mapping[int, str] = MappingProxyType(
    {
        1: "",
        2: "di",
        3: "tri",
        4: "tetra",
        5: "penta",
        6: "hexa",
        7: "hepta",
        8: "octa",
        9: "nona",
        10: "deca",
    }
)

