"""Opciones de configuración para el conversor SMILES -> IUPAC."""

from dataclasses import dataclass


@dataclass
class NameOptions:
    """Opciones de control de `iupac_name`."""

    # Si la conversión falla, devolver "N/D" en lugar de lanzar excepción.
    return_nd_on_fail: bool = False
