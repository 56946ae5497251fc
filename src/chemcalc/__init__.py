"""API pública de cálculos químicos auxiliares para alcanos."""

from .formula import molecular_formula, format_formula, smiles_formula
from .mass import molecular_weight
from .valence import implicit_h_count, TYPICAL_VALENCE

__all__ = [
    "molecular_formula",
    "format_formula",
    "smiles_formula",
    "molecular_weight",
    "implicit_h_count",
    "TYPICAL_VALENCE",
]
