from __future__ import annotations

from iupacname.validate import validate_smiles

try:
    from rdkit import Chem
    from rdkit.Chem import rdMolDescriptors
except Exception:  # pragma: no cover - optional dependency at runtime
    Chem = None
    rdMolDescriptors = None


def rdkit_available() -> bool:
    return Chem is not None and rdMolDescriptors is not None


def _require_rdkit():
    if not rdkit_available():
        raise RuntimeError("RDKit no disponible")


def smiles_to_rdkit(text: str):
    """Parsea con RDKit un SMILES de alcano ya validado localmente.

    Raises:
        ConversionError: Si la entrada no supera la validación local.
        RuntimeError: Si RDKit no está instalado.
        ValueError: Si RDKit rechaza la cadena.
    """
    smiles = validate_smiles(text)
    _require_rdkit()
    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit could not parse SMILES {smiles!r}")
    return mol


def rdkit_formula(text: str) -> str:
    """Fórmula de Hill calculada por RDKit (p. ej., "C5H12")."""
    mol = smiles_to_rdkit(text)
    return rdMolDescriptors.CalcMolFormula(mol)


def rdkit_carbon_count(text: str) -> int:
    mol = smiles_to_rdkit(text)
    return sum(1 for atom in mol.GetAtoms() if atom.GetSymbol() == "C")
