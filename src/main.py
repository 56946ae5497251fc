"""Punto de entrada del conversor SMILES -> IUPAC.

Permite ejecutar `python src/main.py "CC(C)CC"` sin instalar el paquete.
"""

import sys
import os

# Aseguramos que Python encuentre los módulos dentro de `src` al ejecutar
# el archivo directamente.
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from iupacname.cli import main

if __name__ == "__main__":
    sys.exit(main())
