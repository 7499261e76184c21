"""
===========================================================
Matrix Loading Demo (CLI version)
===========================================================

Usage
-----
    python3 examples/demo_cli.py path/to/matrix.txt

Prints the shape and values of the loaded matrix, or the failure
category and message (exit code 2) if the file is not a valid matrix.
"""

# --- Imports --------------------------------------------------------------

import sys
from pathlib import Path
import numpy as np
from colorama import Fore, Style, init as colorama_init
from matrix_loader import load_matrix, MatrixLoadError


# --- Main routine ---------------------------------------------------------

def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    if len(argv) != 1:
        print("Usage: demo_cli.py path/to/matrix.txt")
        return 1

    colorama_init(autoreset=True)
    path = Path(argv[0])
    try:
        M = load_matrix(path)
    except MatrixLoadError as err:
        print(f"{Fore.RED}❌ {err.kind.value}: {err}{Style.RESET_ALL}")
        return 2

    print(f"loaded {M.shape[0]}x{M.shape[1]} matrix from {path}")
    print(np.array2string(M, precision=6, suppress_small=True))
    return 0


# --- Entrypoint -----------------------------------------------------------

if __name__ == "__main__":
    raise SystemExit(main())
