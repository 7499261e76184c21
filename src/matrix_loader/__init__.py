"""
===========================================================
matrix_loader — comma-separated text file to NumPy matrix
===========================================================

Loads a plain-text file (rows on lines, values separated by commas) into
a float64 NumPy array, checking that every token is a number and that
every row has the same length.

Main functions
--------------
- load_matrix(path)
- fill_matrix(text)
- parse_row(line)
- save_matrix(path, M)
- plotting.plot_matrix(M)   (imported separately, pulls in matplotlib)

Typical workflow
----------------
    from matrix_loader import load_matrix, MatrixLoadError
    try:
        M = load_matrix("grid.txt")
    except MatrixLoadError as err:
        print(err.kind, err)
"""

# --- Public Imports -------------------------------------------------------

from .errors import (
    ErrorKind,
    MatrixLoadError,
    MatrixReadError,
    EmptyInputError,
    TokenParseError,
    RaggedMatrixError,
)
from .io import load_matrix, fill_matrix, parse_row, save_matrix

__all__ = [
    "load_matrix",
    "fill_matrix",
    "parse_row",
    "save_matrix",
    "ErrorKind",
    "MatrixLoadError",
    "MatrixReadError",
    "EmptyInputError",
    "TokenParseError",
    "RaggedMatrixError",
]
