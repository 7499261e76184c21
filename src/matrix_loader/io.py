"""
===========================================================
matrix_loader.io — read / write comma-separated matrices
===========================================================

File format
-----------
    1,0,0
    -2,1,0
    0,0,1

Rows are separated by "\\n", values by ",". Only the whole file is
trimmed; tokens must be plain decimal literals with no surrounding spaces.
"""

# --- Imports --------------------------------------------------------------

import logging
import re
from pathlib import Path

import numpy as np

from .errors import (
    EmptyInputError,
    MatrixReadError,
    RaggedMatrixError,
    TokenParseError,
)


# --- Format ---------------------------------------------------------------

logger = logging.getLogger(__name__)

ROW_SEPARATOR = "\n"
COLUMN_SEPARATOR = ","
ENCODING = "utf-8"

# Unicode White_Space; str.strip() alone also drops U+001C..U+001F
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# sign, mantissa with optional point, optional exponent
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


# --- Loading --------------------------------------------------------------

def load_matrix(path) -> np.ndarray:
    """
    Read a text file and return the matrix it describes.

    Parameters
    ----------
    path : str or os.PathLike
        File to read (UTF-8 text).

    Returns
    -------
    M : np.ndarray
        float64 array of shape (rows, columns).

    Raises
    ------
    MatrixReadError
        The file could not be opened or decoded.
    EmptyInputError, TokenParseError, RaggedMatrixError
        See fill_matrix().
    """
    p = Path(path)
    try:
        with open(p, encoding=ENCODING, newline="") as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise MatrixReadError() from exc

    M = fill_matrix(contents.strip(WHITESPACE))
    logger.debug("loaded %dx%d matrix from %s", M.shape[0], M.shape[1], p)
    return M


def fill_matrix(text: str) -> np.ndarray:
    """
    Parse already-trimmed text into a rectangular matrix.

    The first line fixes the column count; every following line must
    match it.
    """
    if not text:
        raise EmptyInputError()

    lines = text.split(ROW_SEPARATOR)
    first = parse_row(lines[0])
    num_columns = len(first)

    rows = [first]
    for line in lines[1:]:
        row = parse_row(line)
        if len(row) != num_columns:
            raise RaggedMatrixError()
        rows.append(row)

    return np.array(rows, dtype=np.float64).reshape(len(rows), num_columns)


def parse_row(line: str) -> list[float]:
    """Convert one line of comma-separated tokens into floats (left to right)."""
    values = []
    for token in line.split(COLUMN_SEPARATOR):
        # float() alone would also take " 1", "1_0" and "inf"
        if _FLOAT_RE.fullmatch(token) is None:
            raise TokenParseError()
        values.append(float(token))
    return values


# --- Saving ---------------------------------------------------------------

def save_matrix(path, M):
    """
    Write a 2D array in the format load_matrix() reads.

    Parameters
    ----------
    path : str or os.PathLike
        Output file path.
    M : array-like
        2D numeric array, at least 1x1, finite values only.

    Notes
    -----
    Values are written with repr(), so a reload gives back the exact floats.
    """
    arr = np.asarray(M, dtype=np.float64)
    if arr.ndim != 2 or arr.size == 0:
        raise ValueError("save_matrix expects a non-empty 2D array")
    if not np.all(np.isfinite(arr)):
        raise ValueError("save_matrix cannot write inf or nan values")

    text = ROW_SEPARATOR.join(
        COLUMN_SEPARATOR.join(repr(float(v)) for v in row) for row in arr
    )
    with open(path, "w", encoding=ENCODING, newline="") as f:
        f.write(text + ROW_SEPARATOR)
    logger.debug("saved %dx%d matrix to %s", arr.shape[0], arr.shape[1], path)
