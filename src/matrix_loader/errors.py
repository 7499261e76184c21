"""
===========================================================
matrix_loader.errors — failure taxonomy of the loader
===========================================================

Every failure raised by load_matrix() is one of four kinds:

  - MatrixReadError    : the file could not be opened / decoded
  - EmptyInputError    : nothing left after trimming the file contents
  - TokenParseError    : a comma-delimited token is not a number
  - RaggedMatrixError  : a row is shorter or longer than the first one

All of them derive from MatrixLoadError and carry a `kind` attribute, so a
caller can branch on the category without matching message text.
Messages are short and stable; they never include the offending token.
"""

# --- Imports --------------------------------------------------------------

from enum import Enum


# --- Kinds ----------------------------------------------------------------

class ErrorKind(Enum):
    IO = "io"
    EMPTY_INPUT = "empty_input"
    TOKEN_PARSE = "token_parse"
    RAGGED = "ragged"


# --- Exceptions -----------------------------------------------------------

class MatrixLoadError(Exception):
    """Base class for every load_matrix() failure."""

    kind: ErrorKind
    message: str = "could not load the matrix"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class MatrixReadError(MatrixLoadError, OSError):
    """The file is missing, unreadable or not valid text."""

    kind = ErrorKind.IO
    message = "could not read the file"


class EmptyInputError(MatrixLoadError, ValueError):
    kind = ErrorKind.EMPTY_INPUT
    message = "file was empty"


class TokenParseError(MatrixLoadError, ValueError):
    kind = ErrorKind.TOKEN_PARSE
    message = "could not parse token into a number"


class RaggedMatrixError(MatrixLoadError, ValueError):
    """A row's length differs from the first row's (the first row wins)."""

    kind = ErrorKind.RAGGED
    message = "cannot create array with variable length columns"
