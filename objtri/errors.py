# objtri/errors.py
from __future__ import annotations

import errno
from typing import Optional


class ObjError(Exception):
    """Base class for every failure raised by objtri."""


class ObjFileNotFoundError(ObjError, FileNotFoundError):
    def __init__(self, path: str) -> None:
        super().__init__(errno.ENOENT, "Failure opening file", path)


class DestinationExistsError(ObjError, FileExistsError):
    """The write destination already exists and overwriting was not requested.

    The writer only signals the collision. Deciding on a final destination
    (replace, rename, give up) is left to the caller.
    """

    def __init__(self, path: str) -> None:
        super().__init__(errno.EEXIST, "Filename already exists", path)


# -------------
# Parse errors
# -------------

class ObjParseError(ObjError, ValueError):
    """A single line could not be parsed. Carries the 1-based line number."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        if line is not None:
            message = f"{message}: {line.strip()!r}"
        super().__init__(message)


class UnrecognizedFaceSyntaxError(ObjParseError):
    def __init__(self, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        super().__init__("unrecognized face syntax", line_number, line)


class NonTriangularFaceError(ObjParseError):
    def __init__(self, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        super().__init__("mesh is not triangular", line_number, line)


class MalformedRecordError(ObjParseError):
    """A v/vt/vn record is missing fields or holds non-numeric values."""


# ------------------
# Validation errors
# ------------------

class MeshValidationError(ObjError, ValueError):
    pass


class EmptyMeshError(MeshValidationError):
    def __init__(self) -> None:
        super().__init__("Mesh does not contain any vertices")


class NoFacesError(MeshValidationError):
    def __init__(self) -> None:
        super().__init__("Mesh does not contain any faces")


class ShapeMismatchError(MeshValidationError):
    """An attribute array violates a shape rule.

    `array` names the offending array, `expected` describes the rule and
    `actual` what was found.
    """

    reason = "shape"

    def __init__(self, array: str, expected: str, actual: object) -> None:
        self.array = array
        self.expected = expected
        self.actual = actual
        super().__init__(f"{array}: expected {expected}, got {actual}")


class RowCountError(ShapeMismatchError):
    reason = "row count"


class ColumnCountError(ShapeMismatchError):
    reason = "column count"


class CrossArrayLengthError(ShapeMismatchError):
    reason = "cross-array length"


class IndexRangeError(ShapeMismatchError):
    reason = "index range"
