# objtri/faces.py
"""
Face-record classification.

An OBJ face line comes in one of four syntaxes:

    f 1 2 3              bare vertex indices
    f 1/1 2/2 3/3        vertex/texture
    f 1/1/1 2/2/2 3/3/3  vertex/texture/normal
    f 1//1 2//1 3//1     vertex//normal

classify_face tries a fixed, ordered list of patterns. The four-corner
patterns go first and reject the line as non-triangular; then the
three-corner patterns are tried, and the first one that matches wins:

    QUAD_PATTERNS:  v, v/vt, v/vt/vn, v//vn   (4 corners -> NonTriangularFaceError)
    FACE_PATTERNS:  v, v/vt, v/vt/vn, v//vn   (3 corners -> FaceRecord)

The order is part of the file-format contract and must not be rearranged.

Indices are 1-based. An index of 0 does not count as a reference, so a
pattern holding one does not match. Only the leading corners of a pattern
have to match, so "f 1 2 3 0" fails every four-corner pattern and then reads
as the triangle (1, 2, 3). Relative (negative) indices are not
supported.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import NonTriangularFaceError, UnrecognizedFaceSyntaxError
from .mesh import FaceRecord, FaceVariant

_CORNER_SYNTAX = {
    FaceVariant.BARE: r"(\d+)",
    FaceVariant.TEXTURE: r"(\d+)/(\d+)",
    FaceVariant.TEXTURE_NORMAL: r"(\d+)/(\d+)/(\d+)",
    FaceVariant.NORMAL: r"(\d+)//(\d+)",
}

# attempt order, shared by the quad and the triangle passes
_ORDER = (FaceVariant.BARE, FaceVariant.TEXTURE, FaceVariant.TEXTURE_NORMAL, FaceVariant.NORMAL)


@dataclass(frozen=True)
class FacePattern:
    variant: FaceVariant
    corners: int
    regex: re.Pattern

    def match(self, line: str) -> Optional[List[Tuple[int, ...]]]:
        """Return the index groups of every corner, or None if the line does not match."""
        m = self.regex.match(line)
        if m is None:
            return None
        values = [int(g) for g in m.groups()]
        if min(values) < 1:
            return None
        width = len(values) // self.corners
        return [tuple(values[i * width:(i + 1) * width]) for i in range(self.corners)]


def _compile(variant: FaceVariant, corners: int) -> FacePattern:
    corner = _CORNER_SYNTAX[variant]
    # only the leading corners have to match; whatever follows them is ignored
    body = r"f" + (r"[ \t]+" + corner) * corners + r"(?=\s|$)"
    return FacePattern(variant, corners, re.compile(body))


QUAD_PATTERNS: Tuple[FacePattern, ...] = tuple(_compile(v, 4) for v in _ORDER)
FACE_PATTERNS: Tuple[FacePattern, ...] = tuple(_compile(v, 3) for v in _ORDER)


def _record(variant: FaceVariant, corners: List[Tuple[int, ...]]) -> FaceRecord:
    a, b, c = corners
    vertices = (a[0], b[0], c[0])
    textures = (a[1], b[1], c[1]) if variant.has_texture else None
    normals = (a[-1], b[-1], c[-1]) if variant.has_normals else None
    return FaceRecord(vertices, textures, normals)


def is_quad(line: str) -> bool:
    return any(p.match(line) is not None for p in QUAD_PATTERNS)


def classify_face(line: str, line_number: Optional[int] = None) -> FaceRecord:
    """
    Classify one face line and extract its indices.

    Raises NonTriangularFaceError when the line carries four (or more) corners
    in any supported syntax, and UnrecognizedFaceSyntaxError when it matches
    none of the triangle syntaxes.

    Example:
        classify_face("f 1/4 2/5 3/6")
        -> FaceRecord(vertices=(1, 2, 3), textures=(4, 5, 6), normals=None)
    """
    if is_quad(line):
        raise NonTriangularFaceError(line_number, line)
    for pattern in FACE_PATTERNS:
        corners = pattern.match(line)
        if corners is not None:
            return _record(pattern.variant, corners)
    raise UnrecognizedFaceSyntaxError(line_number, line)
