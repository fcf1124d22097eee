# objtri/mesh.py
"""
In-memory model of a triangular Wavefront OBJ mesh.

A Mesh holds up to six numeric arrays plus an optional material library name:

    vertices        (N, 3) float   v  lines
    faces           (F, 3) int     vertex triple of every f line (1-based)
    texture_coords  (T, 2) float   vt lines
    texture_faces   (F, 3) int     texture triple of every f line, or (0, 3)
    normals         (M, 3) float   vn lines
    normal_faces    (F, 3) int     normal triple of every f line, or (0, 3)

Indices stay 1-based exactly as they appear in the file. The per-face arrays
are aligned with `faces` by row position.

Parsers do not grow those arrays independently: they collect one FaceRecord
per face line and hand the whole list to Mesh.from_records, which assembles
the positional arrays in a single step.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .errors import ColumnCountError, ShapeMismatchError

Vec3 = Tuple[float, float, float]
Vec2 = Tuple[float, float]
Tri = Tuple[int, int, int]


# -------------
# Face records
# -------------

class FaceVariant(enum.Enum):
    """The four face-line syntaxes of a triangular OBJ file."""

    BARE = "v"
    TEXTURE = "v/vt"
    NORMAL = "v//vn"
    TEXTURE_NORMAL = "v/vt/vn"

    @classmethod
    def from_flags(cls, has_texture: bool, has_normals: bool) -> "FaceVariant":
        if has_texture and has_normals:
            return cls.TEXTURE_NORMAL
        if has_texture:
            return cls.TEXTURE
        if has_normals:
            return cls.NORMAL
        return cls.BARE

    @property
    def has_texture(self) -> bool:
        return self in (FaceVariant.TEXTURE, FaceVariant.TEXTURE_NORMAL)

    @property
    def has_normals(self) -> bool:
        return self in (FaceVariant.NORMAL, FaceVariant.TEXTURE_NORMAL)


@dataclass(frozen=True)
class FaceRecord:
    """One triangle: vertex indices plus optional texture / normal indices."""

    vertices: Tri
    textures: Optional[Tri] = None
    normals: Optional[Tri] = None

    @property
    def variant(self) -> FaceVariant:
        return FaceVariant.from_flags(self.textures is not None, self.normals is not None)


@dataclass(frozen=True)
class MeshCounts:
    vertices: int = 0
    texture_coords: int = 0
    normals: int = 0
    faces: int = 0
    texture_faces: int = 0
    normal_faces: int = 0


# ----------------
# Array coercion
# ----------------

def _empty(columns: int, dtype) -> np.ndarray:
    return np.empty((0, columns), dtype=dtype)


def _as_coords(data, columns: int, name: str) -> np.ndarray:
    if data is None:
        return _empty(columns, np.float64)
    try:
        arr = np.array(data, dtype=np.float64)
    except ValueError as e:
        # ragged rows or non-numeric entries
        raise ColumnCountError(name, f"{columns} numeric columns per row", "ragged or non-numeric rows") from e
    if arr.ndim == 0:
        raise ColumnCountError(name, f"Nx{columns} array", "a scalar")
    if arr.size == 0:
        return _empty(columns, np.float64)
    return arr


def _as_indices(data, name: str) -> np.ndarray:
    if data is None:
        return _empty(3, np.int64)
    try:
        arr = np.array(data)
    except ValueError as e:
        raise ColumnCountError(name, "3 indices per row", "ragged rows") from e
    if arr.ndim == 0:
        raise ColumnCountError(name, "Nx3 array", "a scalar")
    if arr.size == 0:
        return _empty(3, np.int64)
    if arr.dtype.kind in "iu":
        return arr.astype(np.int64)
    if arr.dtype.kind == "f" and np.all(np.isfinite(arr)) and np.all(np.mod(arr, 1) == 0):
        return arr.astype(np.int64)
    raise ShapeMismatchError(name, "integer indices", f"dtype {arr.dtype}")


# ----------------
# Mesh container
# ----------------

@dataclass(eq=False)
class Mesh:
    vertices: np.ndarray = field(default_factory=lambda: _empty(3, np.float64))
    faces: np.ndarray = field(default_factory=lambda: _empty(3, np.int64))
    texture_coords: np.ndarray = field(default_factory=lambda: _empty(2, np.float64))
    texture_faces: np.ndarray = field(default_factory=lambda: _empty(3, np.int64))
    normals: np.ndarray = field(default_factory=lambda: _empty(3, np.float64))
    normal_faces: np.ndarray = field(default_factory=lambda: _empty(3, np.int64))
    material_library: Optional[str] = None
    name: str = "mesh"

    def __post_init__(self) -> None:
        # copies: the mesh owns its arrays
        self.vertices = _as_coords(self.vertices, 3, "vertices")
        self.faces = _as_indices(self.faces, "faces")
        self.texture_coords = _as_coords(self.texture_coords, 2, "texture_coords")
        self.texture_faces = _as_indices(self.texture_faces, "texture_faces")
        self.normals = _as_coords(self.normals, 3, "normals")
        self.normal_faces = _as_indices(self.normal_faces, "normal_faces")

    # ---- construction ----
    @classmethod
    def from_records(
        cls,
        vertices: Sequence[Vec3],
        records: Sequence[FaceRecord],
        texture_coords: Optional[Sequence[Vec2]] = None,
        normals: Optional[Sequence[Vec3]] = None,
        material_library: Optional[str] = None,
        name: str = "mesh",
    ) -> "Mesh":
        """Assemble the positional face arrays from a list of face records."""
        faces: List[Tri] = []
        texture_faces: List[Tri] = []
        normal_faces: List[Tri] = []
        for rec in records:
            faces.append(rec.vertices)
            if rec.textures is not None:
                texture_faces.append(rec.textures)
            if rec.normals is not None:
                normal_faces.append(rec.normals)
        return cls(
            vertices=vertices,
            faces=faces,
            texture_coords=texture_coords,
            texture_faces=texture_faces,
            normals=normals,
            normal_faces=normal_faces,
            material_library=material_library,
            name=name,
        )

    @classmethod
    def from_arrays(
        cls,
        vertices,
        faces,
        coords=None,
        coord_faces=None,
        *,
        material_library: Optional[str] = None,
        name: str = "mesh",
    ) -> "Mesh":
        """Build a mesh from vertices, faces and one attribute pair.

        Whether `coords` are texture coordinates or normals is decided by its
        column count: 2 columns are (u, v) texture coordinates, 3 columns are
        normals.

        Example:
            m = Mesh.from_arrays(V, F, VT, FT)   # VT is Nx2 -> texture
            m = Mesh.from_arrays(V, F, VN, FN)   # VN is Nx3 -> normals
        """
        arr = _as_coords(coords, 0, "coords")
        if arr.size == 0 and len(_as_indices(coord_faces, "coord_faces")) == 0:
            return cls(vertices=vertices, faces=faces, material_library=material_library, name=name)
        columns = arr.shape[1] if arr.ndim == 2 else None
        if columns == 2:
            return cls(vertices=vertices, faces=faces, texture_coords=arr, texture_faces=coord_faces,
                       material_library=material_library, name=name)
        if columns == 3:
            return cls(vertices=vertices, faces=faces, normals=arr, normal_faces=coord_faces,
                       material_library=material_library, name=name)
        raise ColumnCountError("coords", "2 (texture) or 3 (normal) columns", arr.shape)

    # ---- queries ----
    @property
    def has_texture(self) -> bool:
        return len(self.texture_faces) > 0

    @property
    def has_normals(self) -> bool:
        return len(self.normal_faces) > 0

    @property
    def face_variant(self) -> FaceVariant:
        """Face-line syntax implied by which per-face arrays are populated."""
        return FaceVariant.from_flags(self.has_texture, self.has_normals)

    def counts(self) -> MeshCounts:
        return MeshCounts(
            vertices=len(self.vertices),
            texture_coords=len(self.texture_coords),
            normals=len(self.normals),
            faces=len(self.faces),
            texture_faces=len(self.texture_faces),
            normal_faces=len(self.normal_faces),
        )

    def face_records(self) -> Iterator[FaceRecord]:
        """Yield one FaceRecord per face, walking the per-face arrays in lockstep.

        Assumes the mesh has been validated (per-face arrays are aligned).
        """
        has_t, has_n = self.has_texture, self.has_normals
        for i, (a, b, c) in enumerate(self.faces.tolist()):
            textures = tuple(self.texture_faces[i].tolist()) if has_t else None
            normals = tuple(self.normal_faces[i].tolist()) if has_n else None
            yield FaceRecord((a, b, c), textures, normals)
