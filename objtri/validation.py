# objtri/validation.py
"""Shape and index checks shared by the reader and the writer.

Every check either returns None or raises a ShapeMismatchError subclass that
names the offending array. Nothing here repairs or truncates data.
"""
from __future__ import annotations

import numpy as np

from .errors import (
    ColumnCountError,
    CrossArrayLengthError,
    EmptyMeshError,
    IndexRangeError,
    NoFacesError,
    RowCountError,
)
from .mesh import Mesh

MIN_VERTICES = 3
MIN_FACES = 1


def check_columns(arr: np.ndarray, columns: int, name: str) -> None:
    if arr.ndim != 2 or arr.shape[1] != columns:
        raise ColumnCountError(name, f"Nx{columns} array", f"shape {arr.shape}")


def check_vertices(vertices: np.ndarray) -> None:
    check_columns(vertices, 3, "vertices")
    if len(vertices) < MIN_VERTICES:
        raise RowCountError("vertices", f"at least {MIN_VERTICES} rows", len(vertices))


def check_faces(faces: np.ndarray) -> None:
    check_columns(faces, 3, "faces")
    if len(faces) < MIN_FACES:
        raise RowCountError("faces", f"at least {MIN_FACES} row", len(faces))


def check_aligned(faces: np.ndarray, attr_faces: np.ndarray, name: str) -> None:
    if len(attr_faces) != len(faces):
        raise CrossArrayLengthError(name, f"{len(faces)} rows (one per face)", len(attr_faces))


def check_index_range(indices: np.ndarray, count: int, name: str) -> None:
    """All indices must be 1-based references into an array of `count` rows."""
    if indices.size == 0:
        return
    lo, hi = int(indices.min()), int(indices.max())
    if lo < 1 or hi > count:
        raise IndexRangeError(name, f"indices in [1, {count}]", f"[{lo}, {hi}]")


def _check_attribute(faces: np.ndarray, coords: np.ndarray, attr_faces: np.ndarray,
                     coord_columns: int, coords_name: str, faces_name: str) -> None:
    check_columns(coords, coord_columns, coords_name)
    check_columns(attr_faces, 3, faces_name)
    if len(coords) > 0:
        check_aligned(faces, attr_faces, faces_name)
    elif len(attr_faces) > 0:
        # per-face references with nothing to refer to
        raise RowCountError(coords_name, f"rows referenced by {faces_name}", 0)
    check_index_range(attr_faces, len(coords), faces_name)


def validate_mesh(mesh: Mesh) -> None:
    """Run every structural check on a mesh, in a fixed order.

    Order: vertex presence, vertex shape, face presence, face shape,
    vertex-index range, then texture and normal attribute pairs.
    """
    if len(mesh.vertices) == 0:
        raise EmptyMeshError()
    check_vertices(mesh.vertices)
    if len(mesh.faces) == 0:
        raise NoFacesError()
    check_faces(mesh.faces)
    check_index_range(mesh.faces, len(mesh.vertices), "faces")
    _check_attribute(mesh.faces, mesh.texture_coords, mesh.texture_faces, 2, "texture_coords", "texture_faces")
    _check_attribute(mesh.faces, mesh.normals, mesh.normal_faces, 3, "normals", "normal_faces")
