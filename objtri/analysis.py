# objtri/analysis.py
from __future__ import annotations

import numpy as np

from .mesh import Mesh


# ----------------------------
# Per-face geometry
# ----------------------------

def _corners(mesh: Mesh):
    # faces are 1-based
    idx = mesh.faces - 1
    v = mesh.vertices
    return v[idx[:, 0]], v[idx[:, 1]], v[idx[:, 2]]


def face_centroids(mesh: Mesh) -> np.ndarray:
    """(F, 3) centroid of every triangle."""
    a, b, c = _corners(mesh)
    return (a + b + c) / 3.0


def face_areas(mesh: Mesh) -> np.ndarray:
    """(F,) area of every triangle: half the norm of AB x AC."""
    a, b, c = _corners(mesh)
    return 0.5 * np.linalg.norm(np.cross(b - a, c - a), axis=1)


def surface_area(mesh: Mesh) -> float:
    return float(face_areas(mesh).sum())


# ----------------------------
# Barycenter
# ----------------------------

def mesh_barycenter(mesh: Mesh, area_weighted: bool = False) -> np.ndarray:
    """
    Barycenter of a triangular mesh as a (3,) array.

    By default this is the plain mean of the face centroids: every face counts
    the same regardless of its size. Pass area_weighted=True for the centroid
    of the surface, where each face centroid is weighted by the face area.

    The mesh must already be valid (see objtri.validation.validate_mesh).

    Example:
        mesh_barycenter(load_obj("triangle.obj")) -> array([0.333, 0.333, 0.])
    """
    centroids = face_centroids(mesh)
    if not area_weighted:
        return centroids.mean(axis=0)
    areas = face_areas(mesh)
    total = areas.sum()
    if total == 0.0:
        raise ValueError("area-weighted barycenter is undefined for a mesh with zero surface area")
    return (centroids * areas[:, None]).sum(axis=0) / total
