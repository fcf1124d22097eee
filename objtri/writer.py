# objtri/writer.py
"""
Variant-aware OBJ writer.

The face syntax is chosen from which per-face arrays the mesh carries:

    texture_faces  normal_faces   face line
    -------------  ------------   ----------------------
    empty          empty          f 1 2 3
    present        empty          f 1/1 2/2 3/3
    empty          present        f 1//1 2//2 3//3
    present        present        f 1/1/1 2/2/2 3/3/3

which is the exact inverse of the reader's classification, so
read_obj(write_obj(mesh)) reproduces the arrays.
"""
from __future__ import annotations

import logging
import os
import pathlib
from typing import List, Optional, Union

from .config import WriterOptions
from .errors import DestinationExistsError
from .mesh import FaceRecord, FaceVariant, Mesh
from .validation import validate_mesh

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def material_library_name(destination: PathLike) -> str:
    """Derive the .mtl file name from the destination by swapping its 3-letter extension.

    Example:
        material_library_name("out/bunny.obj") -> "bunny.mtl"
    """
    name = os.path.basename(os.fspath(destination))
    if len(name) > 3:
        return name[:-3] + "mtl"
    return name + ".mtl"


def destination_exists(destination: PathLike) -> bool:
    return os.path.exists(os.fspath(destination))


# ---------------
# Line formatting
# ---------------

def _fmt(x: float, precision: Optional[int]) -> str:
    if precision is None:
        return repr(float(x))
    return f"{float(x):.{precision}f}"


def _corner(variant: FaceVariant, rec: FaceRecord, i: int) -> str:
    vi = rec.vertices[i]
    if variant is FaceVariant.TEXTURE_NORMAL:
        return f"{vi}/{rec.textures[i]}/{rec.normals[i]}"
    elif variant is FaceVariant.TEXTURE:
        return f"{vi}/{rec.textures[i]}"
    elif variant is FaceVariant.NORMAL:
        return f"{vi}//{rec.normals[i]}"
    else:
        return f"{vi}"


def _header(mesh: Mesh, object_name: str, options: WriterOptions) -> List[str]:
    return [
        "#",
        f"# OBJ File generated by {options.generator}",
        "# using 'write_obj' function",
        "#",
        f"# Object {object_name}",
        "#",
        f"# Vertices: {len(mesh.vertices)}",
        f"# Faces: {len(mesh.faces)}",
        "#",
        "#",
    ]


def format_obj(mesh: Mesh, destination: PathLike = "mesh.obj", options: Optional[WriterOptions] = None) -> str:
    """
    Render a mesh as OBJ text without touching the filesystem.

    `destination` only feeds the header and the derived mtllib name.
    The mesh is validated first; a ShapeMismatchError (or any other
    MeshValidationError) aborts before anything is rendered.
    """
    options = options or WriterOptions()
    validate_mesh(mesh)

    p = options.precision
    variant = mesh.face_variant
    lines: List[str] = []
    if options.header:
        lines.extend(_header(mesh, options.object_name or os.fspath(destination), options))
    lines.append(f"mtllib ./{material_library_name(destination)}")
    lines.append("")

    for x, y, z in mesh.vertices.tolist():
        lines.append(f"v {_fmt(x, p)} {_fmt(y, p)} {_fmt(z, p)}")
    if variant.has_texture:
        for u, v in mesh.texture_coords.tolist():
            lines.append(f"vt {_fmt(u, p)} {_fmt(v, p)}")
    if variant.has_normals:
        for nx, ny, nz in mesh.normals.tolist():
            lines.append(f"vn {_fmt(nx, p)} {_fmt(ny, p)} {_fmt(nz, p)}")

    for rec in mesh.face_records():
        lines.append(f"f {_corner(variant, rec, 0)} {_corner(variant, rec, 1)} {_corner(variant, rec, 2)}")
    return "\n".join(lines) + "\n"


def write_obj(mesh: Mesh, destination: PathLike, options: Optional[WriterOptions] = None) -> pathlib.Path:
    """
    Save a triangular mesh as an OBJ file and return the path written.

    Raises DestinationExistsError if the file exists and options.overwrite
    is false. Nothing is written in that case, nor when validation fails;
    the caller decides on a final destination and calls again.

    Example:
        write_obj(mesh, "bunny.obj")
        write_obj(mesh, "bunny.obj", WriterOptions(overwrite=True, precision=6))
    """
    options = options or WriterOptions()
    path = os.fspath(destination)
    text = format_obj(mesh, path, options)

    if destination_exists(path) and not options.overwrite:
        raise DestinationExistsError(path)

    logger.info(f"Writing OBJ file: {path}")
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    logger.debug(f"Mesh saved: {len(mesh.vertices)} vertices, {len(mesh.faces)} faces, {mesh.face_variant.value} faces.")
    return pathlib.Path(path)
