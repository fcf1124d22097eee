# objtri/reader.py
"""
Line-oriented OBJ reader.

Lines are routed by prefix:

    mtl...   material library reference (mtllib)
    v        vertex         3 floats
    vn       vertex normal  3 floats
    vt       texture coord  2 floats
    f        face           see objtri.faces

Everything else (comments, o/g/s/usemtl records, blank lines) is skipped.
The read is all-or-nothing: the first bad line aborts it, and the finished
arrays are validated as a whole before a Mesh is returned.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import IO, Iterable, List, Optional, Union

from .errors import MalformedRecordError, ObjFileNotFoundError
from .faces import classify_face
from .mesh import FaceRecord, Mesh, MeshCounts, Vec2, Vec3
from .validation import validate_mesh

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]
LineSource = Union[PathLike, IO[str], Iterable[str]]


@dataclass(frozen=True)
class ObjReadResult:
    mesh: Mesh
    counts: MeshCounts


# -------------
# Line parsers
# -------------

def _floats(line: str, count: int, line_number: int) -> tuple:
    fields = line.split()[1:count + 1]
    if len(fields) < count:
        raise MalformedRecordError(f"expected {count} values, got {len(fields)}", line_number, line)
    try:
        return tuple(float(x) for x in fields)
    except ValueError:
        raise MalformedRecordError("non-numeric value", line_number, line) from None


def parse_material_library(line: str) -> str:
    """Extract the file name of an mtllib line.

    A './' relative prefix is stripped; otherwise the name is the last
    space-separated token.

    Example:
        parse_material_library("mtllib ./cube.mtl") -> "cube.mtl"
    """
    line = line.rstrip("\r\n")
    start = line.find("./")
    if start != -1:
        return line[start + 2:]
    return line[line.rfind(" ") + 1:]


# ---------
# Scanner
# ---------

class _ObjScanner:
    """Accumulates the raw records of one OBJ text."""

    def __init__(self) -> None:
        self.vertices: List[Vec3] = []
        self.texture_coords: List[Vec2] = []
        self.normals: List[Vec3] = []
        self.records: List[FaceRecord] = []
        self.material_library: Optional[str] = None

    def feed(self, line: str, line_number: int) -> None:
        if line.startswith("mtl"):
            self.material_library = parse_material_library(line)
        elif line.startswith("v "):
            self.vertices.append(_floats(line, 3, line_number))
        elif line.startswith("vn "):
            self.normals.append(_floats(line, 3, line_number))
        elif line.startswith("vt "):
            self.texture_coords.append(_floats(line, 2, line_number))
        elif line.startswith("f "):
            self.records.append(classify_face(line, line_number))

    def counts(self) -> MeshCounts:
        return MeshCounts(
            vertices=len(self.vertices),
            texture_coords=len(self.texture_coords),
            normals=len(self.normals),
            faces=len(self.records),
            texture_faces=sum(1 for r in self.records if r.textures is not None),
            normal_faces=sum(1 for r in self.records if r.normals is not None),
        )

    def build(self, name: str) -> Mesh:
        return Mesh.from_records(
            self.vertices,
            self.records,
            texture_coords=self.texture_coords,
            normals=self.normals,
            material_library=self.material_library,
            name=name,
        )


# ----------
# Public API
# ----------

def parse_obj(lines: Iterable[str], name: str = "mesh") -> ObjReadResult:
    """Parse OBJ text given as an iterable of lines (an open file works)."""
    scanner = _ObjScanner()
    for line_number, line in enumerate(lines, start=1):
        scanner.feed(line, line_number)

    counts = scanner.counts()
    logger.debug(f"Model file contained {counts.vertices} vertices and {counts.faces} faces.")
    mesh = scanner.build(name)
    validate_mesh(mesh)

    logger.debug(
        f"Mesh texture: {counts.texture_coords} coords / {counts.texture_faces} faces, "
        f"normals: {counts.normals} / {counts.normal_faces} faces"
    )
    if mesh.material_library is not None:
        logger.debug(f"Material library file is present: {mesh.material_library}")
    return ObjReadResult(mesh, counts)


def read_obj(source: LineSource) -> ObjReadResult:
    """
    Read a triangular OBJ mesh from a path or an open text stream.

    Returns the mesh together with the per-kind record counts. Raises
    ObjFileNotFoundError if a path cannot be opened and an ObjError subclass
    for any parse or validation failure.

    Example:
        result = read_obj("cube.obj")
        result.mesh.faces.shape   -> (12, 3)
        result.counts.vertices    -> 8
    """
    if isinstance(source, (str, os.PathLike)):
        path = os.fspath(source)
        name = os.path.splitext(os.path.basename(path))[0] or "mesh"
        logger.info(f"Reading OBJ file: {path}")
        try:
            # undecodable bytes only ever matter in skipped records (comments, names)
            f = open(path, "r", encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            raise ObjFileNotFoundError(path) from e
        with f:
            return parse_obj(f, name=name)
    return parse_obj(source)


def load_obj(source: LineSource) -> Mesh:
    """Like read_obj, but return only the mesh."""
    return read_obj(source).mesh
