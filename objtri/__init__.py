"""
objtri: read and write triangular Wavefront OBJ meshes.

Highlights
---------
• Mesh model backed by numpy arrays: vertices, faces, texture coordinates,
  normals and their per-face index triples, plus the mtllib reference
• Face classifier for the four OBJ face syntaxes (v, v/vt, v/vt/vn, v//vn)
  that rejects quads and n-gons
• All-or-nothing reader with typed errors carrying line numbers
• Writer that picks the face syntax from the arrays present, so
  write -> read reproduces the arrays
• Mesh barycenter and face areas
• Tiny CLI: python -m objtri info|barycenter|convert
"""
from .analysis import face_areas, face_centroids, mesh_barycenter, surface_area
from .config import WriterOptions
from .errors import (
    ColumnCountError,
    CrossArrayLengthError,
    DestinationExistsError,
    EmptyMeshError,
    IndexRangeError,
    MalformedRecordError,
    MeshValidationError,
    NoFacesError,
    NonTriangularFaceError,
    ObjError,
    ObjFileNotFoundError,
    ObjParseError,
    RowCountError,
    ShapeMismatchError,
    UnrecognizedFaceSyntaxError,
)
from .faces import classify_face
from .mesh import FaceRecord, FaceVariant, Mesh, MeshCounts
from .reader import ObjReadResult, load_obj, parse_obj, read_obj
from .validation import validate_mesh
from .writer import destination_exists, format_obj, material_library_name, write_obj

__version__ = "0.1.0"
