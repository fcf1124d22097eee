import numpy as np
import pytest

from objtri import Mesh

TRIANGLE_OBJ = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"

TEXTURED_OBJ = (
    "v 0 0 0\nv 1 0 0\nv 0 1 0\n"
    "vt 0 0\nvt 1 0\nvt 0 1\n"
    "f 1/1 2/2 3/3\n"
)


@pytest.fixture
def obj_file(tmp_path):
    """Factory writing OBJ text to a file under tmp_path and returning its path."""
    def make(text, name="mesh.obj"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return make


@pytest.fixture
def quad_mesh_arrays():
    """Two triangles sharing an edge, with texture and normal data."""
    return dict(
        vertices=np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [1.0, 1.0, 0.5]]),
        faces=np.array([[1, 2, 3], [2, 4, 3]]),
        texture_coords=np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [0.1, 1 / 3]]),
        texture_faces=np.array([[1, 2, 3], [2, 4, 3]]),
        normals=np.array([[0.0, 0.0, 1.0], [0.1, -0.2, 0.97]]),
        normal_faces=np.array([[1, 1, 1], [2, 2, 2]]),
    )


@pytest.fixture
def triangle_mesh():
    return Mesh(vertices=[[0, 0, 0], [1, 0, 0], [0, 1, 0]], faces=[[1, 2, 3]])
