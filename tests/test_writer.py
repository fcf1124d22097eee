import numpy as np
import pytest

from objtri import (
    CrossArrayLengthError,
    DestinationExistsError,
    FaceVariant,
    Mesh,
    ShapeMismatchError,
    WriterOptions,
    format_obj,
    material_library_name,
    read_obj,
    write_obj,
)

ATTRIBUTE_SETS = {
    FaceVariant.BARE: (),
    FaceVariant.TEXTURE: ("texture_coords", "texture_faces"),
    FaceVariant.NORMAL: ("normals", "normal_faces"),
    FaceVariant.TEXTURE_NORMAL: ("texture_coords", "texture_faces", "normals", "normal_faces"),
}


def make_mesh(arrays, variant):
    keys = ("vertices", "faces") + ATTRIBUTE_SETS[variant]
    return Mesh(**{k: arrays[k] for k in keys})


def face_lines(text):
    return [line for line in text.splitlines() if line.startswith("f ")]


@pytest.mark.parametrize("variant", list(FaceVariant))
def test_round_trip(tmp_path, quad_mesh_arrays, variant):
    mesh = make_mesh(quad_mesh_arrays, variant)
    path = write_obj(mesh, tmp_path / "out.obj")
    assert path == tmp_path / "out.obj"
    back = read_obj(path).mesh

    assert back.face_variant is variant
    for key in ("vertices", "faces", "texture_coords", "texture_faces", "normals", "normal_faces"):
        np.testing.assert_array_equal(getattr(back, key), getattr(mesh, key), err_msg=key)


@pytest.mark.parametrize("variant, expected", [
    (FaceVariant.BARE, ["f 1 2 3", "f 2 4 3"]),
    (FaceVariant.TEXTURE, ["f 1/1 2/2 3/3", "f 2/2 4/4 3/3"]),
    (FaceVariant.NORMAL, ["f 1//1 2//1 3//1", "f 2//2 4//2 3//2"]),
    (FaceVariant.TEXTURE_NORMAL, ["f 1/1/1 2/2/1 3/3/1", "f 2/2/2 4/4/2 3/3/2"]),
])
def test_face_variant_selection(quad_mesh_arrays, variant, expected):
    text = format_obj(make_mesh(quad_mesh_arrays, variant))
    assert face_lines(text) == expected


def test_textured_triangle_uses_texture_variant(tmp_path):
    mesh = Mesh(
        vertices=[[0, 0, 0], [1, 0, 0], [0, 1, 0]],
        faces=[[1, 2, 3]],
        texture_coords=[[0, 0], [1, 0], [0, 1]],
        texture_faces=[[1, 2, 3]],
    )
    path = write_obj(mesh, tmp_path / "tri.obj")
    text = (tmp_path / "tri.obj").read_text(encoding="utf-8")
    assert face_lines(text) == ["f 1/1 2/2 3/3"]
    assert not any(line.startswith("vn ") for line in text.splitlines())
    np.testing.assert_array_equal(read_obj(path).mesh.texture_faces, [[1, 2, 3]])


def test_mismatched_texture_faces_write_nothing(tmp_path):
    mesh = Mesh(
        vertices=[[0, 0, 0], [1, 0, 0], [0, 1, 0], [1, 1, 0]],
        faces=[[1, 2, 3], [2, 4, 3]],
        texture_coords=[[0, 0], [1, 0], [0, 1]],
        texture_faces=[[1, 2, 3]],
    )
    dest = tmp_path / "bad.obj"
    with pytest.raises(CrossArrayLengthError) as excinfo:
        write_obj(mesh, dest)
    assert isinstance(excinfo.value, ShapeMismatchError)
    assert excinfo.value.array == "texture_faces"
    assert not dest.exists()


def test_mismatched_normal_faces(quad_mesh_arrays):
    arrays = dict(quad_mesh_arrays, normal_faces=quad_mesh_arrays["normal_faces"][:1])
    with pytest.raises(CrossArrayLengthError):
        format_obj(make_mesh(arrays, FaceVariant.NORMAL))


def test_existing_destination_is_signalled(tmp_path, triangle_mesh):
    dest = tmp_path / "tri.obj"
    dest.write_text("keep me\n", encoding="utf-8")

    with pytest.raises(DestinationExistsError) as excinfo:
        write_obj(triangle_mesh, dest)
    assert isinstance(excinfo.value, FileExistsError)
    assert "Filename already exists" in str(excinfo.value)
    assert str(dest) in str(excinfo.value)
    assert dest.read_text(encoding="utf-8") == "keep me\n"

    write_obj(triangle_mesh, dest, WriterOptions(overwrite=True))
    assert face_lines(dest.read_text(encoding="utf-8")) == ["f 1 2 3"]


def test_header_and_material_library(triangle_mesh):
    lines = format_obj(triangle_mesh, "tri.obj").splitlines()
    assert lines[0] == "#"
    assert "# Object tri.obj" in lines
    assert "# Vertices: 3" in lines
    assert "# Faces: 1" in lines
    assert "mtllib ./tri.mtl" in lines


def test_without_header(triangle_mesh):
    lines = format_obj(triangle_mesh, "tri.obj", WriterOptions(header=False)).splitlines()
    assert lines[0] == "mtllib ./tri.mtl"
    assert not any(line.startswith("#") for line in lines)


def test_blocks_are_ordered(quad_mesh_arrays):
    text = format_obj(make_mesh(quad_mesh_arrays, FaceVariant.TEXTURE_NORMAL))
    kinds = [line.split()[0] for line in text.splitlines() if line and not line.startswith(("#", "mtllib"))]
    assert kinds == ["v"] * 4 + ["vt"] * 4 + ["vn"] * 2 + ["f"] * 2


def test_fixed_precision():
    mesh = Mesh(vertices=[[1 / 3, 0, 0], [1, 0, 0], [0, 1, 0]], faces=[[1, 2, 3]])
    text = format_obj(mesh, options=WriterOptions(precision=6))
    assert "v 0.333333 0.000000 0.000000" in text.splitlines()


def test_exact_floats_by_default():
    mesh = Mesh(vertices=[[0.1, 1 / 3, -2.5e-8], [1, 0, 0], [0, 1, 0]], faces=[[1, 2, 3]])
    vline = [line for line in format_obj(mesh).splitlines() if line.startswith("v ")][0]
    assert [float(x) for x in vline.split()[1:]] == [0.1, 1 / 3, -2.5e-8]


def test_negative_precision_rejected():
    with pytest.raises(ValueError):
        WriterOptions(precision=-1)


@pytest.mark.parametrize("destination, expected", [
    ("bunny.obj", "bunny.mtl"),
    ("out/bunny.obj", "bunny.mtl"),
    ("model.OBJ", "model.mtl"),
    ("ab", "ab.mtl"),
])
def test_material_library_name(destination, expected):
    assert material_library_name(destination) == expected
