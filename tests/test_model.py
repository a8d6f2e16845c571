import pytest

from hg4dslicer.model import (
    BuildVolumeExceededError,
    InvalidGeometryError,
    Mesh,
    MeshUnits,
    ModelLoadError,
    SlicerError,
)


def _quad_mesh():
    return Mesh(
        vertices=[
            0.0, 0.0, 0.0,
            10.0, 0.0, 0.0,
            10.0, 10.0, 0.0,
            0.0, 10.0, 5.0,
        ],
        indices=[0, 1, 2, 0, 2, 3],
        normals=None,
        units=MeshUnits.MILLIMETERS,
    )


def test_mesh_bounding_box():
    assert _quad_mesh().bounding_box() == (0.0, 0.0, 0.0, 10.0, 10.0, 5.0)


def test_bounding_box_negative_coordinates():
    mesh = Mesh(vertices=[-1.0, 2.0, -3.0, 4.0, -5.0, 6.0], indices=[0, 1, 0])
    assert mesh.bounding_box() == (-1.0, -5.0, -3.0, 4.0, 2.0, 6.0)


@pytest.mark.parametrize(
    "source, target, factor",
    [
        (MeshUnits.MILLIMETERS, MeshUnits.CENTIMETERS, 0.1),
        (MeshUnits.MILLIMETERS, MeshUnits.METERS, 0.001),
        (MeshUnits.MILLIMETERS, MeshUnits.INCHES, 0.0393701),
        (MeshUnits.CENTIMETERS, MeshUnits.MILLIMETERS, 10.0),
        (MeshUnits.METERS, MeshUnits.MILLIMETERS, 1000.0),
        (MeshUnits.INCHES, MeshUnits.MILLIMETERS, 25.4),
    ],
)
def test_convert_units(source, target, factor):
    mesh = Mesh(vertices=[1.0, 2.0, 3.0], indices=[0, 0, 0], units=source)
    mesh.convert_units(target)
    assert mesh.units is target
    assert mesh.vertices == pytest.approx([factor, 2 * factor, 3 * factor])


def test_convert_units_same_unit_is_noop():
    mesh = _quad_mesh()
    before = list(mesh.vertices)
    mesh.convert_units(MeshUnits.MILLIMETERS)
    assert mesh.vertices == before


def test_convert_units_unlisted_pair_keeps_values_changes_unit():
    mesh = Mesh(vertices=[1.0, 2.0, 3.0], indices=[0, 0, 0], units=MeshUnits.CENTIMETERS)
    mesh.convert_units(MeshUnits.INCHES)
    assert mesh.vertices == [1.0, 2.0, 3.0]
    assert mesh.units is MeshUnits.INCHES


def test_validate_accepts_good_mesh():
    mesh = _quad_mesh()
    mesh.validate()
    assert len(mesh.indices) == 6


@pytest.mark.parametrize(
    "vertices, indices, message",
    [
        ([], [0, 1, 2], "Mesh has no vertices"),
        ([0.0, 1.0], [0, 0, 0], "Vertex data length not multiple of 3"),
        ([0.0, 0.0, 0.0], [], "Mesh has no triangles"),
        ([0.0, 0.0, 0.0], [0, 0], "Index data length not multiple of 3"),
        ([0.0, 0.0, 0.0], [0, 0, 1], "Triangle references out-of-bounds vertex 1"),
    ],
)
def test_validate_errors(vertices, indices, message):
    mesh = Mesh(vertices=vertices, indices=indices)
    with pytest.raises(InvalidGeometryError) as info:
        mesh.validate()
    assert info.value.detail == message
    assert str(info.value) == f"Invalid geometry: {message}"


def test_error_messages_and_hierarchy():
    err = BuildVolumeExceededError("too tall")
    assert str(err) == "Model exceeds build volume: too tall"
    assert isinstance(err, SlicerError)
    assert str(ModelLoadError("missing")) == "Model loading error: missing"