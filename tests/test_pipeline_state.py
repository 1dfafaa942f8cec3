import math

import pytest

from hypershape.model.coloring import ColorMapping4D
from hypershape.model.geometry_primitives import Geometry4D, Vector3D, Vector4D
from hypershape.model.pipeline import project_geometry, triangulate_faces
from hypershape.model.projection import Projection4D, ProjectionType
from hypershape.model.rotation import Rotation4D
from hypershape.model.state import ViewerState
from hypershape.shapes import generate


def test_fan_triangulation():
    assert triangulate_faces([(0, 1, 2, 3), (4, 5), (6, 7, 8)]) == [(0, 1, 2), (0, 2, 3), (6, 7, 8)]


def test_tesseract_end_to_end():
    geometry = generate("tesseract")
    frame = project_geometry(geometry, Rotation4D(), Projection4D())
    assert frame.points[0] == Vector3D(-1.25, -1.25, -1.25)
    assert len(frame.segments) == 32
    # 6 octagons, 6 triangles each
    assert len(frame.triangles) == 36
    assert frame.colors == []

    orthographic = project_geometry(geometry, Rotation4D(), Projection4D(ProjectionType.ORTHOGRAPHIC))
    assert orthographic.points[0] == Vector3D(-1, -1, -1)


def test_frame_arrays_and_colors():
    geometry = generate("pentachoron")
    frame = project_geometry(geometry, Rotation4D(0.3, 0.1, 0.2, 0.5), Projection4D(), ColorMapping4D())
    assert frame.positions().shape == (5, 3)
    assert frame.segment_array().shape == (10, 2, 3)
    assert len(frame.colors) == 5
    # Colors come from the unrotated vertices
    assert frame.colors[4] == ColorMapping4D().get_color(geometry.vertices[4])


def test_empty_frame_arrays():
    frame = project_geometry(Geometry4D(), Rotation4D(), Projection4D())
    assert frame.positions().shape == (0, 3)
    assert frame.segment_array().shape == (0, 2, 3)


def test_state_starts_with_tesseract():
    state = ViewerState()
    assert state.shape_key == "tesseract"
    assert state.geometry.vertex_count == 16


def test_load_shape_and_unknown_key():
    state = ViewerState()
    state.load_shape("duoprism", m=5)
    assert state.parameters == {"m": 5, "n": 4, "size": 2.0}
    with pytest.raises(KeyError):
        state.load_shape("nonexistent")
    # Previous shape stays loaded
    assert state.shape_key == "duoprism"
    assert state.geometry.vertex_count == 20


def test_update_projection_and_reset():
    state = ViewerState()
    state.update_rotation(0.1, 0.2, 0.3, 0.4)
    state.update_projection("stereographic", distance=3.0)
    assert state.projection.projection_type is ProjectionType.STEREOGRAPHIC
    assert state.projection.distance == 3.0
    state.update_projection(ProjectionType.ORTHOGRAPHIC)
    assert state.projection.distance == 3.0

    state.reset_view()
    assert tuple(state.rotation.angles) == (0.0, 0.0, 0.0, 0.0)
    assert state.rotation.matrix.allclose(Rotation4D().matrix)
    assert state.projection.projection_type is ProjectionType.ORTHOGRAPHIC


def test_tick_with_auto_rotation():
    state = ViewerState()
    assert state.toggle_auto_rotation() is True
    frame = state.tick()
    t = 0.016 * 1.0 * 0.03
    assert state.animation.time == pytest.approx(t)
    assert state.rotation.rotation_x == pytest.approx(math.sin(t) * 0.5 * 2 * math.pi)
    assert state.rotation.rotation_w == pytest.approx(math.cos(0.9 * t) * 0.5 * 2 * math.pi)
    assert len(frame.points) == 16


def test_tick_without_auto_rotation_keeps_rotation():
    state = ViewerState()
    state.update_rotation(0.5, 0.0, 0.0, 0.0)
    state.animation.start()
    state.update_animation_speed(2.0)
    state.tick(0.5)
    assert state.animation.time == pytest.approx(1.0)
    assert state.rotation.rotation_x == 0.5


def test_frame_rotates_before_projecting():
    state = ViewerState()
    state.load_shape("tesseract")
    state.update_projection("orthographic")
    state.update_rotation(0.0, 0.0, math.pi, 0.0)
    point = state.frame().points[0]
    expected = Rotation4D(rotation_z=math.pi).rotate_point(Vector4D(-1, -1, -1, -1))
    assert tuple(point) == pytest.approx((expected.x, expected.y, expected.z))
