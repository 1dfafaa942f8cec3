import pytest

from hypershape.config import FAR_POINT
from hypershape.model.geometry_primitives import Vector3D, Vector4D
from hypershape.model.projection import (
    Projection4D,
    ProjectionType,
    orthographic_projection,
    perspective_projection,
    stereographic_projection,
)


def test_perspective_scales_by_distance():
    p = perspective_projection(Vector4D(1, 2, 3, 1), 5.0)
    assert tuple(p) == pytest.approx((5 / 6, 10 / 6, 15 / 6))


def test_perspective_near_zero_w_is_unscaled():
    assert perspective_projection(Vector4D(1, 2, 3, 0.0), 5.0) == Vector3D(1, 2, 3)
    assert perspective_projection(Vector4D(1, 2, 3, 0.0009), 5.0) == Vector3D(1, 2, 3)


def test_perspective_at_eye_returns_far_point():
    assert tuple(perspective_projection(Vector4D(1, 1, 1, -5.0), 5.0)) == FAR_POINT


def test_orthographic_drops_w():
    assert orthographic_projection(Vector4D(1, 2, 3, 99)) == Vector3D(1, 2, 3)


def test_stereographic():
    p = stereographic_projection(Vector4D(1, 2, 3, 0.5))
    assert tuple(p) == pytest.approx((2, 4, 6))


@pytest.mark.parametrize("w", [0.9995, 1.0, 1.5])
def test_stereographic_pole_returns_sentinel(w):
    assert stereographic_projection(Vector4D(1, 1, 1, w)) == Vector3D(0.0, 0.0, 1000.0)


def test_stereographic_just_below_pole_is_large_but_finite():
    p = stereographic_projection(Vector4D(1, 0, 0, 0.998))
    assert p.x == pytest.approx(500.0)


def test_projection_dispatch():
    projection = Projection4D()
    v = Vector4D(1, 1, 1, 1)
    assert projection.project(v) == perspective_projection(v, 5.0)
    projection.set_type("orthographic")
    assert projection.projection_type is ProjectionType.ORTHOGRAPHIC
    assert projection.project(v) == Vector3D(1, 1, 1)
    projection.set_type(ProjectionType.STEREOGRAPHIC)
    assert projection.project(Vector4D(1, 1, 1, 0.5)) == Vector3D(2, 2, 2)


def test_invalid_configuration():
    projection = Projection4D()
    with pytest.raises(ValueError):
        projection.set_type("fisheye")
    with pytest.raises(ValueError):
        projection.set_distance(0)
    with pytest.raises(ValueError):
        Projection4D(distance=-1.0)


def test_project_edges_resolves_endpoints():
    projection = Projection4D(projection_type=ProjectionType.ORTHOGRAPHIC)
    vertices = [Vector4D(0, 0, 0, 1), Vector4D(1, 0, 0, 1), Vector4D(0, 1, 0, 1)]
    segments = projection.project_edges([(0, 1), (1, 2)], vertices)
    assert segments == [
        (Vector3D(0, 0, 0), Vector3D(1, 0, 0)),
        (Vector3D(1, 0, 0), Vector3D(0, 1, 0)),
    ]
