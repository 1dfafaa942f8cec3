import math

import numpy as np
import pytest

from hypershape.model.geometry_primitives import Geometry4D, Matrix4D, Vector3D, Vector4D, multiply


def test_vector_arithmetic():
    a = Vector4D(1, 2, 3, 4)
    b = Vector4D(0.5, -1, 2, 0)
    assert a.add(b) == Vector4D(1.5, 1, 5, 4)
    assert a - b == Vector4D(0.5, 3, 1, 4)
    assert 2 * a == Vector4D(2, 4, 6, 8)
    assert a.dot(b) == pytest.approx(0.5 - 2 + 6)
    assert -a == Vector4D(-1, -2, -3, -4)


def test_length_and_normalize():
    v = Vector4D(1, 1, 1, 1)
    assert v.length() == pytest.approx(2.0)
    n = v.normalize()
    assert n.length() == pytest.approx(1.0)
    assert n.x == pytest.approx(0.5)


def test_normalize_zero_vector_stays_zero():
    assert Vector4D().normalize() == Vector4D(0.0, 0.0, 0.0, 0.0)


def test_vector_conversions():
    v = Vector4D(1, 2, 3, 4)
    assert v.to_vector3() == Vector3D(1, 2, 3)
    assert Vector4D.from_vector3(Vector3D(1, 2, 3), w=4) == v
    assert Vector4D.from_array(np.array([1.0, 2.0, 3.0, 4.0])) == v
    with pytest.raises(ValueError):
        Vector4D.from_array([1.0, 2.0, 3.0])
    assert v.distance_squared_to(Vector4D()) == pytest.approx(30.0)


def test_matrix_defaults_to_identity():
    m = Matrix4D()
    v = Vector4D(1, -2, 3, -4)
    assert m.transform_vector(v) == v
    assert m.get(2, 2) == 1.0 and m.get(2, 3) == 0.0


def test_matrix_requires_sixteen_elements():
    with pytest.raises(ValueError):
        Matrix4D([1.0] * 15)


def test_multiply_matches_numpy():
    a = Matrix4D([float(i) for i in range(16)])
    b = Matrix4D([float(16 - i) for i in range(16)])
    product = multiply(a, b)
    assert np.allclose(product.to_array(), a.to_array() @ b.to_array())
    # The module function does not touch its operands
    assert a.get(0, 1) == 1.0


def test_in_place_multiply_returns_self():
    m = Matrix4D()
    result = m.multiply(Matrix4D.rotation(0, 1, 0.3))
    assert result is m
    assert m.get(0, 1) == pytest.approx(math.sin(0.3))


def test_rotation_sign_convention():
    m = Matrix4D.rotation(0, 1, math.pi / 2)
    rotated = m.transform_vector(Vector4D(1, 0, 0, 0))
    assert rotated.x == pytest.approx(0.0, abs=1e-12)
    assert rotated.y == pytest.approx(-1.0)


def test_rotation_rejects_invalid_axes():
    with pytest.raises(ValueError):
        Matrix4D.rotation(1, 1, 0.5)
    with pytest.raises(ValueError):
        Matrix4D.rotation(0, 4, 0.5)


def test_rotate_helpers_chain():
    m = Matrix4D().rotate_xy(0.2).rotate_zw(0.4)
    expected = multiply(Matrix4D.rotation(0, 1, 0.2), Matrix4D.rotation(2, 3, 0.4))
    assert m.allclose(expected)


def test_geometry_validate_rejects_bad_indices():
    vertices = [Vector4D(), Vector4D(1, 0, 0, 0)]
    Geometry4D(vertices, [(0, 1)]).validate()
    with pytest.raises(ValueError):
        Geometry4D(vertices, [(0, 2)]).validate()
    with pytest.raises(ValueError):
        Geometry4D(vertices, [(1, 1)]).validate()
    with pytest.raises(ValueError):
        Geometry4D(vertices, [], [(0, 1)]).validate()


def test_geometry_dict_round_trip():
    geometry = Geometry4D([Vector4D(1, 2, 3, 4), Vector4D(), Vector4D(0, 1, 0, 0)], [(0, 1)], [(0, 1, 2)])
    restored = Geometry4D.from_dict(geometry.to_dict())
    assert restored == geometry


def test_geometry_from_dict_malformed():
    with pytest.raises(ValueError):
        Geometry4D.from_dict({"edges": []})
    with pytest.raises(ValueError):
        Geometry4D.from_dict({"vertices": [[0, 0, 0, 0]], "edges": [[0, 3]]})


def test_empty_vertex_array_shape():
    assert Geometry4D().vertex_array().shape == (0, 4)


def test_geometry_from_dict_rejects_fractional_indices():
    vertices = [[0, 0, 0, 0], [1, 0, 0, 0], [0, 1, 0, 0]]
    with pytest.raises(ValueError):
        Geometry4D.from_dict({"vertices": vertices, "edges": [[0, 1.7]]})
    with pytest.raises(ValueError):
        Geometry4D.from_dict({"vertices": vertices, "faces": [[0, 1, 2.5]]})
    geometry = Geometry4D.from_dict({"vertices": vertices, "edges": [[0.0, 2.0]]})
    assert geometry.edges == [(0, 2)]
