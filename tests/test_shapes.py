from dataclasses import dataclass
import math

import numpy as np
import pytest

from hypershape.model.geometry_primitives import Vector4D
from hypershape.model.geometry_utils import nearest_neighbor_edges
from hypershape.shapes import create_shape, generate, list_keys
from hypershape.shapes.spherical import Buckyball4D


def _undirected(edges):
    return {frozenset(e) for e in edges}


@pytest.mark.parametrize("key", list_keys())
def test_default_geometry_is_consistent(key):
    geometry = generate(key)
    geometry.validate()
    assert geometry.vertex_count > 0
    assert all(i != j for i, j in geometry.edges)
    assert len(_undirected(geometry.edges)) == len(geometry.edges)


@pytest.mark.parametrize("key", list_keys())
def test_generation_is_deterministic(key):
    assert generate(key) == generate(key)


@pytest.mark.parametrize("key, vertices, edges, faces", [
    ("tesseract", 16, 32, 6),
    ("pentachoron", 5, 10, 10),
    ("16-cell", 8, 24, 0),
    ("24-cell", 24, 108, 0),
    ("24-cell-dual", 24, 96, 0),
    ("f4-root-polytope", 48, 336, 0),
    ("duoprism", 12, 24, 19),
    ("buckyball4d", 60, None, 0),
    ("120-cell", 600, None, 0),
    ("600-cell", 120, None, 0),
    ("e4-hyperdiamond", 433, None, 0),
    ("e8-lattice", 1250, 0, 0),
    ("polychoron-prism", 16, 32, 0),
    ("polychoron-antiprism", 8, 24, 0),
])
def test_counts(key, vertices, edges, faces):
    geometry = generate(key)
    assert geometry.vertex_count == vertices
    if edges is not None:
        assert len(geometry.edges) == edges
    assert len(geometry.faces) == faces


def test_tesseract_vertex_bits():
    vertices = generate("tesseract").vertices
    assert vertices[0] == Vector4D(-1, -1, -1, -1)
    assert vertices[1] == Vector4D(1, -1, -1, -1)
    assert vertices[15] == Vector4D(1, 1, 1, 1)


def test_tesseract_edges_differ_in_one_coordinate():
    geometry = generate("tesseract", size=4.0)
    for i, j in geometry.edges:
        a, b = geometry.vertices[i], geometry.vertices[j]
        assert sum(1 for p, q in zip(a, b) if p != q) == 1
        assert math.sqrt(a.distance_squared_to(b)) == pytest.approx(4.0)


def test_pentachoron_is_regular_and_centred():
    geometry = generate("pentachoron", size=3.0)
    lengths = [
        math.sqrt(geometry.vertices[i].distance_squared_to(geometry.vertices[j]))
        for i, j in geometry.edges
    ]
    assert max(lengths) == pytest.approx(min(lengths))
    for axis in range(4):
        assert sum(v.to_array()[axis] for v in geometry.vertices) == pytest.approx(0.0, abs=1e-12)
    for v in geometry.vertices:
        assert v.length() == pytest.approx(3.0)


def test_16_cell_skips_opposite_vertices():
    edges = _undirected(generate("16-cell").edges)
    for k in range(4):
        assert frozenset((2 * k, 2 * k + 1)) not in edges


def test_24_cell_includes_antipodes():
    geometry = generate("24-cell")
    antipodal = [
        (i, j) for i, j in geometry.edges
        if geometry.vertices[i] == -geometry.vertices[j]
    ]
    assert len(antipodal) == 12


@pytest.mark.parametrize("key", ["24-cell-dual", "f4-root-polytope"])
def test_root_polytopes_have_uniform_degree(key):
    geometry = generate(key)
    degree = [0] * geometry.vertex_count
    for i, j in geometry.edges:
        degree[i] += 1
        degree[j] += 1
    assert len(set(degree)) == 1


def test_duoprism_faces():
    geometry = generate("duoprism", m=4, n=5)
    assert geometry.vertex_count == 20
    assert len(geometry.edges) == 40
    sizes = [len(face) for face in geometry.faces]
    assert sizes.count(4) == 5 + 20
    assert sizes.count(5) == 4


@pytest.mark.parametrize("key, params, vertices, edges", [
    ("hypersphere", {"resolution": 4}, 25, 48),
    ("hyperplane", {"resolution": 4}, 25, 32),
    ("klein-bottle", {"resolution": 4}, 25, 32),
    ("hypertorus", {"resolution_1": 6, "resolution_2": 5}, 30, 60),
    ("clifford-torus", {"resolution": 6}, 36, 72),
    ("3-sphere", {"resolution": 8}, 128, 320),
])
def test_parametric_grid_sizes(key, params, vertices, edges):
    geometry = generate(key, **params)
    assert geometry.vertex_count == vertices
    assert len(geometry.edges) == edges


def test_hyperplane_is_flat_and_centered():
    geometry = generate("hyperplane", size=4.0, resolution=4)
    assert all(v.z == 0.0 and v.w == 0.0 for v in geometry.vertices)
    assert geometry.vertices[0] == Vector4D(-2.0, -2.0, 0.0, 0.0)
    assert geometry.vertices[-1] == Vector4D(2.0, 2.0, 0.0, 0.0)


@pytest.mark.parametrize("key, radius", [("clifford-torus", 1.5), ("3-sphere", 1.5), ("hopf-fibration", 2.0)])
def test_points_lie_on_the_sphere(key, radius):
    for v in generate(key).vertices:
        assert v.length() == pytest.approx(radius)


def test_clifford_torus_faces_are_quads():
    geometry = generate("clifford-torus", resolution=5)
    assert len(geometry.faces) == 25
    assert all(len(face) == 4 for face in geometry.faces)


def test_calabi_yau_edges_are_short():
    geometry = generate("calabi-yau", size=1.0)
    assert geometry.vertex_count == 9 * 20 * 20
    assert geometry.edges
    for i, j in geometry.edges:
        assert math.sqrt(geometry.vertices[i].distance_squared_to(geometry.vertices[j])) < 0.25


def test_hopf_edges_are_short_in_3d():
    geometry = generate("hopf-fibration")
    assert geometry.vertex_count == 5 * 10 * 20
    assert geometry.edges
    for i, j in geometry.edges:
        a, b = geometry.vertices[i].to_vector3(), geometry.vertices[j].to_vector3()
        assert (a - b).length() < 0.4 * 2.0


def test_nearest_neighbor_shapes_have_bounded_degree():
    geometry = generate("600-cell")
    assert 0 < len(geometry.edges) <= 3 * 120


def test_fibonacci_edges_follow_stored_vertices():
    @dataclass
    class ReversedBuckyball(Buckyball4D):
        def _generate_vertices(self):
            return list(reversed(super()._generate_vertices()))

    shape = ReversedBuckyball()
    points = np.array([v.to_array() for v in shape.vertices])
    assert shape.edges == nearest_neighbor_edges(points, 3)


def test_e4_hyperdiamond_bonds():
    geometry = generate("e4-hyperdiamond")
    scale = 1.5 / 2
    for i, j in geometry.edges:
        d = math.sqrt(geometry.vertices[i].distance_squared_to(geometry.vertices[j]))
        assert d <= 1.1 * scale + 1e-9


def test_e4_hyperdiamond_drops_unbonded_corners():
    geometry = generate("e4-hyperdiamond")
    scale = 1.5 / 2
    assert Vector4D(2, 2, 2, -2) * scale not in geometry.vertices
    assert Vector4D(2, 2, -2, -2) * scale in geometry.vertices
    # D4 points come first and always bond to the shifted copy
    d4_count = geometry.vertex_count - 128
    bonded = {i for edge in geometry.edges for i in edge}
    assert all(i in bonded for i in range(d4_count))


def test_e8_depth_zero_keeps_even_sums():
    geometry = generate("e8-lattice", depth=0, size=1.0)
    assert geometry.vertex_count == 2 * 313
    integer_points = geometry.vertices[::2]
    assert all(round(v.x + v.y + v.z + v.w) % 2 == 0 for v in integer_points)
    assert geometry.vertices[1] == geometry.vertices[0] + Vector4D(0.5, 0.5, 0.5, 0.5)


@pytest.mark.parametrize("base, vertices, edges", [
    ("tetrahedron", 8, 16),
    ("cube", 16, 32),
    ("icosahedron", 24, None),
])
def test_prism_layers(base, vertices, edges):
    geometry = generate("polychoron-prism", base=base, height=0.5)
    assert geometry.vertex_count == vertices
    if edges is not None:
        assert len(geometry.edges) == edges
    n = vertices // 2
    assert all(v.w == -0.5 for v in geometry.vertices[:n])
    assert all(v.w == 0.5 for v in geometry.vertices[n:])
    for i in range(n):
        assert (i, i + n) in geometry.edges


def test_prism_base_circumradius():
    geometry = generate("polychoron-prism", base="dodecahedron", size=3.0)
    for v in geometry.vertices:
        assert v.to_vector3().length() == pytest.approx(3.0)


def test_antiprism_top_layer_is_turned():
    geometry = generate("polychoron-antiprism", base="cube")
    bottom, top = geometry.vertices[0], geometry.vertices[8]
    assert top.z == pytest.approx(bottom.z)
    assert (top.x, top.y) != pytest.approx((bottom.x, bottom.y))
    assert top.to_vector3().length() == pytest.approx(bottom.to_vector3().length())


@pytest.mark.parametrize("key", ["polychoron-prism", "polychoron-antiprism"])
@pytest.mark.parametrize("base", ["tetrahedron", "cube", "octahedron", "dodecahedron", "icosahedron"])
def test_every_base_vertex_has_base_edges(key, base):
    geometry = generate(key, base=base)
    n = geometry.vertex_count // 2
    degree = [0] * geometry.vertex_count
    for i, j in geometry.edges:
        # Base edges stay within one layer
        if (i < n) == (j < n):
            degree[i] += 1
            degree[j] += 1
    assert min(degree) >= 2


def test_octahedron_prism_keeps_bottom_pole_connected():
    geometry = generate("polychoron-prism", base="octahedron")
    assert sum(1 for i, j in geometry.edges if 5 in (i, j)) == 4


@pytest.mark.parametrize("key, params", [
    ("tesseract", {"size": 0}),
    ("hypersphere", {"radius": -1.0}),
    ("hypertorus", {"resolution_1": 2}),
    ("duoprism", {"m": 2}),
    ("polychoron-prism", {"base": "torus"}),
    ("polychoron-antiprism", {"height": 0}),
    ("e4-hyperdiamond", {"lattice_range": 0}),
    ("3-sphere", {"resolution": 3}),
])
def test_invalid_parameters(key, params):
    with pytest.raises(ValueError):
        create_shape(key, **params)
