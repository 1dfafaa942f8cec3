"""
Regular and uniform 4-polytopes built from closed-form symmetry rules.

Vertices are enumerated from sign/permutation patterns; edges follow an
explicit combinatorial rule over vertex indices or coordinates.
"""
from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
import math
from typing import List

from hypershape.model.geometry_primitives import Vector4D
from hypershape.model.geometry_utils import grid_edges, hamming_distance
from hypershape.shapes.base import Edge, Face, Shape4D, require_at_least, require_positive
from hypershape.shapes.registry import register_shape

INNER_PRODUCT_TOLERANCE = 1e-9


def _signed_pairs(scale: float) -> List[Vector4D]:
    """All permutations of (+-scale, +-scale, 0, 0), pair positions in lexicographic order."""
    vertices = []
    for i, j in combinations(range(4), 2):
        for si in (1, -1):
            for sj in (1, -1):
                coords = [0.0, 0.0, 0.0, 0.0]
                coords[i] = si * scale
                coords[j] = sj * scale
                vertices.append(Vector4D(*coords))
    return vertices


def _axis_points(scale: float) -> List[Vector4D]:
    """The 8 points (+-scale, 0, 0, 0) and permutations."""
    vertices = []
    for axis in range(4):
        for sign in (1, -1):
            coords = [0.0, 0.0, 0.0, 0.0]
            coords[axis] = sign * scale
            vertices.append(Vector4D(*coords))
    return vertices


def _half_points(scale: float) -> List[Vector4D]:
    """The 16 points (+-scale/2, ...); bit k of the index selects the sign of coordinate k."""
    h = scale / 2
    return [
        Vector4D(*(h if index & (1 << k) else -h for k in range(4)))
        for index in range(16)
    ]


@register_shape
@dataclass
class Tesseract(Shape4D):
    """
    8-cell / hypercube. Vertex i has coordinate k equal to +size/2 when bit k
    of i is set, -size/2 otherwise.
    """
    KEY = "tesseract"
    NAME = "Tesseract"

    size: float = 2.0

    def _validate(self) -> None:
        require_positive(size=self.size)

    def _generate_vertices(self) -> List[Vector4D]:
        s = self.size / 2
        return [
            Vector4D(
                s if i & 1 else -s,
                s if i & 2 else -s,
                s if i & 4 else -s,
                s if i & 8 else -s,
            )
            for i in range(16)
        ]

    def _generate_edges(self) -> List[Edge]:
        # Adjacent iff the indices differ in exactly one bit
        return [(i, j) for i, j in combinations(range(16), 2) if hamming_distance(i, j) == 1]

    def _generate_faces(self) -> List[Face]:
        # Six of the eight cubic cells, each as an 8-index vertex loop
        return [
            (0, 1, 3, 2, 6, 7, 5, 4),
            (8, 9, 11, 10, 14, 15, 13, 12),
            (0, 1, 9, 8, 12, 13, 5, 4),
            (2, 3, 11, 10, 14, 15, 7, 6),
            (0, 2, 10, 8, 12, 14, 6, 4),
            (1, 3, 11, 9, 13, 15, 7, 5),
        ]


@register_shape
@dataclass
class Pentachoron(Shape4D):
    """5-cell / regular 4-simplex centred on the origin, circumradius `size`."""
    KEY = "pentachoron"
    NAME = "Pentachoron"

    size: float = 2.0

    def _validate(self) -> None:
        require_positive(size=self.size)

    def _generate_vertices(self) -> List[Vector4D]:
        # Even sign pattern below the origin, apex on the w axis
        s = self.size * math.sqrt(5) / 4
        low = -1 / math.sqrt(5)
        return [
            Vector4D(1, 1, 1, low) * s,
            Vector4D(1, -1, -1, low) * s,
            Vector4D(-1, 1, -1, low) * s,
            Vector4D(-1, -1, 1, low) * s,
            Vector4D(0, 0, 0, 4 / math.sqrt(5)) * s,
        ]

    def _generate_edges(self) -> List[Edge]:
        return list(combinations(range(5), 2))

    def _generate_faces(self) -> List[Face]:
        return list(combinations(range(5), 3))


@register_shape
@dataclass
class Hexadecachoron(Shape4D):
    """16-cell / orthoplex: every vertex joins all others except its opposite."""
    KEY = "16-cell"
    NAME = "Hexadecachoron"

    size: float = 2.0

    def _validate(self) -> None:
        require_positive(size=self.size)

    def _generate_vertices(self) -> List[Vector4D]:
        return _axis_points(self.size / math.sqrt(2))

    def _generate_edges(self) -> List[Edge]:
        # Opposite vertices sit at indices 2k and 2k + 1
        return [(i, j) for i, j in combinations(range(8), 2) if not (i % 2 == 0 and j == i + 1)]


@register_shape
@dataclass
class Icositetrachoron(Shape4D):
    """
    24-cell from the permutations of (+-1, +-1, 0, 0).

    Two vertices are joined when they differ in exactly two coordinate
    positions. This also joins each vertex to its antipode, giving 108 edges.
    """
    KEY = "24-cell"
    NAME = "Icositetrachoron"

    size: float = 2.0

    def _validate(self) -> None:
        require_positive(size=self.size)

    def _generate_vertices(self) -> List[Vector4D]:
        return _signed_pairs(self.size / math.sqrt(2))

    def _generate_edges(self) -> List[Edge]:
        edges = []
        for i, j in combinations(range(len(self.vertices)), 2):
            diff = sum(1 for a, b in zip(self.vertices[i], self.vertices[j]) if a != b)
            if diff == 2:
                edges.append((i, j))
        return edges


@register_shape
@dataclass
class Cell24Dual(Shape4D):
    """
    The dual 24-cell: the 8 axis points plus the 16 half-unit points, all at
    radius `size`. Vertices are joined when their inner product is half the
    squared radius (60 degrees apart), giving 96 edges.
    """
    KEY = "24-cell-dual"
    NAME = "24-cell (dual)"

    size: float = 2.0

    def _validate(self) -> None:
        require_positive(size=self.size)

    def _generate_vertices(self) -> List[Vector4D]:
        return _axis_points(self.size) + _half_points(self.size)

    def _generate_edges(self) -> List[Edge]:
        target = 0.5 * self.size * self.size
        tolerance = INNER_PRODUCT_TOLERANCE * self.size * self.size
        return [
            (i, j) for i, j in combinations(range(len(self.vertices)), 2)
            if abs(self.vertices[i].dot(self.vertices[j]) - target) < tolerance
        ]


@register_shape
@dataclass
class F4RootPolytope(Shape4D):
    """
    The 48 roots of F4: 24 long roots (+-1, +-1, 0, 0) and 24 short roots
    (+-1, 0, 0, 0), (+-1/2, +-1/2, +-1/2, +-1/2), scaled so long roots have
    length `size`.

    Roots of equal length are joined at 60 degrees, roots of different length
    at 45 degrees (every vertex has degree 14).
    """
    KEY = "f4-root-polytope"
    NAME = "F4 root polytope"

    size: float = 2.0

    def _validate(self) -> None:
        require_positive(size=self.size)

    def _generate_vertices(self) -> List[Vector4D]:
        scale = self.size / math.sqrt(2)
        return _signed_pairs(scale) + _axis_points(scale) + _half_points(scale)

    def _generate_edges(self) -> List[Edge]:
        lengths = [v.length() for v in self.vertices]
        same_length_cos = 0.5
        mixed_length_cos = 1 / math.sqrt(2)
        edges = []
        for i, j in combinations(range(len(self.vertices)), 2):
            cos = self.vertices[i].dot(self.vertices[j]) / (lengths[i] * lengths[j])
            same = math.isclose(lengths[i], lengths[j], rel_tol=1e-9)
            target = same_length_cos if same else mixed_length_cos
            if abs(cos - target) < 1e-9:
                edges.append((i, j))
        return edges


@register_shape
@dataclass
class Duoprism4D(Shape4D):
    """
    m,n-duoprism: the product of a regular m-gon in the XY plane and a
    regular n-gon in the ZW plane. Vertex (i, j) has index i * n + j.
    """
    KEY = "duoprism"
    NAME = "Duoprism"

    m: int = 3
    n: int = 4
    size: float = 2.0

    def _validate(self) -> None:
        require_at_least(3, m=self.m, n=self.n)
        require_positive(size=self.size)

    def _generate_vertices(self) -> List[Vector4D]:
        r = self.size / 2
        vertices = []
        for i in range(self.m):
            a = 2 * math.pi * i / self.m
            for j in range(self.n):
                b = 2 * math.pi * j / self.n
                vertices.append(Vector4D(r * math.cos(a), r * math.sin(a), r * math.cos(b), r * math.sin(b)))
        return vertices

    def _generate_edges(self) -> List[Edge]:
        return grid_edges((self.m, self.n), (True, True))

    def _generate_faces(self) -> List[Face]:
        m, n = self.m, self.n
        faces: List[Face] = []
        # m-gons (one per vertex of the n-gon), then n-gons, then the squares
        faces.extend(tuple(i * n + j for i in range(m)) for j in range(n))
        faces.extend(tuple(i * n + j for j in range(n)) for i in range(m))
        for i in range(m):
            for j in range(n):
                i2, j2 = (i + 1) % m, (j + 1) % n
                faces.append((i * n + j, i * n + j2, i2 * n + j2, i2 * n + j))
        return faces
