"""
Prisms and antiprisms over the Platonic solids.

The base polyhedron is scaled to circumradius `size` and copied to the
hyperplanes w = -height (indices 0..n-1) and w = +height (indices n..2n-1).
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import List

import numpy as np

from hypershape.model.geometry_primitives import Vector4D
from hypershape.model.geometry_utils import nearest_neighbor_edges
from hypershape.shapes.base import Edge, Shape4D, require_positive
from hypershape.shapes.registry import register_shape

_PHI = (1.0 + math.sqrt(5.0)) / 2.0

# name -> (vertices, order of the rotational symmetry about z)
BASE_POLYHEDRA: dict[str, tuple[list[tuple[float, float, float]], int]] = {
    "tetrahedron": (
        [(1, 1, 1), (1, -1, -1), (-1, 1, -1), (-1, -1, 1)],
        2,
    ),
    "cube": (
        [
            (-1, -1, -1), (1, -1, -1), (1, 1, -1), (-1, 1, -1),
            (-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1),
        ],
        4,
    ),
    "octahedron": (
        [(1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1)],
        4,
    ),
    "dodecahedron": (
        [
            (-1, -1, -1), (-1, -1, 1), (-1, 1, -1), (-1, 1, 1),
            (1, -1, -1), (1, -1, 1), (1, 1, -1), (1, 1, 1),
            (0, -1 / _PHI, -_PHI), (0, -1 / _PHI, _PHI), (0, 1 / _PHI, -_PHI), (0, 1 / _PHI, _PHI),
            (-1 / _PHI, -_PHI, 0), (-1 / _PHI, _PHI, 0), (1 / _PHI, -_PHI, 0), (1 / _PHI, _PHI, 0),
            (-_PHI, 0, -1 / _PHI), (_PHI, 0, -1 / _PHI), (-_PHI, 0, 1 / _PHI), (_PHI, 0, 1 / _PHI),
        ],
        2,
    ),
    "icosahedron": (
        [
            (-1, _PHI, 0), (1, _PHI, 0), (-1, -_PHI, 0), (1, -_PHI, 0),
            (0, -1, _PHI), (0, 1, _PHI), (0, -1, -_PHI), (0, 1, -_PHI),
            (_PHI, 0, -1), (_PHI, 0, 1), (-_PHI, 0, -1), (-_PHI, 0, 1),
        ],
        2,
    ),
}


def base_polyhedron(name: str, size: float) -> np.ndarray:
    """Vertices of the named solid, scaled so every vertex lies at distance `size`."""
    if name not in BASE_POLYHEDRA:
        raise ValueError(f"Unknown base polyhedron '{name}'. Expected one of: {', '.join(BASE_POLYHEDRA)}.")
    points = np.array(BASE_POLYHEDRA[name][0], dtype=np.float64)
    return points * (size / np.linalg.norm(points[0]))


def base_edges(points: np.ndarray) -> List[Edge]:
    """Each base vertex joined to its two or three nearest base neighbors, found from either end."""
    return nearest_neighbor_edges(points, min(3, len(points) - 1), union=True)


class _ExtrudedPolyhedron(Shape4D):
    base: str
    size: float
    height: float

    def _validate(self) -> None:
        if self.base not in BASE_POLYHEDRA:
            raise ValueError(
                f"Unknown base polyhedron '{self.base}'. Expected one of: {', '.join(BASE_POLYHEDRA)}."
            )
        require_positive(size=self.size, height=self.height)

    def _top_layer(self, points: np.ndarray) -> np.ndarray:
        return points

    def _generate_vertices(self) -> List[Vector4D]:
        bottom = base_polyhedron(self.base, self.size)
        top = self._top_layer(bottom)
        return (
            [Vector4D.from_array([*p, -self.height]) for p in bottom]
            + [Vector4D.from_array([*p, self.height]) for p in top]
        )

    def _layer_edges(self) -> tuple[int, List[Edge]]:
        points = base_polyhedron(self.base, self.size)
        n = len(points)
        edges = base_edges(points)
        return n, edges + [(a + n, b + n) for a, b in edges]


@register_shape
@dataclass
class PolychoronPrism4D(_ExtrudedPolyhedron):
    """Uniform prism: the two layers are joined vertex to vertex."""
    KEY = "polychoron-prism"
    NAME = "Polychoron prism"

    base: str = "cube"
    size: float = 2.0
    height: float = 1.0

    def _generate_edges(self) -> List[Edge]:
        n, edges = self._layer_edges()
        return edges + [(i, i + n) for i in range(n)]


@register_shape
@dataclass
class PolychoronAntiprism4D(_ExtrudedPolyhedron):
    """
    Antiprism: the top layer is turned by pi / k about z, k being the base's
    rotational symmetry order about that axis, and every base edge (a, b)
    gains the two cross-layer diagonals (a, b') and (b, a').
    """
    KEY = "polychoron-antiprism"
    NAME = "Polychoron antiprism"

    base: str = "tetrahedron"
    size: float = 2.0
    height: float = 1.0

    @property
    def twist(self) -> float:
        return math.pi / BASE_POLYHEDRA[self.base][1]

    def _top_layer(self, points: np.ndarray) -> np.ndarray:
        c, s = math.cos(self.twist), math.sin(self.twist)
        turn = np.array([
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ])
        return points @ turn.T

    def _generate_edges(self) -> List[Edge]:
        n, edges = self._layer_edges()
        cross = []
        for a, b in edges[:len(edges) // 2]:
            cross.append((a, b + n))
            cross.append((b, a + n))
        return edges + cross
