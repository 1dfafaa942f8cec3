"""
Polytopes approximated by a Fibonacci point cloud on the 3-sphere with
k-nearest-neighbor wiring. Only the vertex count matches the real polytope;
the edge structure is a visual approximation.
"""
from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import ClassVar, List

import numpy as np

from hypershape.model.geometry_primitives import Vector4D
from hypershape.model.geometry_utils import (
    fibonacci_hypersphere,
    nearest_neighbor_edges,
    vectors_from_array,
)
from hypershape.shapes.base import Edge, Shape4D, require_positive
from hypershape.shapes.registry import register_shape

NEIGHBORS = 3


class FibonacciShape(Shape4D):
    """Shared generator; subclasses set POINTS and expose the scale via `_scale`."""
    POINTS: ClassVar[int] = 0

    @abstractmethod
    def _scale(self) -> float:
        pass

    def _generate_vertices(self) -> List[Vector4D]:
        return vectors_from_array(fibonacci_hypersphere(self.POINTS, self._scale()))

    def _generate_edges(self) -> List[Edge]:
        points = np.array([v.to_array() for v in self.vertices])
        return nearest_neighbor_edges(points, NEIGHBORS)


@register_shape
@dataclass
class Buckyball4D(FibonacciShape):
    """60 points, the vertex count of the C60 truncated icosahedron."""
    KEY = "buckyball4d"
    NAME = "Buckyball 4D"
    POINTS = 60

    radius: float = 1.0

    def _validate(self) -> None:
        require_positive(radius=self.radius)

    def _scale(self) -> float:
        return self.radius


@register_shape
@dataclass
class Hyperdodecahedron120Cell(FibonacciShape):
    KEY = "120-cell"
    NAME = "Hyperdodecahedron (120-cell)"
    POINTS = 600

    size: float = 2.0

    def _validate(self) -> None:
        require_positive(size=self.size)

    def _scale(self) -> float:
        return self.size


@register_shape
@dataclass
class Hexacosichoron600Cell(FibonacciShape):
    KEY = "600-cell"
    NAME = "Hexacosichoron (600-cell)"
    POINTS = 120

    size: float = 2.0

    def _validate(self) -> None:
        require_positive(size=self.size)

    def _scale(self) -> float:
        return self.size
