"""
Finite windows of 4D lattices.
"""
from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import List, Optional

import numpy as np

from hypershape.config import HYPERDIAMOND_CUTOFF, HYPERDIAMOND_NEIGHBORS
from hypershape.model.geometry_primitives import Vector4D
from hypershape.model.geometry_utils import nearest_neighbor_edges
from hypershape.shapes.base import Edge, Shape4D, require_at_least, require_positive
from hypershape.shapes.registry import register_shape


def _has_bond(coords: tuple[int, ...], r: int) -> bool:
    """
    Whether a D4 point has a shifted partner inside the window.

    The partners of p are p + 1/2 - d for d in {0, 1}^4 with an even number of
    ones. Coordinates at +r force d = 1 and at -r force d = 0, so only a
    corner of the window with an odd count of +r coordinates is left alone.
    """
    if any(abs(c) != r for c in coords):
        return True
    return sum(1 for c in coords if c == r) % 2 == 0


@register_shape
@dataclass
class E4Hyperdiamond(Shape4D):
    """
    4D diamond structure: the checkerboard lattice D4 (integer points with an
    even coordinate sum) together with its copy shifted by (1/2, 1/2, 1/2, 1/2).

    Both sublattices are clipped to [-lattice_range, lattice_range]^4, less the
    eight D4 corners that have no shifted partner inside the window, and the
    whole window is scaled to fit `size`. The bond between the sublattices has
    length 1 before scaling; each point picks at most six neighbors no farther
    than a little over one bond, so every D4 point keeps at least one bond.
    """
    KEY = "e4-hyperdiamond"
    NAME = "E4 hyperdiamond"

    size: float = 1.5
    lattice_range: int = 2

    def _validate(self) -> None:
        require_positive(size=self.size)
        require_at_least(1, lattice_range=self.lattice_range)

    @property
    def scale(self) -> float:
        return self.size / self.lattice_range

    def _generate_vertices(self) -> List[Vector4D]:
        r = self.lattice_range
        integer = range(-r, r + 1)
        shifted = range(-r, r)

        vertices = [
            Vector4D(*(self.scale * c for c in coords))
            for coords in product(integer, repeat=4)
            if sum(coords) % 2 == 0 and _has_bond(coords, r)
        ]
        vertices.extend(
            Vector4D(*(self.scale * (c + 0.5) for c in coords))
            for coords in product(shifted, repeat=4)
            if sum(coords) % 2 == 0
        )
        return vertices

    def _generate_edges(self) -> List[Edge]:
        points = np.array([v.to_array() for v in self.vertices])
        return nearest_neighbor_edges(
            points,
            HYPERDIAMOND_NEIGHBORS,
            max_distance=HYPERDIAMOND_CUTOFF * self.scale,
        )


@register_shape
@dataclass
class E8Lattice4D(Shape4D):
    """
    The first four coordinates of E8 lattice points, shown as a point cloud.

    E8 is Z^8 u (Z + 1/2)^8 restricted to an even coordinate sum. A 4D point
    (a, b, c, d) (or its half-shifted twin) is kept when some completion of
    the last four coordinates, each within [-depth, depth], makes the total
    sum even. With depth >= 1 either parity can be completed, so the slab is
    the full window; with depth 0 only even a + b + c + d survive.

    For each (a, b, c, d) in [-lattice_range, lattice_range]^4 the integer
    point precedes its half-shifted twin.
    """
    KEY = "e8-lattice"
    NAME = "E8 lattice"

    size: float = 0.5
    lattice_range: int = 2
    depth: Optional[int] = None

    def _validate(self) -> None:
        require_positive(size=self.size)
        require_at_least(1, lattice_range=self.lattice_range)
        if self.depth is not None:
            require_at_least(0, depth=self.depth)

    def _completable_parities(self) -> set[int]:
        depth = self.lattice_range if self.depth is None else self.depth
        return {0, 1} if depth >= 1 else {0}

    def _generate_vertices(self) -> List[Vector4D]:
        r = self.lattice_range
        parities = self._completable_parities()
        s = self.size

        vertices = []
        for a, b, c, d in product(range(-r, r + 1), repeat=4):
            # The half-shifted sum adds 4 * 1/2, which keeps the parity
            if (a + b + c + d) % 2 in parities:
                vertices.append(Vector4D(s * a, s * b, s * c, s * d))
                vertices.append(Vector4D(s * (a + 0.5), s * (b + 0.5), s * (c + 0.5), s * (d + 0.5)))
        return vertices

    def _generate_edges(self) -> List[Edge]:
        return []
