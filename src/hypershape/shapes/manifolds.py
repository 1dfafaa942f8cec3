"""
Complex-coordinate manifolds. Both shapes sample a 3-parameter grid, join
grid neighbors and then drop edges that stretch across the embedding.
"""
from __future__ import annotations

import cmath
from dataclasses import dataclass
import math
from typing import List

import numpy as np

from hypershape.config import CALABI_YAU_EDGE_FRACTION, HOPF_EDGE_FRACTION
from hypershape.model.geometry_primitives import Vector4D
from hypershape.model.geometry_utils import grid_edges, prune_edges, vectors_from_array
from hypershape.shapes.base import Edge, Shape4D, require_at_least, require_positive
from hypershape.shapes.registry import register_shape


@register_shape
@dataclass
class CalabiYauManifold(Shape4D):
    """
    Cross-section of the quintic-style Calabi-Yau surface z1^n + z2^n = 1.

    Each of the n^2 patches (k1, k2) is parametrised by z = xi + i*theta with
    xi in [-1, 1] and theta in [0, pi/2]:

        z1 = exp(2 pi i k1 / n) * cosh(z)^(2/n)
        z2 = exp(2 pi i k2 / n) * (-i sinh(z))^(2/n)

    and embedded as size * (Re z1, Im z1, Re z2, Im z2).
    """
    KEY = "calabi-yau"
    NAME = "Calabi-Yau manifold"

    size: float = 1.5
    resolution: int = 20
    power: int = 3

    def _validate(self) -> None:
        require_positive(size=self.size)
        require_at_least(2, resolution=self.resolution, power=self.power)

    def _generate_vertices(self) -> List[Vector4D]:
        n = self.power
        exponent = 2 / n
        xis = np.linspace(-1.0, 1.0, self.resolution)
        thetas = np.linspace(0.0, math.pi / 2, self.resolution)

        vertices = []
        for k1 in range(n):
            phase1 = cmath.exp(2j * math.pi * k1 / n)
            for k2 in range(n):
                phase2 = cmath.exp(2j * math.pi * k2 / n)
                for xi in xis:
                    for theta in thetas:
                        z = complex(xi, theta)
                        z1 = phase1 * cmath.cosh(z) ** exponent
                        z2 = phase2 * (-1j * cmath.sinh(z)) ** exponent
                        vertices.append(Vector4D(
                            self.size * z1.real,
                            self.size * z1.imag,
                            self.size * z2.real,
                            self.size * z2.imag,
                        ))
        return vertices

    def _generate_edges(self) -> List[Edge]:
        res = self.resolution
        per_patch = res * res
        patch_edges = grid_edges((res, res), (False, False))
        candidates = [
            (a + patch * per_patch, b + patch * per_patch)
            for patch in range(self.power * self.power)
            for a, b in patch_edges
        ]
        points = np.array([v.to_array() for v in self.vertices])
        return prune_edges(points, candidates, CALABI_YAU_EDGE_FRACTION * self.size)


@register_shape
@dataclass
class HopfFibration(Shape4D):
    """
    Great-circle fibers of the Hopf map S^3 -> S^2.

    Fiber circles are taken over a grid of base points (eta, phi) with eta
    kept away from the poles:

        z1 = cos(eta) exp(i (t + phi)),  z2 = sin(eta) exp(i t)

    Edges join neighbors along t (the fiber) and phi; candidates longer than
    a fraction of the radius in their projected x, y, z are dropped.
    """
    KEY = "hopf-fibration"
    NAME = "Hopf fibration"

    radius: float = 2.0
    resolution: int = 20

    def _validate(self) -> None:
        require_positive(radius=self.radius)
        require_at_least(6, resolution=self.resolution)

    @property
    def grid_shape(self) -> tuple[int, int, int]:
        levels = max(2, self.resolution // 4)
        return levels, self.resolution // 2, self.resolution

    def _generate_vertices(self) -> List[Vector4D]:
        levels, n_phi, n_t = self.grid_shape
        eta = (np.arange(levels) + 1) / (levels + 1) * (math.pi / 2)
        phi = np.arange(n_phi) * (2 * math.pi / n_phi)
        t = np.arange(n_t) * (2 * math.pi / n_t)
        e, p, s = np.meshgrid(eta, phi, t, indexing="ij")
        points = self.radius * np.stack([
            np.cos(e) * np.cos(s + p),
            np.cos(e) * np.sin(s + p),
            np.sin(e) * np.cos(s),
            np.sin(e) * np.sin(s),
        ], axis=-1).reshape(-1, 4)
        return vectors_from_array(points)

    def _generate_edges(self) -> List[Edge]:
        candidates = grid_edges(self.grid_shape, (False, True, True))
        xyz = np.array([v.to_array()[:3] for v in self.vertices])
        return prune_edges(xyz, candidates, HOPF_EDGE_FRACTION * self.radius)
