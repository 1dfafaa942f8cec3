"""
Parametric surfaces and hypersurfaces sampled on regular parameter grids.

Vertex (i, j[, k]) of a grid is stored at its row-major index; edges join
immediate grid neighbors, wrapping on periodic parameters.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import List

import numpy as np

from hypershape.model.geometry_primitives import Vector4D
from hypershape.model.geometry_utils import grid_edges, vectors_from_array
from hypershape.shapes.base import Edge, Face, Shape4D, require_at_least, require_positive
from hypershape.shapes.registry import register_shape


@register_shape
@dataclass
class Hypersphere4D(Shape4D):
    """
    A 2D (phi, theta) sampling of the 3-sphere with a closed seam row and
    column, so the grid has (resolution + 1)^2 vertices.
    """
    KEY = "hypersphere"
    NAME = "Hypersphere"

    radius: float = 1.0
    resolution: int = 32

    def _validate(self) -> None:
        require_positive(radius=self.radius)
        require_at_least(2, resolution=self.resolution)

    def _generate_vertices(self) -> List[Vector4D]:
        res = self.resolution
        phi = np.arange(res + 1) * (math.pi / res)
        theta = np.arange(res + 1) * (2 * math.pi / res)
        p, t = np.meshgrid(phi, theta, indexing="ij")
        points = self.radius * np.stack([
            np.sin(p) * np.cos(t),
            np.sin(p) * np.sin(t),
            np.cos(p) * np.cos(t),
            np.cos(p) * np.sin(t),
        ], axis=-1).reshape(-1, 4)
        return vectors_from_array(points)

    def _generate_edges(self) -> List[Edge]:
        rows = self.resolution + 1
        edges = []
        for i in range(rows - 1):
            for j in range(self.resolution):
                current = i * rows + j
                below = (i + 1) * rows + j
                edges.append((current, current + 1))
                edges.append((current, below))
                edges.append((current, below + 1))  # diagonal
        return edges


@register_shape
@dataclass
class Sphere3D(Shape4D):
    """
    The 3-sphere in Hopf coordinates (eta, xi1, xi2):

        (R sin(eta) cos(xi1), R sin(eta) sin(xi1), R cos(eta) cos(xi2), R cos(eta) sin(xi2))

    eta takes resolution // 4 levels strictly inside (0, pi/2) so the
    degenerate circles at the ends are skipped; xi1 and xi2 are periodic.
    """
    KEY = "3-sphere"
    NAME = "3-sphere"

    radius: float = 1.5
    resolution: int = 24

    def _validate(self) -> None:
        require_positive(radius=self.radius)
        require_at_least(4, resolution=self.resolution)

    @property
    def levels(self) -> int:
        return self.resolution // 4

    def _generate_vertices(self) -> List[Vector4D]:
        res = self.resolution
        eta = (np.arange(self.levels) + 0.5) / self.levels * (math.pi / 2)
        xi = np.arange(res) * (2 * math.pi / res)
        e, a, b = np.meshgrid(eta, xi, xi, indexing="ij")
        points = self.radius * np.stack([
            np.sin(e) * np.cos(a),
            np.sin(e) * np.sin(a),
            np.cos(e) * np.cos(b),
            np.cos(e) * np.sin(b),
        ], axis=-1).reshape(-1, 4)
        return vectors_from_array(points)

    def _generate_edges(self) -> List[Edge]:
        return grid_edges((self.levels, self.resolution, self.resolution), (False, True, True))


@register_shape
@dataclass
class Hyperplane4D(Shape4D):
    """A flat square grid in the XY plane (z = w = 0), centred on the origin."""
    KEY = "hyperplane"
    NAME = "Hyperplane"

    size: float = 4.0
    resolution: int = 20

    def _validate(self) -> None:
        require_positive(size=self.size)
        require_at_least(1, resolution=self.resolution)

    def _generate_vertices(self) -> List[Vector4D]:
        res = self.resolution
        step = self.size / res
        return [
            Vector4D((i - res / 2) * step, (j - res / 2) * step, 0.0, 0.0)
            for i in range(res + 1)
            for j in range(res + 1)
        ]

    def _generate_edges(self) -> List[Edge]:
        rows = self.resolution + 1
        edges = []
        for i in range(rows - 1):
            for j in range(self.resolution):
                current = i * rows + j
                edges.append((current, current + 1))
                edges.append((current, (i + 1) * rows + j))
        return edges


@register_shape
@dataclass
class KleinBottle4D(Shape4D):
    """
    Klein bottle immersed in 4D:

        ((2 + cos v) cos u, (2 + cos v) sin u, sin v cos(u/2), sin v sin(u/2))

    scaled by `radius`, sampled on a (resolution + 1)^2 grid over [0, 2pi]^2.
    """
    KEY = "klein-bottle"
    NAME = "Klein bottle"

    radius: float = 1.0
    resolution: int = 32

    def _validate(self) -> None:
        require_positive(radius=self.radius)
        require_at_least(2, resolution=self.resolution)

    def _generate_vertices(self) -> List[Vector4D]:
        res = self.resolution
        angles = np.arange(res + 1) * (2 * math.pi / res)
        u, v = np.meshgrid(angles, angles, indexing="ij")
        points = self.radius * np.stack([
            (2 + np.cos(v)) * np.cos(u),
            (2 + np.cos(v)) * np.sin(u),
            np.sin(v) * np.cos(u / 2),
            np.sin(v) * np.sin(u / 2),
        ], axis=-1).reshape(-1, 4)
        return vectors_from_array(points)

    def _generate_edges(self) -> List[Edge]:
        rows = self.resolution + 1
        edges = []
        for i in range(rows - 1):
            for j in range(self.resolution):
                current = i * rows + j
                edges.append((current, current + 1))
                edges.append((current, (i + 1) * rows + j))
        return edges


@register_shape
@dataclass
class Hypertorus4D(Shape4D):
    """Torus of two independent circles (theta, phi), both periodic."""
    KEY = "hypertorus"
    NAME = "Hypertorus"

    major_radius: float = 1.2
    minor_radius: float = 0.5
    resolution_1: int = 24
    resolution_2: int = 24

    def _validate(self) -> None:
        require_positive(major_radius=self.major_radius, minor_radius=self.minor_radius)
        require_at_least(3, resolution_1=self.resolution_1, resolution_2=self.resolution_2)

    def _generate_vertices(self) -> List[Vector4D]:
        theta = np.arange(self.resolution_1) * (2 * math.pi / self.resolution_1)
        phi = np.arange(self.resolution_2) * (2 * math.pi / self.resolution_2)
        t, p = np.meshgrid(theta, phi, indexing="ij")
        big, small = self.major_radius, self.minor_radius
        points = np.stack([
            (big + small * np.cos(t)) * np.cos(p),
            (big + small * np.cos(t)) * np.sin(p),
            small * np.sin(t) * np.cos(p),
            small * np.sin(t) * np.sin(p),
        ], axis=-1).reshape(-1, 4)
        return vectors_from_array(points)

    def _generate_edges(self) -> List[Edge]:
        return grid_edges((self.resolution_1, self.resolution_2), (True, True))


@register_shape
@dataclass
class CliffordTorus(Shape4D):
    """
    The flat torus on the 3-sphere: (R/sqrt2)(cos u, sin u, cos v, sin v).
    Every grid cell is also emitted as a quad face.
    """
    KEY = "clifford-torus"
    NAME = "Clifford torus"

    radius: float = 1.5
    resolution: int = 24

    def _validate(self) -> None:
        require_positive(radius=self.radius)
        require_at_least(3, resolution=self.resolution)

    def _generate_vertices(self) -> List[Vector4D]:
        res = self.resolution
        angles = np.arange(res) * (2 * math.pi / res)
        u, v = np.meshgrid(angles, angles, indexing="ij")
        points = (self.radius / math.sqrt(2)) * np.stack(
            [np.cos(u), np.sin(u), np.cos(v), np.sin(v)], axis=-1
        ).reshape(-1, 4)
        return vectors_from_array(points)

    def _generate_edges(self) -> List[Edge]:
        return grid_edges((self.resolution, self.resolution), (True, True))

    def _generate_faces(self) -> List[Face]:
        res = self.resolution
        faces = []
        for i in range(res):
            for j in range(res):
                i2, j2 = (i + 1) % res, (j + 1) % res
                faces.append((i * res + j, i * res + j2, i2 * res + j2, i2 * res + j))
        return faces
