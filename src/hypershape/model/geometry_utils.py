"""
Shared algorithms for the shape generators: grid connectivity, nearest
neighbor search and quasi-uniform hypersphere sampling.
"""
from __future__ import annotations

from itertools import product
from typing import TYPE_CHECKING, List, Optional, Sequence

from math import pi
import numpy as np
from scipy.spatial.distance import cdist

from hypershape.config import FIBONACCI_TWIST, GOLDEN_ANGLE
from hypershape.model.geometry_primitives import Vector4D

if TYPE_CHECKING:
    from numpy import typing as npt


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180


def hamming_distance(a: int, b: int) -> int:
    return (a ^ b).bit_count()


def vectors_from_array(points: npt.NDArray[np.float64]) -> List[Vector4D]:
    """Converts an (N, 4) array into Vector4D instances (plain Python floats)."""
    return [Vector4D(*(float(c) for c in row)) for row in points]


def squared_distances(points: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """All-pairs squared Euclidean distances, shape (N, N). O(N^2) memory."""
    return cdist(points, points, metric="sqeuclidean")


def nearest_neighbor_edges(
    points: npt.NDArray[np.float64],
    k: int,
    max_distance: Optional[float] = None,
    union: bool = False
) -> List[tuple[int, int]]:
    """
    Connect every point to its k nearest other points.

    Candidates are ordered by squared distance with a stable sort, so equal
    distances keep enumeration order. By default an edge is emitted only from
    its lower index (i < j), which also means a pair found only by the higher
    index is dropped. With `union` the pairs found from either endpoint are
    all kept, so every point ends up with at least its k nearest neighbors.

    Args:
        points: (N, D) coordinates.
        k: Neighbors considered per point.
        max_distance: Optional cutoff; farther candidates are ignored.
        union: Keep pairs found from the higher index too.

    Returns:
        Undirected edges, each stored once as (i, j) with i < j, in order of discovery.
    """
    n = len(points)
    if n < 2 or k <= 0:
        return []

    d2 = squared_distances(points)
    limit = None if max_distance is None else max_distance * max_distance

    edges: List[tuple[int, int]] = []
    seen: set[tuple[int, int]] = set()
    for i in range(n):
        order = np.argsort(d2[i], kind="stable")
        neighbors = order[order != i][:k]
        for j in neighbors:
            j = int(j)
            if limit is not None and d2[i, j] > limit:
                break
            if i < j:
                edge = (i, j)
            elif union:
                edge = (j, i)
            else:
                continue
            if edge not in seen:
                seen.add(edge)
                edges.append(edge)
    return edges


def grid_edges(
    shape: Sequence[int],
    periodic: Sequence[bool]
) -> List[tuple[int, int]]:
    """
    Edges between immediate neighbors of a regular row-major grid.

    For every cell, one edge per axis to the next cell along that axis;
    periodic axes wrap around, others stop at the last sample.
    """
    if len(shape) != len(periodic):
        raise ValueError("shape and periodic must have the same length")

    strides = [1] * len(shape)
    for axis in range(len(shape) - 2, -1, -1):
        strides[axis] = strides[axis + 1] * shape[axis + 1]

    edges: List[tuple[int, int]] = []
    for index in product(*(range(s) for s in shape)):
        current = sum(i * st for i, st in zip(index, strides))
        for axis, (size, wraps) in enumerate(zip(shape, periodic)):
            nxt = index[axis] + 1
            if nxt == size:
                if not wraps:
                    continue
                nxt = 0
            neighbor = current + (nxt - index[axis]) * strides[axis]
            edges.append((current, neighbor))
    return edges


def prune_edges(
    points: npt.NDArray[np.float64],
    edges: Sequence[tuple[int, int]],
    max_distance: float
) -> List[tuple[int, int]]:
    """Keeps edges whose endpoints are closer than max_distance in the given coordinates."""
    if not edges:
        return []
    pairs = np.asarray(edges)
    lengths = np.linalg.norm(points[pairs[:, 0]] - points[pairs[:, 1]], axis=1)
    return [edge for edge, length in zip(edges, lengths) if length < max_distance]


def fibonacci_hypersphere(n_points: int, radius: float = 1.0) -> npt.NDArray[np.float64]:
    """
    Quasi-uniform points on a 4D sphere from a Fibonacci spiral.

    w sweeps linearly from -1 to 1; the azimuth advances by the golden angle
    and x, y, z are taken from the radius orthogonal to w. The extra twist on
    z is a visual approximation, so the points are not exactly unit length.

    Args:
        n_points: Number of points, at least 2.
        radius: Scale applied to every coordinate.

    Returns:
        Array of shape (n_points, 4).
    """
    if n_points < 2:
        raise ValueError(f"Fibonacci sampling needs at least 2 points, got {n_points}.")
    i = np.arange(n_points, dtype=np.float64)
    w = 2 * (i / (n_points - 1)) - 1
    r = np.sqrt(np.clip(1 - w * w, 0.0, None))
    theta = GOLDEN_ANGLE * i
    x = np.cos(theta) * r
    y = np.sin(theta) * r
    z = np.cos(theta * FIBONACCI_TWIST) * r
    return radius * np.column_stack((x, y, z, w))
