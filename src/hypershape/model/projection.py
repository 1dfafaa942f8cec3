"""
4D to 3D Projection
===================
Maps rotated 4D vertices to 3D points for a rendering layer.

Every strategy is a pure per-vertex function. Near a strategy's singularity
a fixed fallback is returned instead of dividing by a near-zero denominator.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import List, Sequence

from hypershape.config import DEFAULT_FOV, DEFAULT_PROJECTION_DISTANCE, FAR_POINT, PROJECTION_EPSILON
from hypershape.model.geometry_primitives import Vector3D, Vector4D

logger = logging.getLogger(__name__)


class ProjectionType(StrEnum):
    PERSPECTIVE = "perspective"
    ORTHOGRAPHIC = "orthographic"
    STEREOGRAPHIC = "stereographic"


def perspective_projection(point: Vector4D, distance: float) -> Vector3D:
    """
    Scales (x, y, z) by distance / (distance + w).

    Points with |w| < PROJECTION_EPSILON are treated as lying on the
    projection plane and returned unscaled. Points at w = -distance (the eye)
    map to FAR_POINT.
    """
    w = point.w
    if abs(w) < PROJECTION_EPSILON:
        return Vector3D(point.x, point.y, point.z)

    denominator = distance + w
    if abs(denominator) < PROJECTION_EPSILON:
        return Vector3D(*FAR_POINT)

    scale = distance / denominator
    return Vector3D(point.x * scale, point.y * scale, point.z * scale)


def orthographic_projection(point: Vector4D) -> Vector3D:
    """Drops the w-coordinate."""
    return Vector3D(point.x, point.y, point.z)


def stereographic_projection(point: Vector4D) -> Vector3D:
    """
    Projects from the pole w = 1: (x, y, z) / (1 - w).

    Points with w >= 1 - PROJECTION_EPSILON map to FAR_POINT.
    """
    w = point.w
    if w >= 1 - PROJECTION_EPSILON:
        return Vector3D(*FAR_POINT)

    scale = 1 / (1 - w)
    return Vector3D(point.x * scale, point.y * scale, point.z * scale)


@dataclass
class Projection4D:
    """
    Projection configuration plus the batch operations that apply it.

    `fov` is stored for renderers but no projection formula reads it.
    """
    projection_type: ProjectionType = ProjectionType.PERSPECTIVE
    distance: float = DEFAULT_PROJECTION_DISTANCE
    fov: float = DEFAULT_FOV

    def __post_init__(self) -> None:
        self.set_type(self.projection_type)
        self.set_distance(self.distance)

    def set_type(self, projection_type: ProjectionType | str) -> None:
        try:
            self.projection_type = ProjectionType(projection_type)
        except ValueError:
            valid = ", ".join(t.value for t in ProjectionType)
            raise ValueError(f"Unknown projection type '{projection_type}'. Expected one of: {valid}") from None

    def set_distance(self, distance: float) -> None:
        if distance <= 0:
            raise ValueError(f"Projection distance must be positive, got {distance}.")
        self.distance = float(distance)

    def set_fov(self, fov: float) -> None:
        self.fov = float(fov)

    def project(self, point: Vector4D) -> Vector3D:
        match self.projection_type:
            case ProjectionType.PERSPECTIVE:
                return perspective_projection(point, self.distance)
            case ProjectionType.ORTHOGRAPHIC:
                return orthographic_projection(point)
            case ProjectionType.STEREOGRAPHIC:
                return stereographic_projection(point)

    def project_array(self, points: Sequence[Vector4D]) -> List[Vector3D]:
        return [self.project(p) for p in points]

    def project_edges(
        self,
        edges: Sequence[tuple[int, int]],
        vertices: Sequence[Vector4D]
    ) -> List[tuple[Vector3D, Vector3D]]:
        """
        Projects the vertices once, then resolves each edge's endpoints.

        No clipping is done: an edge touching a singularity fallback becomes
        a long (but finite) segment.
        """
        projected = self.project_array(vertices)
        return [(projected[i], projected[j]) for i, j in edges]
