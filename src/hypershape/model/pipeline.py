"""
Frame Pipeline
==============
Turns a 4D geometry plus the current rotation/projection/coloring settings
into one renderer-ready 3D frame.

Why is this file needed?
------------------------
The rotation and projection engines work on single vertices. A renderer
needs the whole frame at once: projected points, line segments for the
edges, triangles for the faces and a color per vertex. This module runs the
stages in the required order (rotate, then project) so callers cannot
accidentally project unrotated vertices.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

import numpy as np

from hypershape.model.coloring import Color, ColorMapping4D
from hypershape.model.geometry_primitives import Geometry4D, Vector3D
from hypershape.model.projection import Projection4D
from hypershape.model.rotation import Rotation4D

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Triangle = tuple[int, int, int]


def triangulate_faces(faces: Sequence[Sequence[int]]) -> List[Triangle]:
    """
    Fan triangulation: face (f0, f1, ..., fn) -> (f0, fj, fj+1) for j = 1..n-1.
    Faces with fewer than 3 indices are skipped.
    """
    triangles: List[Triangle] = []
    for face in faces:
        if len(face) < 3:
            continue
        first = face[0]
        for j in range(1, len(face) - 1):
            triangles.append((first, face[j], face[j + 1]))
    return triangles


@dataclass
class ProjectedFrame:
    points: List[Vector3D] = field(default_factory=list)
    segments: List[tuple[Vector3D, Vector3D]] = field(default_factory=list)
    triangles: List[Triangle] = field(default_factory=list)
    colors: List[Color] = field(default_factory=list)

    def positions(self) -> npt.NDArray[np.float64]:
        """Projected points as an (N, 3) array."""
        if not self.points:
            return np.zeros((0, 3))
        return np.array([p.to_array() for p in self.points])

    def segment_array(self) -> npt.NDArray[np.float64]:
        """Edge segments as an (E, 2, 3) array."""
        if not self.segments:
            return np.zeros((0, 2, 3))
        return np.array([[a.to_array(), b.to_array()] for a, b in self.segments])

    def to_dict(self) -> dict:
        return {
            "points": [list(p) for p in self.points],
            "segments": [[list(a), list(b)] for a, b in self.segments],
            "triangles": [list(t) for t in self.triangles],
            "colors": [c.to_hex() for c in self.colors],
        }


def project_geometry(
    geometry: Geometry4D,
    rotation: Rotation4D,
    projection: Projection4D,
    coloring: Optional[ColorMapping4D] = None
) -> ProjectedFrame:
    """
    Rotate, project and color one geometry.

    Args:
        geometry: Source shape in 4D.
        rotation: Applied to every vertex before projection.
        projection: Maps the rotated vertices to 3D.
        coloring: If given, colors are computed from the unrotated vertices.

    Returns:
        The projected frame. Segments are indexed like `geometry.edges`.
    """
    rotated = rotation.rotate_array(geometry.vertices)
    points = projection.project_array(rotated)
    segments = [(points[i], points[j]) for i, j in geometry.edges]
    triangles = triangulate_faces(geometry.faces)
    colors = (
        [coloring.get_color(v) for v in geometry.vertices]
        if coloring is not None else []
    )
    logger.debug(
        f"Projected frame: {len(points)} points, {len(segments)} segments, {len(triangles)} triangles"
    )
    return ProjectedFrame(points=points, segments=segments, triangles=triangles, colors=colors)
