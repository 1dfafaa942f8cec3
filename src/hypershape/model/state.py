"""
Viewer State (Data Model)
=========================
This module defines the central data structure for an interactive viewer.

Why is this file needed?
------------------------
1. State Management: It holds the active shape, rotation, projection,
   animation and coloring settings in one place.
2. Decoupling: A front end only writes user input into this object and
   reads frames out of it; it never talks to the generators directly.

Classes:
    ViewerState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Any, Optional

from hypershape.config import DEFAULT_FRAME_DELTA
from hypershape.model.animation import Animation4D
from hypershape.model.coloring import ColorMapping4D
from hypershape.model.geometry_primitives import Geometry4D
from hypershape.model.pipeline import ProjectedFrame, project_geometry
from hypershape.model.projection import Projection4D, ProjectionType
from hypershape.model.rotation import Rotation4D
from hypershape.shapes import create_shape

logger = logging.getLogger(__name__)

DEFAULT_SHAPE = "tesseract"


@dataclass
class ViewerState:
    """
    Singleton-like class that holds the entire state of the viewer.
    Pass this instance to your input handlers and renderers.
    """
    shape_key: str = DEFAULT_SHAPE
    parameters: dict[str, Any] = field(default_factory=dict)
    geometry: Geometry4D = field(default_factory=Geometry4D)

    rotation: Rotation4D = field(default_factory=Rotation4D)
    projection: Projection4D = field(default_factory=Projection4D)
    animation: Animation4D = field(default_factory=Animation4D)
    coloring: ColorMapping4D = field(default_factory=ColorMapping4D)

    def __post_init__(self) -> None:
        if not self.geometry.vertices:
            self.load_shape(self.shape_key, **self.parameters)

    def load_shape(self, key: str, **params: Any) -> Geometry4D:
        """
        Replace the active geometry. On failure the previous shape stays loaded.

        Raises:
            KeyError: Unknown shape key.
            ValueError: Rejected parameter value.
        """
        shape = create_shape(key, **params)
        self.shape_key = key
        self.parameters = shape.parameters()
        self.geometry = shape.to_geometry()
        logger.info(
            f"Loaded shape '{key}': {self.geometry.vertex_count} vertices, {len(self.geometry.edges)} edges"
        )
        return self.geometry

    def update_rotation(self, x: float, y: float, z: float, w: float) -> None:
        self.rotation.set_rotation(x, y, z, w)

    def update_projection(self, projection_type: ProjectionType | str, distance: Optional[float] = None) -> None:
        self.projection.set_type(projection_type)
        if distance is not None:
            self.projection.set_distance(distance)
        logger.info(f"Projection set to {self.projection.projection_type} (distance {self.projection.distance})")

    def update_animation_speed(self, speed: float) -> None:
        self.animation.set_speed(speed)

    def toggle_auto_rotation(self) -> bool:
        self.animation.set_auto_rotate(not self.animation.auto_rotate)
        logger.info(f"Auto rotation {'enabled' if self.animation.auto_rotate else 'disabled'}")
        return self.animation.auto_rotate

    def reset_view(self) -> None:
        """Zero the rotation. Shape and projection settings are kept."""
        self.rotation.set_rotation(0.0, 0.0, 0.0, 0.0)
        logger.info("View has been reset.")

    def frame(self) -> ProjectedFrame:
        return project_geometry(self.geometry, self.rotation, self.projection, self.coloring)

    def tick(self, delta: float = DEFAULT_FRAME_DELTA) -> ProjectedFrame:
        """
        Advance the animation by `delta` seconds and produce the next frame.

        While auto rotation is on, the rotation is replaced by the animation's
        rotation values scaled to a full turn.
        """
        self.animation.update(delta)
        if self.animation.auto_rotate:
            values = self.animation.get_rotation_values()
            self.rotation.set_rotation(*(v * 2 * math.pi for v in values))
        return self.frame()
