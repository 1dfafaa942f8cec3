from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict
import logging
from typing import Any, ClassVar, List

from hypershape.model.geometry_primitives import Geometry4D, Vector4D

logger = logging.getLogger(__name__)

Edge = tuple[int, int]
Face = tuple[int, ...]


class Shape4D(ABC):
    """
    Abstract base class for 4D shape generators.

    Subclasses are dataclasses whose fields are the shape parameters. The
    generated vertices, edges and faces are computed once, at construction.
    """
    KEY: ClassVar[str] = ""
    NAME: ClassVar[str] = "Shape"

    vertices: List[Vector4D]
    edges: List[Edge]
    faces: List[Face]

    def __post_init__(self) -> None:
        self._validate()
        self.vertices = self._generate_vertices()
        self.edges = self._generate_edges()
        self.faces = self._generate_faces()
        logger.debug(
            f"{self.NAME}: {len(self.vertices)} vertices, "
            f"{len(self.edges)} edges, {len(self.faces)} faces"
        )

    def _validate(self) -> None:
        """Raise ValueError for parameters the generator cannot handle."""

    @abstractmethod
    def _generate_vertices(self) -> List[Vector4D]:
        pass

    @abstractmethod
    def _generate_edges(self) -> List[Edge]:
        pass

    def _generate_faces(self) -> List[Face]:
        return []

    def get_vertices(self) -> List[Vector4D]:
        return self.vertices

    def get_edges(self) -> List[Edge]:
        return self.edges

    def get_faces(self) -> List[Face]:
        return self.faces

    def parameters(self) -> dict[str, Any]:
        return asdict(self)

    def to_geometry(self) -> Geometry4D:
        return Geometry4D(vertices=list(self.vertices), edges=list(self.edges), faces=list(self.faces))


def require_positive(**values: float) -> None:
    for name, value in values.items():
        if value <= 0:
            raise ValueError(f"'{name}' must be positive, got {value}.")


def require_at_least(minimum: int, **values: int) -> None:
    for name, value in values.items():
        if value < minimum:
            raise ValueError(f"'{name}' must be at least {minimum}, got {value}.")
