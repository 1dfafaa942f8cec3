"""
4D Rotation Engine
==================
Builds rotation matrices for the six coordinate planes of 4D space and
composes them into a single rotation state.

In 4D a rotation happens in a plane, not around an axis. Composition is
non-commutative: the order of the steps changes the resulting orientation
whenever more than one angle is non-zero.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
from typing import Iterable, List, NamedTuple, Sequence

from hypershape.model.geometry_primitives import Matrix4D, Vector4D

logger = logging.getLogger(__name__)


class RotationPlane(StrEnum):
    YZ = "yz"
    XZ = "xz"
    XY = "xy"
    XW = "xw"
    YW = "yw"
    ZW = "zw"

    @property
    def axes(self) -> tuple[int, int]:
        return _PLANE_AXES[self]


_PLANE_AXES: dict[RotationPlane, tuple[int, int]] = {
    RotationPlane.YZ: (1, 2),
    RotationPlane.XZ: (0, 2),
    RotationPlane.XY: (0, 1),
    RotationPlane.XW: (0, 3),
    RotationPlane.YW: (1, 3),
    RotationPlane.ZW: (2, 3),
}


class RotationAngles(NamedTuple):
    """Angles in radians, one per rotation control."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


# Control -> plane binding of the four-angle composition, applied in this order.
# YW and ZW are not part of it.
DEFAULT_ORDER: tuple[RotationPlane, ...] = (
    RotationPlane.YZ,  # x: around the X axis
    RotationPlane.XZ,  # y: around the Y axis
    RotationPlane.XY,  # z: around the Z axis
    RotationPlane.XW,  # w: into the fourth dimension
)


def plane_rotation(plane: RotationPlane | str, angle: float) -> Matrix4D:
    """Elementary rotation matrix for one coordinate plane."""
    axis_a, axis_b = RotationPlane(plane).axes
    return Matrix4D.rotation(axis_a, axis_b, angle)


def compose(steps: Iterable[tuple[RotationPlane | str, float]]) -> Matrix4D:
    """
    Compose elementary rotations left to right.

    Starts from the identity and post-multiplies each step, so the composite
    is R1 · R2 · ... · Rn and the last step acts on a vector first.

    Args:
        steps: (plane, angle) pairs, angles in radians.

    Returns:
        The composite rotation matrix.
    """
    matrix = Matrix4D()
    for plane, angle in steps:
        matrix.multiply(plane_rotation(plane, angle))
    return matrix


@dataclass
class Rotation4D:
    """
    Rotation state: four angles and the composite matrix derived from them.

    The matrix is recomputed on every `set_rotation`; it is never stale.
    """
    rotation_x: float = 0.0
    rotation_y: float = 0.0
    rotation_z: float = 0.0
    rotation_w: float = 0.0
    matrix: Matrix4D = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.update_matrix()

    @property
    def angles(self) -> RotationAngles:
        return RotationAngles(self.rotation_x, self.rotation_y, self.rotation_z, self.rotation_w)

    def set_rotation(self, x: float, y: float, z: float, w: float) -> None:
        self.rotation_x = x
        self.rotation_y = y
        self.rotation_z = z
        self.rotation_w = w
        self.update_matrix()

    def update_matrix(self) -> None:
        self.matrix = compose(zip(DEFAULT_ORDER, self.angles))
        logger.debug(f"Rotation matrix updated for angles {tuple(self.angles)}")

    def rotate_point(self, point: Vector4D) -> Vector4D:
        return self.matrix.transform_vector(point)

    def rotate_array(self, points: Sequence[Vector4D]) -> List[Vector4D]:
        return [self.rotate_point(p) for p in points]
