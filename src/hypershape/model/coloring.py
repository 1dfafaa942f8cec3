"""Scalar coloring of 4D vertices along a fixed hue gradient."""
from __future__ import annotations

import colorsys
from dataclasses import dataclass
from enum import StrEnum
from typing import List, NamedTuple, Sequence

from hypershape.config import (
    COLOR_HUE_RANGE_DEG, COLOR_LIGHTNESS, COLOR_SATURATION, DEPTH_RANGE, DISTANCE_RANGE, W_RANGE
)
from hypershape.model.geometry_primitives import Vector4D


class ColorMode(StrEnum):
    DEPTH = "depth"
    W_COORDINATE = "w-coordinate"
    DISTANCE = "distance"


class Color(NamedTuple):
    r: float
    g: float
    b: float

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*(round(c * 255) for c in self))


def hue_color(value: float) -> Color:
    """Maps a value in [0, 1] to hue value * 240 deg (red -> green -> blue)."""
    hue = value * COLOR_HUE_RANGE_DEG / 360.0
    return Color(*colorsys.hls_to_rgb(hue, COLOR_LIGHTNESS, COLOR_SATURATION))


@dataclass
class ColorMapping4D:
    color_mode: ColorMode = ColorMode.DEPTH

    def set_color_mode(self, mode: ColorMode | str) -> None:
        self.color_mode = ColorMode(mode)

    def normalized_value(
        self,
        point: Vector4D,
        min_w: float = W_RANGE[0],
        max_w: float = W_RANGE[1]
    ) -> float:
        """
        Scalar in [0, 1] for one vertex according to the active mode.

        Args:
            point: The unprojected 4D vertex.
            min_w: Lower end of the w range (w-coordinate mode).
            max_w: Upper end of the w range (w-coordinate mode).

        Returns:
            The clamped scalar. A degenerate w range gives 0.5.
        """
        match ColorMode(self.color_mode):
            case ColorMode.W_COORDINATE:
                span = max_w - min_w
                value = 0.5 if span == 0 else (point.w - min_w) / span
            case ColorMode.DISTANCE:
                value = min(point.length() / DISTANCE_RANGE, 1.0)
            case _:
                low, high = DEPTH_RANGE
                value = (point.z - low) / (high - low)
        return max(0.0, min(1.0, value))

    def get_color(
        self,
        point: Vector4D,
        min_w: float = W_RANGE[0],
        max_w: float = W_RANGE[1]
    ) -> Color:
        return hue_color(self.normalized_value(point, min_w, max_w))

    def get_color_array(self, points: Sequence[Vector4D]) -> List[Color]:
        """Colors a batch, using the batch's own w range."""
        if not points:
            return []
        min_w = min(p.w for p in points)
        max_w = max(p.w for p in points)
        return [self.get_color(p, min_w, max_w) for p in points]
