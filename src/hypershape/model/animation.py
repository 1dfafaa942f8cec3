from __future__ import annotations

from dataclasses import dataclass
import math

from hypershape.config import DEFAULT_AUTO_ROTATION_SPEED
from hypershape.model.rotation import RotationAngles


@dataclass
class Animation4D:
    """
    Time accumulator driving automatic rotation.

    Time only advances through `update` with an externally supplied delta,
    so the rotation values are a pure function of accumulated time.
    """
    is_animating: bool = False
    auto_rotate: bool = False
    speed: float = 1.0
    rotation_speed: float = DEFAULT_AUTO_ROTATION_SPEED
    time: float = 0.0

    def start(self) -> None:
        self.is_animating = True

    def stop(self) -> None:
        self.is_animating = False

    def set_speed(self, speed: float) -> None:
        if speed < 0:
            raise ValueError(f"Animation speed must be non-negative, got {speed}.")
        self.speed = speed

    def set_auto_rotate(self, enabled: bool) -> None:
        self.auto_rotate = enabled

    def set_rotation_speed(self, speed: float) -> None:
        if speed < 0:
            raise ValueError(f"Rotation speed must be non-negative, got {speed}.")
        self.rotation_speed = speed

    def update(self, delta_time: float) -> None:
        if delta_time < 0:
            raise ValueError(f"Time delta must be non-negative, got {delta_time}.")
        if self.is_animating:
            self.time += delta_time * self.speed
        if self.auto_rotate:
            self.time += delta_time * self.speed * self.rotation_speed

    def get_rotation_values(self) -> RotationAngles:
        """Phase-shifted sinusoids of the accumulated time, each in [-0.5, 0.5]."""
        t = self.time
        return RotationAngles(
            x=math.sin(t * 1.0) * 0.5,
            y=math.cos(t * 0.8) * 0.5,
            z=math.sin(t * 1.2) * 0.5,
            w=math.cos(t * 0.9) * 0.5,
        )
