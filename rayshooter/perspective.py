"""Vertical camera perspective used when drawing screen columns."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Perspective:
    """A vertical screen offset and the camera's height above the subject."""

    y_offset: float
    horizon_height: float

    @classmethod
    def from_angle(cls, angle: float, camera_height: float, subject_height: float,
                   proj_dist: float) -> Perspective:
        """Build a perspective from a look angle (radians) and heights."""
        return cls(math.tan(angle) * proj_dist, camera_height - subject_height)

    def offset_camera(self, by: float) -> Perspective:
        """Return a perspective with the camera raised by ``by``."""
        return replace(self, horizon_height=self.horizon_height + by)

    def offset_subject(self, by: float, scale: float) -> Perspective:
        """Return a perspective for a subject raised by ``by`` and scaled by ``scale``."""
        horizon = (self.horizon_height - by / scale) / scale
        return replace(self, horizon_height=horizon)