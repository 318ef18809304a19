"""Incremental generator for the compounding-turn walk.

The walker moves a fixed distance along its heading on every step, then turns.
The turn itself grows by a constant delta each step, so curvature accelerates
linearly and the walk curls into the spirals characteristic of the curve.

Example:
    Basic usage::

        from curvewalker import CurveGenerator

        gen = CurveGenerator(step_length=20, angle_delta=10)
        for _ in range(3):
            gen.step()
        gen.points[-1]  # Point(x=57.02..., y=13.47...)
"""

from __future__ import annotations
from typing import List, NamedTuple, Optional, Sequence
import math
import numpy as np

from .parameters import PlaybackParameters


class Point(NamedTuple):
    """A generated position in world space."""

    x: float
    y: float


class CurveGenerator:
    """Turtle-style walker with a linearly accelerating turn rate.

    Each call to ``step`` runs, in order:

    1. Move ``step_length`` along the current heading
    2. Append the new position to the point sequence
    3. Add ``angle_delta`` to the heading increment
    4. Add the heading increment to the heading

    So the heading used for the k-th point (0-indexed) is ``d * k * (k + 1) / 2``.
    Angles are held in degrees and converted at the trig call.

    Attributes:
        params: Parameters read on every step. Shared with the controller so
            changes apply to the next step without recomputing past points.
        x: Current x position.
        y: Current y position.
        heading: Current heading in degrees.
        heading_increment: Current per-step turn in degrees.
    """

    def __init__(
        self,
        params: Optional[PlaybackParameters] = None,
        *,
        step_length: Optional[float] = None,
        angle_delta: Optional[float] = None,
    ):
        """Initialize the walker at the origin heading along +X.

        Args:
            params: Shared parameter model. A fresh default model is created
                if omitted.
            step_length: Override for ``params.step_length``.
            angle_delta: Override for ``params.angle_delta``.
        """
        self.params = params if params is not None else PlaybackParameters()
        if step_length is not None:
            self.params.step_length = step_length
        if angle_delta is not None:
            self.params.angle_delta = angle_delta

        self._points: List[Point] = []
        self.reset()

    def reset(self) -> None:
        """Return the walker to the origin and empty the point sequence."""
        self.x = 0.0
        self.y = 0.0
        self.heading = 0.0
        self.heading_increment = 0.0
        self._points.clear()

    def step(self) -> Point:
        """Advance the walk by one step and return the appended point."""
        step_length = self.params.step_length
        rad = math.radians(self.heading)
        self.x += math.cos(rad) * step_length
        self.y += math.sin(rad) * step_length

        point = Point(self.x, self.y)
        self._points.append(point)

        self.heading_increment += self.params.angle_delta
        self.heading += self.heading_increment
        return point

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def points(self) -> Sequence[Point]:
        """Read-only view of the generated points in draw order."""
        return tuple(self._points)

    def as_array(self) -> np.ndarray:
        """Points as an (N, 2) float64 array (shape (0, 2) when empty)."""
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.array(self._points, dtype=np.float64)

    def __len__(self) -> int:
        return len(self._points)
