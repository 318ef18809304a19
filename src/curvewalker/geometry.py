"""Viewport fitting utilities for the curve renderer.

This module tracks the bounding extent of every point the walker has produced
and derives, on demand, the uniform-scale transform that fits that extent into
a fixed-size render surface.

The transform is never stored. Each frame calls ``compute_transform`` and gets
a fresh ``ViewportTransform`` for the current extent, which:

- Centers the extent midpoint on the surface center
- Scales both axes by the same factor (no aspect distortion)
- Reserves a margin so the curve never touches the surface edge
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple, Union
import numpy as np

# Added to the extent size so there's a thin border around the curve
DEFAULT_MARGIN = 10.0

# Floor for the normalisation denominator
MIN_EXTENT = 1e-6

ArrayLike = Union[np.ndarray, Tuple[float, float]]


@dataclass(frozen=True)
class ViewportTransform:
    """Uniform scale-and-center map from world to surface coordinates.

    Attributes:
        center_x: World x mapped to the surface center.
        center_y: World y mapped to the surface center.
        scale: Surface units per world unit.
        surface_width: Width of the render surface.
        surface_height: Height of the render surface.

    Note:
        To convert world → centered: ``P_c = (P_world - center) * scale``
        To convert world → surface:  ``P_s = P_c + (width/2, height/2)``
    """

    center_x: float
    center_y: float
    scale: float
    surface_width: float
    surface_height: float

    def to_centered(self, xy: ArrayLike) -> np.ndarray:
        """Map world point(s) to coordinates relative to the surface center.

        Args:
            xy: A single (x, y) pair or an (N, 2) array.

        Returns:
            Array of the same shape as ``xy``.
        """
        P = np.asarray(xy, dtype=np.float64)
        return (P - np.array([self.center_x, self.center_y])) * self.scale

    def to_surface(self, xy: ArrayLike) -> np.ndarray:
        """Map world point(s) to surface coordinates (origin at the top-left)."""
        offset = np.array([self.surface_width / 2, self.surface_height / 2])
        return self.to_centered(xy) + offset


class ViewportFitter:
    """Running bounding extent of the walk plus the transform derived from it.

    The extent only widens until ``reset`` returns it to the degenerate box at
    the origin. The walk starts at the origin, so the origin is always inside.

    Attributes:
        margin: World units added to the extent size before normalising.
        min_x, max_x, min_y, max_y: Current extent.
    """

    def __init__(self, margin: float = DEFAULT_MARGIN):
        self.margin = float(margin)
        self.reset()

    @classmethod
    def from_points(cls, points: Iterable[ArrayLike], margin: float = DEFAULT_MARGIN) -> "ViewportFitter":
        """Build a fitter whose extent covers the origin and ``points``."""
        fitter = cls(margin=margin)
        fitter.record_points(points)
        return fitter

    def reset(self) -> None:
        self.min_x = 0.0
        self.max_x = 0.0
        self.min_y = 0.0
        self.max_y = 0.0

    def record_point(self, p: ArrayLike) -> None:
        """Fold a point into the extent (componentwise min/max)."""
        x, y = float(p[0]), float(p[1])
        self.min_x = min(self.min_x, x)
        self.max_x = max(self.max_x, x)
        self.min_y = min(self.min_y, y)
        self.max_y = max(self.max_y, y)

    def record_points(self, points: Iterable[ArrayLike]) -> None:
        if not isinstance(points, np.ndarray):
            points = list(points)
        P = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if len(P) == 0:
            return
        lo = P.min(axis=0)
        hi = P.max(axis=0)
        self.min_x = min(self.min_x, float(lo[0]))
        self.max_x = max(self.max_x, float(hi[0]))
        self.min_y = min(self.min_y, float(lo[1]))
        self.max_y = max(self.max_y, float(hi[1]))

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """The extent as ``(min_x, max_x, min_y, max_y)``."""
        return self.min_x, self.max_x, self.min_y, self.max_y

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def compute_transform(self, surface_width: float, surface_height: float) -> ViewportTransform:
        """Compute the transform that fits the current extent into the surface.

        Args:
            surface_width: Width of the render surface.
            surface_height: Height of the render surface.

        Returns:
            A ViewportTransform with a finite, positive scale.

        Example:
            >>> fitter = ViewportFitter()
            >>> fitter.record_point((90, 0))
            >>> t = fitter.compute_transform(600, 600)
            >>> t.scale
            6.0
            >>> t.center_x
            45.0

        Note:
            For a degenerate extent (a single point) with a non-positive
            margin, the denominator is clamped to ``MIN_EXTENT`` to avoid
            division by zero.
        """
        extent_size = max(self.width, self.height)
        denom = max(extent_size + self.margin, MIN_EXTENT)
        scale = max(surface_width, surface_height) / denom
        return ViewportTransform(
            center_x=(self.min_x + self.max_x) / 2,
            center_y=(self.min_y + self.max_y) / 2,
            scale=float(scale),
            surface_width=float(surface_width),
            surface_height=float(surface_height),
        )
