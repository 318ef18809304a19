"""Render surfaces the controller can draw onto.

A surface owns pixel output, its fixed dimensions, and styling. The core only
hands it a cleared frame and a polyline in surface coordinates.
"""

from __future__ import annotations
from typing import List, Optional, Protocol, runtime_checkable
import numpy as np


@runtime_checkable
class RenderSurface(Protocol):
    width: int
    height: int

    def clear(self) -> None:
        """Fill the whole surface with the background."""

    def draw_polyline(self, xy: np.ndarray) -> None:
        """Stroke connected segments through ``xy`` ((N, 2), surface coordinates)."""

    def present(self) -> None:
        """Flush the finished frame."""


class RecordingSurface:
    """Headless surface that keeps the last frame in memory.

    Used for scripted runs and tests.

    Attributes:
        frames: Number of frames presented.
        clears: Number of clears.
        polylines: Polylines drawn since the last clear.
    """

    def __init__(self, width: int = 600, height: int = 600):
        self.width = width
        self.height = height
        self.frames = 0
        self.clears = 0
        self.polylines: List[np.ndarray] = []

    def clear(self) -> None:
        self.clears += 1
        self.polylines = []

    def draw_polyline(self, xy: np.ndarray) -> None:
        self.polylines.append(np.array(xy, dtype=np.float64, copy=True))

    def present(self) -> None:
        self.frames += 1

    @property
    def last_polyline(self) -> Optional[np.ndarray]:
        return self.polylines[-1] if self.polylines else None


class MatplotlibSurface:
    """Surface backed by a matplotlib Axes.

    The axes is set up as a ``width`` x ``height`` pixel canvas with the
    origin at the top-left (y grows downward), a black background, and a
    single white round-capped line that is updated in place every frame.

    Args:
        ax: Axes to draw into.
        width: Surface width in surface units.
        height: Surface height in surface units.
        background: Background fill colour.
        color: Stroke colour.
        line_width: Stroke width in points.
    """

    def __init__(
        self,
        ax,
        width: int = 600,
        height: int = 600,
        *,
        background: str = "black",
        color: str = "white",
        line_width: float = 1.0,
    ):
        self.ax = ax
        self.width = width
        self.height = height

        ax.set_facecolor(background)
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_aspect("equal")
        ax.set_xticks([])
        ax.set_yticks([])
        (self.line,) = ax.plot([], [], color=color, linewidth=line_width, solid_capstyle="round")

    def clear(self) -> None:
        self.line.set_data([], [])

    def draw_polyline(self, xy: np.ndarray) -> None:
        P = np.asarray(xy, dtype=np.float64).reshape(-1, 2)
        self.line.set_data(P[:, 0], P[:, 1])

    def present(self) -> None:
        self.ax.figure.canvas.draw_idle()
