"""Full-frame redraw of the curve."""

from __future__ import annotations
import numpy as np

from .geometry import ViewportFitter, ViewportTransform
from .surfaces import RenderSurface


def redraw(surface: RenderSurface, points: np.ndarray, fitter: ViewportFitter) -> ViewportTransform:
    """Clear ``surface`` and stroke the whole point sequence through a fresh fit.

    Every frame redraws all points, so cost grows with the point count.

    Args:
        surface: Target surface.
        points: (N, 2) world-space points in draw order.
        fitter: Fitter whose extent covers ``points``.

    Returns:
        The transform used for this frame.
    """
    surface.clear()
    transform = fitter.compute_transform(surface.width, surface.height)

    P = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(P):
        surface.draw_polyline(transform.to_surface(P))

    surface.present()
    return transform
