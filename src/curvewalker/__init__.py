from .generator import CurveGenerator, Point
from .geometry import ViewportFitter, ViewportTransform
from .parameters import PlaybackParameters, load_preset
from .controller import PlaybackController, PlaybackState
from .render import redraw

def generate_curve(steps: int, **kwargs):
    """
    Convenience function to walk a fresh curve.
    Keyword arguments are PlaybackParameters fields.
    Returns the (N, 2) point array after ``steps`` steps.
    """
    generator = CurveGenerator(PlaybackParameters(**kwargs))
    for _ in range(steps):
        generator.step()
    return generator.as_array()
