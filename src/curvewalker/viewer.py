"""Interactive matplotlib viewer with a control panel for the curve."""

from __future__ import annotations
import logging
import os
from typing import Optional

from .controller import PlaybackController
from .parameters import PlaybackParameters, load_preset
from .scheduling import MatplotlibTimerScheduler
from .surfaces import MatplotlibSurface

log = logging.getLogger(__name__)

SCREEN_WIDTH = 600
SCREEN_HEIGHT = 600


def build_viewer(fig, params: Optional[PlaybackParameters] = None):
    """Lay out the canvas and controls on ``fig`` and wire them to a controller.

    Args:
        fig: A matplotlib Figure.
        params: Initial parameters (defaults if omitted).

    Returns:
        Tuple of (controller, widgets). Keep ``widgets`` referenced for as
        long as the figure is shown, or matplotlib drops their callbacks.
    """
    from matplotlib.widgets import Button, CheckButtons, TextBox

    fig.patch.set_facecolor("0.15")
    ax = fig.add_axes([0.02, 0.02, 0.66, 0.96])
    surface = MatplotlibSurface(ax, SCREEN_WIDTH, SCREEN_HEIGHT)
    ctl = PlaybackController(surface, MatplotlibTimerScheduler(fig.canvas), params)
    p = ctl.params

    widgets = {}

    def _button(name, row, callback):
        b = Button(fig.add_axes([0.72, 0.92 - row * 0.06, 0.24, 0.05]), name)
        b.on_clicked(lambda _ev: callback())
        widgets[name] = b

    def _number(name, row, initial, setter):
        box = TextBox(fig.add_axes([0.84, 0.92 - row * 0.06, 0.12, 0.05]), name + " ", initial=str(initial))
        box.on_submit(setter)
        widgets[name] = box

    _button("Start", 0, ctl.start)
    _button("Stop", 1, ctl.stop)
    _button("Step", 2, ctl.single_step)
    _number("Steps", 3, p.step_count, ctl.set_step_count)
    _button("Clear", 4, ctl.clear_surface)
    _button("Reset", 5, ctl.reset)
    _number("Framerate", 6, p.tick_rate, ctl.set_tick_rate)
    _number("Steps per tick", 7, p.steps_per_tick, ctl.set_steps_per_tick)
    _number("Step size", 8, p.step_length, ctl.set_step_length)
    _number("Direction step size", 9, p.angle_delta, ctl.set_angle_delta)

    check = CheckButtons(fig.add_axes([0.72, 0.92 - 10.5 * 0.06, 0.24, 0.08]), ["Reset on change"], [p.reset_on_change])
    check.on_clicked(lambda _label: ctl.set_reset_on_change(check.get_status()[0]))
    widgets["Reset on change"] = check

    ctl.clear_surface()
    ctl.attach()
    return ctl, widgets


def main():
    import matplotlib.pyplot as plt

    logging.basicConfig(level=os.getenv("CURVEWALKER_LOG_LEVEL", "INFO"))

    preset_path = os.getenv("CURVEWALKER_PRESET")
    params = load_preset(preset_path) if preset_path else None
    if preset_path:
        log.info("loaded preset %s", preset_path)

    fig = plt.figure(figsize=(9, 6))
    fig.canvas.manager.set_window_title("curvewalker")
    ctl, widgets = build_viewer(fig, params)
    plt.show()
    ctl.detach()


if __name__ == "__main__":
    main()
