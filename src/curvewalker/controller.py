"""Playback controller: owns the walk state and drives it from a repeating task.

Example:
    Headless usage::

        from curvewalker import PlaybackController
        from curvewalker.scheduling import ManualScheduler
        from curvewalker.surfaces import RecordingSurface

        scheduler = ManualScheduler()
        ctl = PlaybackController(RecordingSurface(), scheduler)
        ctl.attach()
        ctl.start()
        scheduler.advance(10)
        len(ctl.points)  # 10
"""

from __future__ import annotations
import enum
import logging
from typing import Any, Optional, Sequence, Tuple

from pydantic import ValidationError

from .generator import CurveGenerator, Point
from .geometry import DEFAULT_MARGIN, ViewportFitter
from .parameters import PlaybackParameters
from .render import redraw
from .scheduling import ManualScheduler, RepeatingTask
from .surfaces import RenderSurface

log = logging.getLogger(__name__)


class PlaybackState(str, enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class PlaybackController:
    """Owned context for one animated curve.

    Holds the parameters, generator, fitter, and surface for the lifetime of
    the view. ``reset`` reinitialises these objects in place rather than
    replacing them.

    Attributes:
        params: Parameter model shared with the generator.
        generator: The curve generator.
        fitter: Viewport fitter tracking the extent of ``generator.points``.
        surface: Render surface.
        scheduler: Repeating task that calls ``tick``.
        ticks: Ticks handled since construction (including no-op ticks).
        frames_drawn: Redraws performed since construction.
    """

    def __init__(
        self,
        surface: RenderSurface,
        scheduler: Optional[RepeatingTask] = None,
        params: Optional[PlaybackParameters] = None,
        *,
        margin: float = DEFAULT_MARGIN,
    ):
        self.params = params if params is not None else PlaybackParameters()
        self.generator = CurveGenerator(self.params)
        self.fitter = ViewportFitter(margin=margin)
        self.surface = surface
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()

        self._state = PlaybackState.STOPPED
        self.ticks = 0
        self.frames_drawn = 0

    # -------------------- Read Path --------------------

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is PlaybackState.RUNNING

    @property
    def points(self) -> Sequence[Point]:
        return self.generator.points

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        return self.fitter.extent

    def interval_ms(self) -> float:
        """Delay before the next tick, from the current tick rate."""
        return 1000.0 / self.params.tick_rate

    # -------------------- Scheduling --------------------

    def attach(self) -> None:
        """Start the repeating task that calls ``tick``."""
        if not self.scheduler.active:
            self.scheduler.start(self.tick, self.interval_ms)

    def detach(self) -> None:
        self.scheduler.stop()

    def tick(self) -> None:
        """One animation tick: no-op when stopped, else step and redraw once."""
        self.ticks += 1
        if not self.running:
            return
        self._advance(self.params.steps_per_tick)
        self.draw()

    # -------------------- Transport --------------------

    def start(self) -> None:
        if self._state is not PlaybackState.RUNNING:
            log.debug("playback started")
        self._state = PlaybackState.RUNNING
        self.attach()

    def stop(self) -> None:
        if self._state is not PlaybackState.STOPPED:
            log.debug("playback stopped after %d points", len(self.generator))
        self._state = PlaybackState.STOPPED

    def single_step(self, count: Optional[Any] = None) -> bool:
        """Run ``count`` steps then redraw once, without changing state.

        Args:
            count: Positive number of steps. Defaults to ``params.step_count``.

        Returns:
            False if ``count`` was not a positive integer (nothing happens).
        """
        if count is None:
            count = self.params.step_count
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            log.debug("ignoring single step count %r", count)
            return False
        self._advance(count)
        self.draw()
        return True

    def reset(self) -> None:
        """Stop, clear the walk and its extent, and draw the empty scene."""
        self.stop()
        self.generator.reset()
        self.fitter.reset()
        self.draw()

    def clear_surface(self) -> None:
        """Blank the surface without touching the walk."""
        self.surface.clear()
        self.surface.present()

    def draw(self) -> None:
        redraw(self.surface, self.generator.as_array(), self.fitter)
        self.frames_drawn += 1

    def _advance(self, count: int) -> None:
        for _ in range(count):
            self.fitter.record_point(self.generator.step())

    # -------------------- Parameter Setters --------------------

    def _set(self, name: str, value: Any) -> bool:
        """Assign a validated parameter, keeping the old value on failure."""
        try:
            setattr(self.params, name, value)
        except ValidationError as e:
            log.debug("rejected %s=%r: %s", name, value, e.errors()[0]["msg"])
            return False
        if self.params.reset_on_change:
            self.reset()
        return True

    def set_step_length(self, value: Any) -> bool:
        return self._set("step_length", value)

    def set_angle_delta(self, value: Any) -> bool:
        return self._set("angle_delta", value)

    def set_tick_rate(self, value: Any) -> bool:
        return self._set("tick_rate", value)

    def set_steps_per_tick(self, value: Any) -> bool:
        return self._set("steps_per_tick", value)

    def set_step_count(self, value: Any) -> bool:
        return self._set("step_count", value)

    def set_reset_on_change(self, flag: Any) -> bool:
        """Toggle reset-on-change. Changing the flag itself never resets."""
        try:
            self.params.reset_on_change = flag
        except ValidationError:
            log.debug("rejected reset_on_change=%r", flag)
            return False
        return True
