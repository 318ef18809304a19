"""Playback parameters shared by the generator and the controller.

Parameters are held in a pydantic model with assignment validation, so a
setter can try a raw value from a text box and keep the previous value when
it does not validate.

Example:
    Loading a preset::

        from curvewalker.parameters import load_preset

        params = load_preset("curl.json")
        params.step_length
"""

from __future__ import annotations

import json
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class PlaybackParameters(BaseModel):
    """Tunable knobs for the walk and its animation.

    Attributes:
        step_length: Distance travelled per step in world units. Any finite
            value is meaningful; a negative length walks backwards.
        angle_delta: Amount added to the heading increment every step, in degrees.
        tick_rate: Animation ticks per second.
        steps_per_tick: Generator steps run on each animation tick.
        step_count: Generator steps run by a single manual step.
        reset_on_change: If True, every accepted parameter change resets the curve.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    step_length: float = Field(20.0, allow_inf_nan=False)
    angle_delta: float = Field(10.0, allow_inf_nan=False)
    tick_rate: float = Field(60.0, gt=0, allow_inf_nan=False)
    steps_per_tick: int = Field(1, gt=0)
    step_count: int = Field(1, gt=0)
    reset_on_change: bool = False


# Keys that are loaded from preset files
PRESET_KEYS = tuple(PlaybackParameters.model_fields)

# Default values for preset parameters
DEFAULT_PRESET: Dict[str, Any] = PlaybackParameters().model_dump()


def load_preset(filepath: str) -> PlaybackParameters:
    """Load playback parameters from a JSON file.

    Keys missing from the file keep their defaults.

    Args:
        filepath: Path to the JSON file.

    Returns:
        A validated PlaybackParameters instance.

    Raises:
        ValueError: If the file contains keys that are not parameters.
        pydantic.ValidationError: If a value does not validate.
    """
    preset = DEFAULT_PRESET.copy()

    with open(filepath, 'r') as f:
        data = json.load(f)

    supported = set(PRESET_KEYS)
    unknown = set(data.keys()) - supported
    if unknown:
        raise ValueError(f"Unknown parameters in preset file: {unknown}. Supported: {supported}")

    for key in PRESET_KEYS:
        if key in data:
            preset[key] = data[key]

    return PlaybackParameters(**preset)
