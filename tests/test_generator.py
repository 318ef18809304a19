import math
import pytest
from curvewalker import CurveGenerator, PlaybackParameters, Point, generate_curve
import numpy as np

# --------------------- Tests for CurveGenerator init() ---------------------
def test_generator_instantiation():
    """Test that the generator can be instantiated."""
    gen = CurveGenerator()
    assert gen is not None


def test_init_default_values():
    gen = CurveGenerator()

    assert gen.params.step_length == 20.0
    assert gen.params.angle_delta == 10.0
    assert gen.position == Point(0.0, 0.0)
    assert gen.heading == 0.0
    assert gen.heading_increment == 0.0
    assert len(gen) == 0


def test_init_overrides_apply_to_shared_params():
    """Keyword overrides are written into the shared parameter model."""
    params = PlaybackParameters()
    gen = CurveGenerator(params, step_length=5, angle_delta=-3)

    assert gen.params is params
    assert params.step_length == 5.0
    assert params.angle_delta == -3.0


# --------------------- Tests for step() ---------------------

def test_three_step_scenario():
    """L=20, d=10: P0=(20,0), P1~(39.70,3.47), P2~(57.02,13.47)."""
    gen = CurveGenerator(step_length=20, angle_delta=10)
    for _ in range(3):
        gen.step()

    expected = np.array([
        [20.0, 0.0],
        [39.696, 3.473],
        [57.017, 13.473],
    ])
    assert np.allclose(gen.as_array(), expected, atol=1e-2)


def test_step_returns_appended_point():
    gen = CurveGenerator()
    p = gen.step()

    assert isinstance(p, Point)
    assert gen.points[-1] == p
    assert gen.position == p


def test_headings_compound():
    """Headings used for points 0, 1, 2 are 0, 10 and 30 degrees."""
    gen = CurveGenerator(step_length=1, angle_delta=10)
    prev = np.zeros(2)
    headings = []
    for _ in range(3):
        p = np.array(gen.step())
        d = p - prev
        headings.append(math.degrees(math.atan2(d[1], d[0])))
        prev = p

    assert np.allclose(headings, [0.0, 10.0, 30.0])


def test_heading_matches_closed_form():
    """After n steps the heading is d * n * (n + 1) / 2."""
    d = 7.5
    gen = CurveGenerator(angle_delta=d)
    for n in range(1, 20):
        gen.step()
        assert math.isclose(gen.heading, d * n * (n + 1) / 2)
        assert math.isclose(gen.heading_increment, d * n)


@pytest.mark.parametrize("step_length", [20.0, 3.5, -12.0])
def test_length_and_segment_magnitude(step_length):
    """n steps give n points, each exactly |step_length| from its predecessor."""
    gen = CurveGenerator(step_length=step_length, angle_delta=13)
    for _ in range(50):
        gen.step()

    P = np.vstack([[0.0, 0.0], gen.as_array()])
    seg = np.linalg.norm(np.diff(P, axis=0), axis=1)

    assert len(gen) == 50
    assert np.allclose(seg, abs(step_length))


def test_parameter_change_applies_to_next_step_only():
    """Changing step length does not rewrite points already generated."""
    gen = CurveGenerator(step_length=10, angle_delta=0)
    gen.step()
    gen.params.step_length = 1
    gen.step()

    assert gen.points == (Point(10.0, 0.0), Point(11.0, 0.0))


# --------------------- Tests for reset() ---------------------

def test_reset_matches_fresh_generator():
    gen = CurveGenerator()
    for _ in range(25):
        gen.step()
    gen.reset()

    fresh = CurveGenerator()
    assert gen.position == fresh.position
    assert gen.heading == fresh.heading
    assert gen.heading_increment == fresh.heading_increment
    assert gen.points == fresh.points == ()


def test_reset_keeps_params_object():
    params = PlaybackParameters(step_length=3)
    gen = CurveGenerator(params)
    gen.step()
    gen.reset()

    assert gen.params is params
    assert gen.params.step_length == 3.0


def test_points_view_is_not_live():
    gen = CurveGenerator()
    snapshot = gen.points
    gen.step()
    assert snapshot == ()


# --------------------- Tests for as_array() and helpers ---------------------

def test_as_array_empty_shape():
    assert CurveGenerator().as_array().shape == (0, 2)


def test_generate_curve_convenience():
    path = generate_curve(3, step_length=20, angle_delta=10)

    assert path.shape == (3, 2)
    assert np.allclose(path[-1], [57.017, 13.473], atol=1e-2)
