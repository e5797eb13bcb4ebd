"""Tests for channel samplers"""

import numpy as np
import pytest
from pyrr import Quaternion, Vector3

from gltfanim.animation import (
    AnimationTarget, InterpolationType,
    sample_linear_channel, sample_step_channel, sample_cubic_spline_channel, sample_channel,
    SAMPLERS,
)
from gltfanim.errors import BufferLayoutError


TIMESTAMPS = np.array([0.0, 0.5, 1.25, 2.0], dtype='f4')
VECTORS = np.array([
    [0.0, 0.0, 0.0],
    [1.0, 2.0, 3.0],
    [-1.0, 0.5, 4.0],
    [2.0, 2.0, 2.0],
], dtype='f4')


def test_linear_copies_keys():
    """Linear sampling is an element-wise copy"""
    keys = sample_linear_channel(VECTORS, TIMESTAMPS, AnimationTarget.TRANSLATION)

    assert len(keys) == len(TIMESTAMPS)
    for key, time, value in zip(keys, TIMESTAMPS, VECTORS):
        assert key.time == float(time)
        assert np.array_equal(np.asarray(key.value), value)
        assert isinstance(key.value, Vector3)


def test_linear_rotation_values_are_quaternions():
    """Rotation keys keep glTF (x, y, z, w) component order"""
    values = np.array([[0.0, 0.0, 0.0, 1.0], [0.0, 1.0, 0.0, 0.0]], dtype='f4')
    keys = sample_linear_channel(values, [0.0, 1.0], AnimationTarget.ROTATION)

    assert isinstance(keys[0].value, Quaternion)
    assert np.allclose(np.asarray(keys[1].value), [0.0, 1.0, 0.0, 0.0])


def test_linear_rejects_count_mismatch():
    """Output count must match input count"""
    with pytest.raises(BufferLayoutError):
        sample_linear_channel(VECTORS[:3], TIMESTAMPS, AnimationTarget.SCALE)


def test_step_key_count_and_held_values():
    """Step sampling produces 2N-1 keys holding each value until just before the next"""
    keys = sample_step_channel(VECTORS, TIMESTAMPS, AnimationTarget.TRANSLATION)
    count = len(TIMESTAMPS)

    assert len(keys) == 2 * count - 1

    for i in range(count):
        assert keys[2 * i].time == float(TIMESTAMPS[i])
        assert np.array_equal(np.asarray(keys[2 * i].value), VECTORS[i])

    for i in range(count - 1):
        assert keys[2 * i + 1].time == float(TIMESTAMPS[i + 1]) - 1e-6
        assert np.array_equal(np.asarray(keys[2 * i + 1].value), VECTORS[i])


def test_step_single_key():
    """A single step key yields a single output key"""
    keys = sample_step_channel(VECTORS[:1], TIMESTAMPS[:1], AnimationTarget.SCALE)
    assert len(keys) == 1


def test_step_empty_channel():
    """An empty channel yields no keys"""
    empty = np.zeros((0, 3), dtype='f4')
    assert sample_step_channel(empty, np.zeros(0, dtype='f4'), AnimationTarget.SCALE) == []


def _spline_values(points, in_tangents, out_tangents):
    values = []
    for in_tangent, point, out_tangent in zip(in_tangents, points, out_tangents):
        values.extend([in_tangent, point, out_tangent])
    return np.array(values, dtype='f4')


def test_cubic_spline_key_count():
    """Spline channels are resampled at floor(duration * rate) + 1 keys"""
    points = VECTORS
    tangents = np.ones_like(points)
    values = _spline_values(points, tangents, tangents)

    keys = sample_cubic_spline_channel(values, TIMESTAMPS, AnimationTarget.TRANSLATION, 30.0, 2.0)

    assert len(keys) == 61
    assert keys[0].time == 0.0
    assert keys[1].time == pytest.approx(1.0 / 30.0)
    assert keys[-1].time == pytest.approx(2.0)


def test_cubic_spline_interval_endpoints():
    """Sampling at interval boundaries reproduces the key values"""
    points = np.array([[0.0, 0.0, 0.0], [1.0, 2.0, 3.0]], dtype='f4')
    in_tangents = np.array([[5.0, 5.0, 5.0], [-3.0, 1.0, 2.0]], dtype='f4')
    out_tangents = np.array([[4.0, -2.0, 1.0], [7.0, 7.0, 7.0]], dtype='f4')
    values = _spline_values(points, in_tangents, out_tangents)
    timestamps = np.array([0.0, 1.0], dtype='f4')

    keys = sample_cubic_spline_channel(values, timestamps, AnimationTarget.TRANSLATION, 1.0, 1.0)

    assert len(keys) == 2
    assert np.allclose(np.asarray(keys[0].value), points[0])
    assert np.allclose(np.asarray(keys[1].value), points[1])


def test_cubic_spline_follows_later_intervals():
    """Samples past the first key use the interval that contains them"""
    points = VECTORS
    zero = np.zeros_like(points)
    values = _spline_values(points, zero, zero)

    keys = sample_cubic_spline_channel(values, TIMESTAMPS, AnimationTarget.SCALE, 4.0, 2.0)

    # t = 0.5 and t = 2.0 fall on source keys
    assert np.allclose(np.asarray(keys[2].value), points[1])
    assert np.allclose(np.asarray(keys[-1].value), points[3])


def test_cubic_spline_rotations_are_normalized():
    """Interpolated rotations have unit length"""
    points = np.array([
        [0.0, 0.0, 0.0, 1.0],
        [0.0, 0.7071068, 0.0, 0.7071068],
        [0.0, 1.0, 0.0, 0.0],
    ], dtype='f4')
    tangents = np.full_like(points, 0.5)
    values = _spline_values(points, tangents, -tangents)
    timestamps = np.array([0.0, 1.0, 2.0], dtype='f4')

    keys = sample_cubic_spline_channel(values, timestamps, AnimationTarget.ROTATION, 24.0, 2.0)

    assert len(keys) == 49
    for key in keys:
        assert isinstance(key.value, Quaternion)
        assert np.isclose(np.linalg.norm(np.asarray(key.value)), 1.0, atol=1e-6)


def test_cubic_spline_rejects_count_mismatch():
    """Spline outputs must hold three values per input key"""
    with pytest.raises(BufferLayoutError):
        sample_cubic_spline_channel(VECTORS, TIMESTAMPS, AnimationTarget.TRANSLATION, 30.0, 2.0)


def test_sample_channel_dispatch():
    """Dispatch picks the sampler matching the interpolation"""
    step = sample_channel(InterpolationType.STEP, VECTORS, TIMESTAMPS,
                          AnimationTarget.TRANSLATION, 30.0, 2.0)
    linear = sample_channel(InterpolationType.LINEAR, VECTORS, TIMESTAMPS,
                            AnimationTarget.TRANSLATION, 30.0, 2.0)

    assert len(step) == 7
    assert len(linear) == 4


def test_samplers_share_one_signature():
    """Every sampler in the table takes values, timestamps, target, rate and duration"""
    points = VECTORS[:2]
    zero = np.zeros_like(points)
    spline_values = _spline_values(points, zero, zero)
    timestamps = TIMESTAMPS[:2]

    counts = {}
    for interpolation, sampler in SAMPLERS.items():
        values = spline_values if interpolation == InterpolationType.CUBICSPLINE else points
        counts[interpolation] = len(sampler(values, timestamps, AnimationTarget.SCALE, 4.0, 0.5))

    assert counts == {
        InterpolationType.LINEAR: 2,
        InterpolationType.STEP: 3,
        InterpolationType.CUBICSPLINE: 3,
    }
    cubic = sample_channel(InterpolationType.CUBICSPLINE, spline_values, timestamps,
                           AnimationTarget.SCALE, 4.0, 0.5)
    assert np.allclose(np.asarray(cubic[-1].value), points[1])
