"""
Channel Samplers

Convert glTF sampler output into keyframes that are interpolated linearly
between adjacent keys.
"""

import math
from typing import List, Sequence

import numpy as np
from pyrr import Vector3, Quaternion

from ..config.settings import STEP_EPSILON
from ..errors import BufferLayoutError
from .animation import AnimationTarget, InterpolationType, Keyframe
from .hermite import sample_hermite_spline


def _make_value(target: AnimationTarget, value):
    """Wrap raw components in the pyrr type matching the target property."""
    if target == AnimationTarget.ROTATION:
        # glTF and pyrr both store quaternions as (x, y, z, w)
        return Quaternion(value)
    return Vector3(value)


def _check_count(values: np.ndarray, expected: int, interpolation: InterpolationType):
    if len(values) != expected:
        raise BufferLayoutError(
            f"{interpolation.value} sampler expects {expected} output values, got {len(values)}."
        )


def sample_linear_channel(values: np.ndarray, timestamps: Sequence[float],
                          target: AnimationTarget, sampling_rate: float = 0.0,
                          duration: float = 0.0) -> List[Keyframe]:
    """
    Sample a LINEAR channel.

    Keys map one to one, so everything is copied over. Sampling rate and
    duration are unused.
    """
    _check_count(values, len(timestamps), InterpolationType.LINEAR)

    return [
        Keyframe(float(timestamps[i]), _make_value(target, values[i]))
        for i in range(len(timestamps))
    ]


def sample_step_channel(values: np.ndarray, timestamps: Sequence[float],
                        target: AnimationTarget, sampling_rate: float = 0.0,
                        duration: float = 0.0) -> List[Keyframe]:
    """
    Sample a STEP channel.

    Each step becomes two keys: the value at its timestamp, and the same
    value again just before the next timestamp. The last step is a single
    key, giving 2N - 1 keys. Sampling rate and duration are unused.
    """
    _check_count(values, len(timestamps), InterpolationType.STEP)

    keyframes: List[Keyframe] = []
    count = len(timestamps)
    for i in range(count):
        keyframes.append(Keyframe(float(timestamps[i]), _make_value(target, values[i])))

        if i < count - 1:
            held_time = float(timestamps[i + 1]) - STEP_EPSILON
            keyframes.append(Keyframe(held_time, _make_value(target, values[i])))

    return keyframes


def sample_cubic_spline_channel(values: np.ndarray, timestamps: Sequence[float],
                                target: AnimationTarget, sampling_rate: float,
                                duration: float) -> List[Keyframe]:
    """
    Resample a CUBICSPLINE channel at a fixed rate.

    Output values are stored as (in-tangent, value, out-tangent) triplets.
    Keys are emitted every 1 / sampling_rate seconds over [0, duration],
    floor(duration * sampling_rate) + 1 keys in total. Rotations are
    renormalized after interpolation.

    Args:
        values: Output accessor data, 3 entries per input timestamp
        timestamps: Input accessor data
        target: Animated property
        sampling_rate: Samples per second
        duration: Channel duration in seconds

    Returns:
        Resampled keyframes
    """
    num_keys = len(timestamps)
    _check_count(values, num_keys * 3, InterpolationType.CUBICSPLINE)
    if num_keys == 0:
        return []

    values = np.asarray(values, dtype=np.float64)
    times = [float(t) for t in timestamps]

    keyframes: List[Keyframe] = []
    current_key = 0
    for i in range(int(math.floor(duration * sampling_rate)) + 1):
        time = min(i / sampling_rate, duration)

        if num_keys == 1:
            value = values[1]
        else:
            # Find the interval [t0, t1] holding time, clamped to the last one.
            # Advances on the next key time, so later intervals are reached.
            while current_key < num_keys - 2 and times[current_key + 1] < time:
                current_key += 1

            current_time = times[current_key]
            next_time = times[current_key + 1]
            span = next_time - current_time

            t = (time - current_time) / span if span > 0.0 else 0.0
            t = min(max(t, 0.0), 1.0)

            p0 = values[current_key * 3 + 1]
            m0 = values[current_key * 3 + 2] * span
            p1 = values[(current_key + 1) * 3 + 1]
            m1 = values[(current_key + 1) * 3] * span
            value = sample_hermite_spline(t, p0, m0, p1, m1)

        if target == AnimationTarget.ROTATION:
            length = np.linalg.norm(value)
            if length > 0.0:
                value = value / length

        keyframes.append(Keyframe(time, _make_value(target, value)))

    return keyframes


SAMPLERS = {
    InterpolationType.LINEAR: sample_linear_channel,
    InterpolationType.STEP: sample_step_channel,
    InterpolationType.CUBICSPLINE: sample_cubic_spline_channel,
}


def sample_channel(interpolation: InterpolationType, values: np.ndarray,
                   timestamps: Sequence[float], target: AnimationTarget,
                   sampling_rate: float, duration: float) -> List[Keyframe]:
    """Sample a channel with the sampler matching its interpolation."""
    return SAMPLERS[interpolation](values, timestamps, target, sampling_rate, duration)
