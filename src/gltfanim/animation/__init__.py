"""
Animation System

Skeleton and keyframe track data produced by the glTF importer.
"""

from .skeleton import Joint, Skeleton
from .animation import Keyframe, JointTrack, Animation, AnimationTarget, InterpolationType
from .hermite import sample_hermite_spline
from .samplers import (
    sample_linear_channel, sample_step_channel, sample_cubic_spline_channel, sample_channel,
    SAMPLERS,
)

__all__ = [
    'Joint',
    'Skeleton',
    'Keyframe',
    'JointTrack',
    'Animation',
    'AnimationTarget',
    'InterpolationType',
    'sample_hermite_spline',
    'sample_linear_channel',
    'sample_step_channel',
    'sample_cubic_spline_channel',
    'sample_channel',
    'SAMPLERS',
]
