"""
Animation

Per-joint keyframe tracks produced from glTF animation channels.
"""

from typing import List
from enum import Enum

from ..config.settings import MAX_TRACKS
from ..errors import InvalidInterpolationError, InvalidTargetError


class InterpolationType(Enum):
    """Animation sampler interpolation types."""
    LINEAR = "LINEAR"
    STEP = "STEP"
    CUBICSPLINE = "CUBICSPLINE"

    @classmethod
    def parse(cls, value: str) -> 'InterpolationType':
        """
        Parse a glTF sampler interpolation string.

        Raises:
            InvalidInterpolationError: If the string is empty or unknown
        """
        if not value:
            raise InvalidInterpolationError("Invalid sampler interpolation.")
        try:
            return cls(value)
        except ValueError:
            raise InvalidInterpolationError(
                f"Invalid or unknown interpolation type '{value}'."
            ) from None


class AnimationTarget(Enum):
    """Animated joint properties."""
    TRANSLATION = "translation"
    ROTATION = "rotation"
    SCALE = "scale"

    @classmethod
    def parse(cls, path: str) -> 'AnimationTarget':
        """
        Parse a glTF channel target path.

        Raises:
            InvalidTargetError: If the path is not translation, rotation or scale
        """
        try:
            return cls(path)
        except ValueError:
            raise InvalidTargetError(
                f"Invalid or unknown channel target path '{path}'."
            ) from None


class Keyframe:
    """
    Single keyframe in a track.

    Stores time and value for a specific property.
    """

    def __init__(self, time: float, value):
        """
        Initialize keyframe.

        Args:
            time: Time in seconds
            value: Value at this time (Vector3 for T/S, Quaternion for R)
        """
        self.time = time
        self.value = value

    def __repr__(self):
        return f"Keyframe(t={self.time:.3f}, v={self.value})"


class JointTrack:
    """
    Keyframes for one joint.

    Translation, rotation and scale are kept apart because glTF channels
    animate them independently, with their own timings.
    """

    def __init__(self):
        self.translations: List[Keyframe] = []
        self.rotations: List[Keyframe] = []
        self.scales: List[Keyframe] = []

    def keys(self, target: AnimationTarget) -> List[Keyframe]:
        """Get the keyframe list for a target property."""
        if target == AnimationTarget.TRANSLATION:
            return self.translations
        if target == AnimationTarget.ROTATION:
            return self.rotations
        return self.scales

    def __repr__(self):
        return (f"JointTrack(translations={len(self.translations)}, "
                f"rotations={len(self.rotations)}, scales={len(self.scales)})")


class Animation:
    """
    Complete animation with one track per skeleton joint.

    Tracks are parallel to :meth:`Skeleton.joint_names`.
    """

    def __init__(self, name: str):
        """
        Initialize animation.

        Args:
            name: Animation name
        """
        self.name = name
        self.duration: float = 0.0  # Longest channel duration
        self.tracks: List[JointTrack] = []

    @property
    def num_tracks(self) -> int:
        return len(self.tracks)

    def validate(self) -> bool:
        """
        Check that the animation can be consumed at runtime.

        Duration must be positive, track count within limits, and every
        track's keys strictly increasing inside [0, duration].
        """
        if self.duration <= 0.0:
            return False
        if len(self.tracks) > MAX_TRACKS:
            return False

        for track in self.tracks:
            for keys in (track.translations, track.rotations, track.scales):
                previous_time = -1.0
                for key in keys:
                    if key.time < 0.0 or key.time > self.duration:
                        return False
                    if key.time <= previous_time:
                        return False
                    previous_time = key.time
        return True

    def __repr__(self):
        return f"Animation(name='{self.name}', duration={self.duration:.2f}s, tracks={len(self.tracks)})"
