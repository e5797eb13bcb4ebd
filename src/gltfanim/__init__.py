"""
gltfanim - glTF skeleton and animation importer

Converts glTF scene graphs loaded with pygltflib into skeleton hierarchies
and per-joint translation/rotation/scale keyframe tracks.
"""

# Configuration
from .config.settings import *

# Data model
from .animation import (
    Joint, Skeleton, Keyframe, JointTrack, Animation, AnimationTarget, InterpolationType
)

# Errors
from .errors import (
    GltfImportError,
    BufferLayoutError,
    SceneError,
    InvalidInterpolationError,
    InvalidTargetError,
    NodeTransformError,
    ValidationError,
    UnsupportedFeatureError,
)

# Loaders
from .loaders import GltfImporter, NodeTypes

__version__ = "0.1.0"
__all__ = [
    # Config (exported via *)
    # Data model
    "Joint",
    "Skeleton",
    "Keyframe",
    "JointTrack",
    "Animation",
    "AnimationTarget",
    "InterpolationType",
    # Errors
    "GltfImportError",
    "BufferLayoutError",
    "SceneError",
    "InvalidInterpolationError",
    "InvalidTargetError",
    "NodeTransformError",
    "ValidationError",
    "UnsupportedFeatureError",
    # Loaders
    "GltfImporter",
    "NodeTypes",
]
