"""
Import Configuration Settings

All configuration constants for the glTF skeleton/animation importer.
Modify these values to change importer behavior.
"""

# ============================================================================
# Animation Sampling
# ============================================================================

# glTF carries no scene frame rate, so a requested rate of 0 ("automatic")
# falls back to this value (Hz).
DEFAULT_SAMPLING_RATE = 30.0

# Time offset of the held key emitted before each STEP keyframe change
STEP_EPSILON = 1e-6

# ============================================================================
# Runtime Limits
# ============================================================================

MAX_JOINTS = 1024        # Maximum number of joints in an output skeleton
MAX_TRACKS = MAX_JOINTS  # One track per joint

# ============================================================================
# Entity Naming
# ============================================================================

# Prefixes used to synthesize names for unnamed glTF entities
SCENE_NAME_PREFIX = "scene_"
NODE_NAME_PREFIX = "node_"
ANIMATION_NAME_PREFIX = "animation_"

# ============================================================================
# Bind Pose Defaults
# ============================================================================

# Used when a glTF node omits a TRS component (quaternion is x, y, z, w)
DEFAULT_TRANSLATION = (0.0, 0.0, 0.0)
DEFAULT_ROTATION = (0.0, 0.0, 0.0, 1.0)
DEFAULT_SCALE = (1.0, 1.0, 1.0)
