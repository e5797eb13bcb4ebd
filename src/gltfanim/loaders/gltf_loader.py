"""
GLTF/GLB Importer

Converts glTF scene graphs into skeletons and per-joint animation tracks.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np
import pygltflib
from pyrr import Vector3, Quaternion

from ..animation import (
    Skeleton, Joint, Animation, JointTrack, Keyframe,
    AnimationTarget, InterpolationType, sample_channel
)
from ..config.settings import (
    DEFAULT_SAMPLING_RATE,
    SCENE_NAME_PREFIX, NODE_NAME_PREFIX, ANIMATION_NAME_PREFIX,
    DEFAULT_TRANSLATION, DEFAULT_ROTATION, DEFAULT_SCALE,
)
from ..errors import (
    GltfImportError, SceneError, NodeTransformError, ValidationError, UnsupportedFeatureError
)
from .accessor import buffer_view, FLOAT_SIZE, VECTOR3_SIZE, QUATERNION_SIZE
from .naming import fixup_names
from .skin import find_skin_root, skins_for_scene

logger = logging.getLogger(__name__)

TARGET_ELEMENT_SIZES = {
    AnimationTarget.TRANSLATION: VECTOR3_SIZE,
    AnimationTarget.ROTATION: QUATERNION_SIZE,
    AnimationTarget.SCALE: VECTOR3_SIZE,
}


@dataclass
class NodeTypes:
    """
    Node types requested for skeleton import.

    glTF nodes carry no type information, so every node reachable from the
    skeleton roots is imported whatever is requested here.
    """

    skeleton: bool = True
    marker: bool = False
    camera: bool = False
    geometry: bool = False
    light: bool = False
    null: bool = False


def bind_pose(node: pygltflib.Node) -> Tuple[Vector3, Quaternion, Vector3]:
    """
    Get a node's TRS values, defaulting any component it omits.

    Returns:
        (translation, rotation as x/y/z/w quaternion, scale)
    """
    translation = Vector3(node.translation if node.translation is not None else DEFAULT_TRANSLATION)
    rotation = Quaternion(node.rotation if node.rotation is not None else DEFAULT_ROTATION)
    scale = Vector3(node.scale if node.scale is not None else DEFAULT_SCALE)
    return translation, rotation, scale


def node_transform(node: pygltflib.Node) -> Tuple[Vector3, Quaternion, Vector3]:
    """
    Get the bind pose transform of a joint node.

    Raises:
        NodeTransformError: If the node uses a matrix. glTF forbids
            matrices on animation targets, so joints must use TRS.
    """
    if node.matrix:
        raise NodeTransformError(
            f'Node "{node.name}" transformation matrix is not empty. This is disallowed '
            f'by glTF as this node is an animation target.'
        )
    return bind_pose(node)


class GltfImporter:
    """
    Imports skeletons and animations from a loaded glTF document.

    Scene, node and animation names are made unique on construction; joint
    and track lookups rely on those names.
    """

    def __init__(self, gltf: pygltflib.GLTF2):
        """
        Initialize importer.

        Args:
            gltf: Parsed glTF document. Entity names are rewritten in place.
        """
        self.gltf = gltf
        self._sampling_rate_warned = False

        fixup_names(gltf.scenes or [], "Scene", SCENE_NAME_PREFIX)
        fixup_names(gltf.nodes or [], "Node", NODE_NAME_PREFIX)
        fixup_names(gltf.animations or [], "Animation", ANIMATION_NAME_PREFIX)

        self._node_by_name: Dict[str, pygltflib.Node] = {
            node.name: node for node in gltf.nodes or []
        }

    @classmethod
    def load(cls, filepath: str) -> 'GltfImporter':
        """
        Load a GLTF or GLB file.

        Args:
            filepath: Path to .gltf or .glb file

        Returns:
            Importer for the loaded document
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"glTF file not found: {filepath}")

        ext = filepath.suffix.lower()
        if ext == ".glb":
            gltf = pygltflib.GLTF2.load_binary(str(filepath))
        else:
            if ext != ".gltf":
                logger.info("Unknown file extension '%s', assuming a JSON-formatted gltf.", ext)
            gltf = pygltflib.GLTF2.load_json(str(filepath))

        if gltf is None:
            raise GltfImportError(f"Failed to parse glTF file: {filepath}")

        logger.info("glTF parsed successfully.")
        return cls(gltf)

    # ------------------------------------------------------------------
    # Skeleton
    # ------------------------------------------------------------------

    def import_skeleton(self, types: Optional[NodeTypes] = None) -> Skeleton:
        """
        Build the skeleton of the default scene.

        Roots are the root joints of the scene's skins or, when the scene
        has no skin, all of the scene's top level nodes.

        Args:
            types: Requested node types (see :class:`NodeTypes`)

        Returns:
            Skeleton with joint hierarchy
        """
        gltf = self.gltf
        if not gltf.scenes:
            raise SceneError("No scenes found.")

        # glTF allows documents without a default scene, take the first one then
        scene_idx = gltf.scene if gltf.scene is not None else 0
        if not 0 <= scene_idx < len(gltf.scenes):
            raise SceneError(f"Default scene #{scene_idx} does not exist.")

        scene = gltf.scenes[scene_idx]
        logger.debug('Importing from default scene #%d with name "%s".', scene_idx, scene.name)

        if not scene.nodes:
            raise SceneError("Scene has no node.")

        skins = skins_for_scene(gltf, scene)
        if not skins:
            logger.info("No skin exists in the scene, the whole scene graph will be "
                        "considered as a skeleton.")
            roots = set(scene.nodes)
        else:
            if len(skins) > 1:
                logger.info("Multiple skins exist in the scene, they will all be exported "
                            "to a single skeleton.")
            roots = set()
            for skin in skins:
                root = find_skin_root(gltf, skin)
                if root is not None:
                    roots.add(root)

        if not roots:
            raise SceneError("No skeleton root found.")

        skeleton = Skeleton(name=scene.name)
        for root_idx in sorted(roots):
            skeleton.add_root(self._import_node(root_idx))

        if not skeleton.validate():
            raise ValidationError("Output skeleton failed validation. This is likely an "
                                  "implementation issue.")

        logger.info("Imported skeleton with %d joints", skeleton.num_joints)
        return skeleton

    def _import_node(self, node_idx: int) -> Joint:
        """Recursively import a node and its children."""
        node = self.gltf.nodes[node_idx]

        joint = Joint(node.name)
        joint.translation, joint.rotation, joint.scale = node_transform(node)

        for child_idx in node.children or []:
            joint.add_child(self._import_node(child_idx))

        return joint

    # ------------------------------------------------------------------
    # Animations
    # ------------------------------------------------------------------

    def get_animation_names(self) -> List[str]:
        """Get the names of all animations in the document."""
        return [animation.name for animation in self.gltf.animations or []]

    def import_animation(self, animation_name: str, skeleton: Skeleton,
                         sampling_rate: float = 0.0) -> Animation:
        """
        Import an animation as one track per skeleton joint.

        Args:
            animation_name: Name of the glTF animation
            skeleton: Skeleton previously produced by :meth:`import_skeleton`
            sampling_rate: Rate used to resample cubic spline channels,
                0 for automatic

        Returns:
            Animation whose tracks follow ``skeleton.joint_names()``
        """
        if sampling_rate == 0.0:
            sampling_rate = DEFAULT_SAMPLING_RATE

            if not self._sampling_rate_warned:
                logger.info("The animation sampling rate is set to 0 (automatic) but glTF does "
                            "not carry scene frame rate information. Assuming a sampling rate "
                            "of %shz.", sampling_rate)
                self._sampling_rate_warned = True

        gltf_anim = next(
            (anim for anim in self.gltf.animations or [] if anim.name == animation_name), None
        )
        if gltf_anim is None:
            raise SceneError(f"Animation '{animation_name}' not found.")

        # Duration is the one of the longest sampled channel
        animation = Animation(gltf_anim.name)

        # glTF channels each target one node property, tracks are per joint
        channels_per_joint: Dict[str, List[pygltflib.AnimationChannel]] = {}
        for channel in gltf_anim.channels:
            if channel.target is None or channel.target.node is None:
                continue
            target_node = self.gltf.nodes[channel.target.node]
            channels_per_joint.setdefault(target_node.name, []).append(channel)

        for joint_name in skeleton.joint_names():
            node = self._node_by_name.get(joint_name)
            if node is None:
                raise SceneError(f"Joint '{joint_name}' has no matching glTF node.")

            track = JointTrack()
            for channel in channels_per_joint.get(joint_name, []):
                sampler = gltf_anim.samplers[channel.sampler]
                self._sample_animation_channel(node, sampler, channel.target.path,
                                               sampling_rate, animation, track)

            # Joints not animated by this animation keep their bind pose
            translation, rotation, scale = bind_pose(node)
            if not track.translations:
                track.translations.append(Keyframe(0.0, translation))
            if not track.rotations:
                track.rotations.append(Keyframe(0.0, rotation))
            if not track.scales:
                track.scales.append(Keyframe(0.0, scale))

            animation.tracks.append(track)

        logger.info("Processed animation '%s' (tracks: %d, duration: %ss).",
                    animation.name, animation.num_tracks, animation.duration)

        if not animation.validate():
            raise ValidationError(f"Animation '{animation.name}' failed validation.")

        return animation

    def _sample_animation_channel(self, node: pygltflib.Node,
                                  sampler: pygltflib.AnimationSampler, target_path: str,
                                  sampling_rate: float, animation: Animation,
                                  track: JointTrack):
        """Sample one channel into a joint track, extending the animation duration."""
        interpolation = InterpolationType.parse(sampler.interpolation)
        target = AnimationTarget.parse(target_path)

        if node.matrix:
            raise NodeTransformError(
                f'Node "{node.name}" is an animation target but uses a transformation matrix.'
            )

        input_accessor = self.gltf.accessors[sampler.input]
        timestamps = buffer_view(self.gltf, input_accessor, FLOAT_SIZE)
        values = buffer_view(self.gltf, sampler.output, TARGET_ELEMENT_SIZES[target])

        duration = self._channel_duration(input_accessor, timestamps)
        animation.duration = max(animation.duration, duration)

        track.keys(target).extend(
            sample_channel(interpolation, values, timestamps, target, sampling_rate, duration)
        )

    @staticmethod
    def _channel_duration(input_accessor: pygltflib.Accessor, timestamps: np.ndarray) -> float:
        """
        Duration of a channel, from the input accessor's max value.

        Kept at float32 precision, the precision of the timestamps.
        """
        if input_accessor.max:
            return float(np.float32(input_accessor.max[0]))

        logger.debug("Animation input accessor has no max value, using its last timestamp.")
        return float(timestamps[-1]) if len(timestamps) else 0.0

    # ------------------------------------------------------------------
    # User-defined tracks
    # ------------------------------------------------------------------

    def get_node_properties(self, node_name: str) -> list:
        """glTF nodes expose no user-defined properties."""
        return []

    def import_track(self, animation_name: str, node_name: str, track_name: str,
                     track_type: str, sampling_rate: float = 0.0):
        """
        Import a user-defined node property track.

        Raises:
            UnsupportedFeatureError: Always, glTF has no user-defined tracks
        """
        raise UnsupportedFeatureError(
            f"Cannot import track '{track_name}' of node '{node_name}': "
            f"glTF does not support user-defined tracks."
        )
