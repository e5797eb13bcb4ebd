"""
Skin

Finds skeleton roots from glTF skins.
"""

from typing import Dict, List, Optional, Set

import pygltflib


def find_skin_root(gltf: pygltflib.GLTF2, skin: pygltflib.Skin) -> Optional[int]:
    """
    Find the node index of a skin's root joint.

    Uses ``skin.skeleton`` when set. Otherwise parents are rebuilt from the
    joints' children and followed up from the first joint.

    Args:
        gltf: GLTF data
        skin: Skin to inspect

    Returns:
        Root node index, or None if the skin has no joints
    """
    if not skin.joints:
        return None

    if skin.skeleton is not None:
        return skin.skeleton

    parents: Dict[int, int] = {}
    for joint_idx in skin.joints:
        for child_idx in gltf.nodes[joint_idx].children or []:
            parents[child_idx] = joint_idx

    root = skin.joints[0]
    while root in parents:
        root = parents[root]

    return root


def skins_for_scene(gltf: pygltflib.GLTF2, scene: pygltflib.Scene) -> List[pygltflib.Skin]:
    """
    Get the skins used by a scene.

    A skin belongs to the scene when its first joint is reachable from the
    scene's nodes.
    """
    found: Set[int] = set()
    open_nodes = list(scene.nodes or [])
    while open_nodes:
        node_idx = open_nodes.pop()
        if node_idx in found:
            continue
        found.add(node_idx)
        open_nodes.extend(gltf.nodes[node_idx].children or [])

    return [skin for skin in gltf.skins or [] if skin.joints and skin.joints[0] in found]
