"""Loader utilities for glTF skeletons and animations."""

from .accessor import buffer_view, element_size
from .naming import fixup_names
from .skin import find_skin_root, skins_for_scene
from .gltf_loader import GltfImporter, NodeTypes

__all__ = [
    'buffer_view',
    'element_size',
    'fixup_names',
    'find_skin_root',
    'skins_for_scene',
    'GltfImporter',
    'NodeTypes',
]
