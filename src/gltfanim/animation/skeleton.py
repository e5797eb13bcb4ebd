"""
Skeleton

Represents a hierarchical skeleton structure with joints/bones.
"""

from typing import Iterator, List, Optional, Set
from pyrr import Vector3, Quaternion

from ..config.settings import MAX_JOINTS, DEFAULT_TRANSLATION, DEFAULT_ROTATION, DEFAULT_SCALE


class Joint:
    """
    Represents a single joint (bone) in a skeleton hierarchy.

    Each joint has:
    - A name, unique within its skeleton
    - Bind pose transform (relative to parent) as translation/rotation/scale
    - Child joints, in source order
    """

    def __init__(self, name: str):
        """
        Initialize a joint.

        Args:
            name: Joint name
        """
        self.name = name
        self.children: List['Joint'] = []

        # Bind pose, rotation is (x, y, z, w)
        self.translation = Vector3(DEFAULT_TRANSLATION)
        self.rotation = Quaternion(DEFAULT_ROTATION)
        self.scale = Vector3(DEFAULT_SCALE)

    def add_child(self, child: 'Joint'):
        """Add a child joint to this joint's hierarchy."""
        self.children.append(child)

    def __repr__(self):
        return f"Joint(name='{self.name}', children={len(self.children)})"


class Skeleton:
    """
    Hierarchical skeleton structure.

    Owns the root joints; every other joint is reachable through
    ``children``. Joints are enumerated depth-first, and that order is the
    track order of animations imported for this skeleton.
    """

    def __init__(self, name: str = "Skeleton"):
        """
        Initialize skeleton.

        Args:
            name: Skeleton name for debugging
        """
        self.name = name
        self.roots: List[Joint] = []

    def add_root(self, joint: Joint):
        """Add a root joint."""
        self.roots.append(joint)

    def joints(self) -> Iterator[Joint]:
        """Iterate all joints depth-first, parents before children."""
        stack = list(reversed(self.roots))
        while stack:
            joint = stack.pop()
            yield joint
            stack.extend(reversed(joint.children))

    def joint_names(self) -> List[str]:
        return [joint.name for joint in self.joints()]

    @property
    def num_joints(self) -> int:
        return sum(1 for _ in self.joints())

    def get_joint(self, name: str) -> Optional[Joint]:
        """
        Find a joint by name.

        Args:
            name: Joint name

        Returns:
            Joint if found, None otherwise
        """
        for joint in self.joints():
            if joint.name == name:
                return joint
        return None

    def validate(self) -> bool:
        """
        Check the hierarchy is a tree with unique joint names.

        Returns:
            True if valid
        """
        names: Set[str] = set()
        visited: Set[int] = set()
        stack = list(self.roots)
        while stack:
            joint = stack.pop()
            # A joint reached twice means shared or cyclic children
            if id(joint) in visited:
                return False
            visited.add(id(joint))

            if not joint.name or joint.name in names:
                return False
            names.add(joint.name)

            if len(visited) > MAX_JOINTS:
                return False
            stack.extend(joint.children)
        return True

    def __repr__(self):
        return f"Skeleton(name='{self.name}', joints={self.num_joints}, roots={len(self.roots)})"
