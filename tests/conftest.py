"""Shared helpers for building in-memory glTF documents."""

import numpy as np
import pygltflib
import pytest

FLOAT = 5126

ACCESSOR_TYPES = {1: "SCALAR", 2: "VEC2", 3: "VEC3", 4: "VEC4", 16: "MAT4"}


class GltfBuilder:
    """Builds a GLTF2 model backed by a single embedded float32 buffer."""

    def __init__(self):
        self.gltf = pygltflib.GLTF2()
        self.blob = bytearray()

    def add_node(self, name=None, children=None, **kwargs) -> int:
        self.gltf.nodes.append(pygltflib.Node(name=name, children=list(children or []), **kwargs))
        return len(self.gltf.nodes) - 1

    def add_scene(self, nodes, name=None) -> int:
        self.gltf.scenes.append(pygltflib.Scene(name=name, nodes=list(nodes)))
        return len(self.gltf.scenes) - 1

    def add_skin(self, joints, skeleton=None) -> int:
        self.gltf.skins.append(pygltflib.Skin(joints=list(joints), skeleton=skeleton))
        return len(self.gltf.skins) - 1

    def add_accessor(self, data, components=None, with_max=True) -> int:
        array = np.asarray(data, dtype='<f4')
        if components is None:
            components = 1 if array.ndim == 1 else array.shape[1]

        offset = len(self.blob)
        self.blob.extend(array.tobytes())
        self.gltf.bufferViews.append(
            pygltflib.BufferView(buffer=0, byteOffset=offset, byteLength=array.nbytes)
        )

        accessor = pygltflib.Accessor(
            bufferView=len(self.gltf.bufferViews) - 1,
            byteOffset=0,
            componentType=FLOAT,
            count=array.size // components,
            type=ACCESSOR_TYPES[components],
        )
        if with_max and components == 1 and array.size:
            accessor.max = [float(array.max())]
            accessor.min = [float(array.min())]
        self.gltf.accessors.append(accessor)
        return len(self.gltf.accessors) - 1

    def add_animation(self, name, channels) -> int:
        """
        Add an animation.

        Args:
            channels: (node, path, times, values, interpolation) tuples
        """
        animation = pygltflib.Animation(name=name)
        for node, path, times, values, interpolation in channels:
            sampler = pygltflib.AnimationSampler(
                input=self.add_accessor(times),
                output=self.add_accessor(values),
                interpolation=interpolation,
            )
            animation.samplers.append(sampler)
            animation.channels.append(pygltflib.AnimationChannel(
                sampler=len(animation.samplers) - 1,
                target=pygltflib.AnimationChannelTarget(node=node, path=path),
            ))
        self.gltf.animations.append(animation)
        return len(self.gltf.animations) - 1

    def build(self) -> pygltflib.GLTF2:
        self.gltf.buffers = [pygltflib.Buffer(byteLength=len(self.blob))]
        self.gltf.set_binary_blob(bytes(self.blob))
        return self.gltf


@pytest.fixture
def builder():
    return GltfBuilder()
