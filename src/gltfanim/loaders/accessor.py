"""
Typed read-only views over glTF accessor data.
"""

from typing import Union

import numpy as np
import pygltflib

from ..errors import BufferLayoutError

COMPONENT_TYPE_SIZES = {
    5120: 1,  # BYTE
    5121: 1,  # UNSIGNED_BYTE
    5122: 2,  # SHORT
    5123: 2,  # UNSIGNED_SHORT
    5125: 4,  # UNSIGNED_INT
    5126: 4,  # FLOAT
}

TYPE_COMPONENT_COUNTS = {
    'SCALAR': 1,
    'VEC2': 2,
    'VEC3': 3,
    'VEC4': 4,
    'MAT2': 4,
    'MAT3': 9,
    'MAT4': 16,
}

# Byte sizes of the float32 value types read from animation accessors
FLOAT_SIZE = 4
VECTOR3_SIZE = 3 * FLOAT_SIZE
QUATERNION_SIZE = 4 * FLOAT_SIZE


def element_size(accessor: pygltflib.Accessor) -> int:
    """Size in bytes of one accessor element."""
    try:
        component_size = COMPONENT_TYPE_SIZES[accessor.componentType]
        component_count = TYPE_COMPONENT_COUNTS[accessor.type]
    except KeyError:
        raise BufferLayoutError(
            f"Unsupported accessor layout: componentType={accessor.componentType}, type={accessor.type}"
        ) from None
    return component_size * component_count


def get_buffer_data(gltf: pygltflib.GLTF2, buffer: pygltflib.Buffer) -> bytes:
    """
    Get the raw bytes of a buffer.

    Args:
        gltf: GLTF data
        buffer: Buffer to read

    Returns:
        Buffer contents
    """
    if buffer.uri:
        # External file or data URI
        data = gltf.get_data_from_buffer_uri(buffer.uri)
    else:
        # Embedded buffer (GLB)
        data = gltf.binary_blob()

    if data is None:
        raise BufferLayoutError("Buffer has no data.")
    return data


def buffer_view(gltf: pygltflib.GLTF2, accessor: Union[int, pygltflib.Accessor],
                expected_element_size: int) -> np.ndarray:
    """
    Get a typed view over an accessor's float data.

    The accessor's element size must equal ``expected_element_size``, the
    size of the float32 value type the caller wants to read. Data is never
    reinterpreted to fit.

    Args:
        gltf: GLTF data
        accessor: Accessor or accessor index
        expected_element_size: Byte size of the requested value type

    Returns:
        Read-only float32 array, shape (count,) for scalars and
        (count, components) otherwise

    Raises:
        BufferLayoutError: If the layout does not match or the buffer is too small
    """
    if isinstance(accessor, int):
        accessor = gltf.accessors[accessor]

    size = element_size(accessor)
    if size != expected_element_size:
        raise BufferLayoutError(
            f"Invalid buffer view access. Expected element size '{expected_element_size}' "
            f"got {size} instead."
        )

    if accessor.bufferView is None:
        raise BufferLayoutError("Accessor has no buffer view.")

    view = gltf.bufferViews[accessor.bufferView]
    data = get_buffer_data(gltf, gltf.buffers[view.buffer])

    # Calculate offset and stride
    offset = (view.byteOffset or 0) + (accessor.byteOffset or 0)
    stride = view.byteStride or size
    components = expected_element_size // FLOAT_SIZE
    count = accessor.count or 0

    shape = (count,) if components == 1 else (count, components)
    strides = (stride,) if components == 1 else (stride, FLOAT_SIZE)

    if count == 0:
        return np.zeros(shape, dtype='<f4')

    end_offset = offset + (count - 1) * stride + size
    if end_offset > len(data):
        raise BufferLayoutError(
            f"Accessor reads {end_offset} bytes from a {len(data)} byte buffer."
        )

    array = np.ndarray(shape, dtype='<f4', buffer=data, offset=offset, strides=strides)
    array.flags.writeable = False
    return array
