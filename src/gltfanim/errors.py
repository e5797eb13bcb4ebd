"""Exceptions raised while converting glTF scenes to skeletons and animations."""


class GltfImportError(ValueError):
    """The glTF document cannot be converted as-is."""


class BufferLayoutError(GltfImportError):
    """An accessor does not describe the data layout the caller expects."""


class SceneError(GltfImportError):
    """The scene graph is missing something the import needs."""


class InvalidInterpolationError(GltfImportError):
    """An animation sampler declares an empty or unknown interpolation."""


class InvalidTargetError(GltfImportError):
    """An animation channel targets an unsupported node property."""


class NodeTransformError(GltfImportError):
    """A joint node uses a matrix where separate TRS values are required."""


class ValidationError(RuntimeError):
    """
    A produced skeleton or animation failed validation.

    Input errors are caught before this point, so this indicates a defect
    in the importer rather than in the document.
    """


class UnsupportedFeatureError(NotImplementedError):
    """The requested import is not supported for glTF documents."""
