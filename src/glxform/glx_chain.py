"""
Transform chains - building the final matrix a renderer uploads each frame.

A chain is an ordered list of step matrices folded left to right from the
identity, with each new step passed as the *first* argument of multiply()
and the running product as the second. The first step is therefore applied
first. Reversing the fold gives a different transform.

Usage:
    from glxform.glx_chain import TransformChain, FrameTransform, as_uniform

    # Explicit chain
    matrix = (TransformChain(dimension=3)
              .anchor(center)
              .scale(2, 1, 1)
              .rotate(30, Axis.X)
              .rotate(30, Axis.Y)
              .rotate(angle, Axis.Z)
              .translate(200, 200, 0)
              .project(width, height, 400)
              .matrix())

    # Same thing with the per-frame helper
    frame = FrameTransform(width=width, height=height, translation=(200, 200, 0),
                           angle=angle, scale=(2, 1, 1), anchor=center)
    gl.uniformMatrix4fv(location, False, as_uniform(frame.to_matrix()))
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import warnings

import numpy as np

import glxform.mathutils.glx_matrix2d as Matrix2DOp
import glxform.mathutils.glx_matrix3d as Matrix3D
from glxform.mathutils.glx_core import check_matrix, unpack_vector
from glxform.mathutils.glx_errors import InvalidAxis, ShapeMismatch
from glxform.mathutils.glx_types import Axis


_OPS = {2: Matrix2DOp, 3: Matrix3D}

# Uniform upload accepts 3x3 and 4x4 matrices
_UNIFORM_SIZES = (9, 16)


def _ops_for(dimension):
    try:
        return _OPS[dimension]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown dimension: {dimension}. Use 2 or 3.") from None


# =============================================================================
# Chain Builder
# =============================================================================

class TransformChain:
    """Records transform steps in call order and folds them into one matrix.

    Every builder method returns the chain so calls can be strung together.
    Steps are validated when they are added, so a bad step fails at the call
    that introduced it rather than at matrix().
    """

    def __init__(self, dimension: int = 3):
        self._ops = _ops_for(dimension)
        self.dimension = dimension
        self._steps: List[Tuple[float, ...]] = []

    def __len__(self):
        return len(self._steps)

    @property
    def steps(self) -> Tuple[Tuple[float, ...], ...]:
        return tuple(self._steps)

    def then(self, matrix) -> "TransformChain":
        """Append a raw step matrix."""
        self._steps.append(check_matrix(matrix, self.dimension + 1))
        return self

    def anchor(self, *args) -> "TransformChain":
        """Move the pivot point to the origin (translate by its negation)."""
        pivot = unpack_vector(args, self.dimension)
        return self.then(self._ops.translation(tuple(-v for v in pivot)))

    def translate(self, *args) -> "TransformChain":
        return self.then(self._ops.translation(*args))

    def scale(self, *args) -> "TransformChain":
        return self.then(self._ops.scaling(*args))

    def rotate(self, angle: float, axis=None) -> "TransformChain":
        """Rotate by ``angle`` degrees.

        3D chains require an axis. 2D chains rotate about the implicit Z axis
        and accept only ``None`` or ``Axis.Z``.
        """
        if self.dimension == 2:
            if axis is not None and Axis.parse(axis) is not Axis.Z:
                raise InvalidAxis(axis)
            return self.then(Matrix2DOp.rotation(angle))
        return self.then(Matrix3D.rotation(angle, axis))

    def project(self, width: float, height: float, depth: Optional[float] = None) -> "TransformChain":
        if self.dimension == 2:
            if depth is not None:
                raise TypeError("2D projection takes no depth")
            return self.then(Matrix2DOp.orthographic_projection(width, height))
        if depth is None:
            raise TypeError("3D projection requires a depth")
        return self.then(Matrix3D.orthographic_projection(width, height, depth))

    def matrix(self) -> Tuple[float, ...]:
        """Fold the recorded steps into the final matrix (identity if empty)."""
        return self._ops.compose(self._steps)


# =============================================================================
# Per-frame Matrix
# =============================================================================

@dataclass
class FrameConfig:
    """
    Renderer-wide settings for building per-frame matrices.

    Attributes:
        depth: Depth of the orthographic clip box in pixels.
        tilt_x: Fixed rotation about X (degrees) applied before the frame angle.
        tilt_y: Fixed rotation about Y (degrees) applied before the frame angle.
    """
    depth: float = 400.0
    tilt_x: float = 30.0
    tilt_y: float = 30.0


@dataclass
class FrameTransform:
    """
    Inputs for one rendered frame.

    Attributes:
        width, height: Viewport size in pixels.
        translation: Position of the anchor after transformation, in pixels.
        angle: Rotation about Z in degrees.
        scale: Per-axis scale factors. Zero is allowed and flattens that axis.
        anchor: Pivot point in model coordinates, usually center_of(positions).
    """
    width: float
    height: float
    translation: Sequence[float] = (0.0, 0.0, 0.0)
    angle: float = 0.0
    scale: Sequence[float] = (1.0, 1.0, 1.0)
    anchor: Sequence[float] = (0.0, 0.0, 0.0)

    def to_chain(self, config: Optional[FrameConfig] = None) -> TransformChain:
        config = config or FrameConfig()
        return (TransformChain(dimension=3)
                .anchor(self.anchor)
                .scale(self.scale)
                .rotate(config.tilt_x, Axis.X)
                .rotate(config.tilt_y, Axis.Y)
                .rotate(self.angle, Axis.Z)
                .translate(self.translation)
                .project(self.width, self.height, config.depth))

    def to_matrix(self, config: Optional[FrameConfig] = None) -> Tuple[float, ...]:
        """Build anchor -> scale -> tilt X -> tilt Y -> rotate Z -> translate -> project."""
        return self.to_chain(config).matrix()


def build_frame_matrix(frame: FrameTransform, config: Optional[FrameConfig] = None) -> Tuple[float, ...]:
    return frame.to_matrix(config)


# =============================================================================
# Vertex Helpers
# =============================================================================

def _as_points(positions, dimension):
    values = np.asarray(positions, dtype=np.float64).ravel()
    if values.size == 0 or values.size % dimension:
        raise ShapeMismatch(f"a non-zero multiple of {dimension}", values.size, what="vertex array")
    return values.reshape(-1, dimension)


def center_of(positions, dimension: int = 3) -> Tuple[float, ...]:
    """Bounding-box center of a flat vertex array.

    This is the anchor a renderer pivots around so the shape rotates and
    scales about its middle instead of its first vertex.

    Raises:
        ShapeMismatch: If the array is empty or not a whole number of points.
    """
    _ops_for(dimension)
    points = _as_points(positions, dimension)
    center = (points.min(axis=0) + points.max(axis=0)) / 2.0
    return tuple(float(v) for v in center)


def transform_points(positions, matrix, dimension: int = 3) -> np.ndarray:
    """Batch transform a flat vertex array the way the vertex shader does.

    Returns an array of shape (count, dimension). Points whose homogeneous
    coordinate vanishes map to the origin.
    """
    _ops_for(dimension)
    size = dimension + 1
    m = np.asarray(check_matrix(matrix, size), dtype=np.float64).reshape(size, size)
    points = _as_points(positions, dimension)

    homogeneous = np.hstack([points, np.ones((len(points), 1))])
    transformed = homogeneous @ m

    w = transformed[:, -1]
    result = np.zeros((len(points), dimension))
    valid = np.abs(w) >= 1e-10
    result[valid] = transformed[valid, :-1] / w[valid, None]
    return result


def as_uniform(matrix) -> np.ndarray:
    """Convert a flat 3x3 or 4x4 matrix to a contiguous float32 array.

    The array can be passed unchanged to ``uniformMatrix3fv`` /
    ``uniformMatrix4fv`` with ``transpose=False``.
    """
    if len(matrix) not in _UNIFORM_SIZES:
        raise ShapeMismatch("9 or 16", len(matrix))

    with np.errstate(over='ignore', invalid='ignore'):
        values = np.ascontiguousarray(np.asarray(matrix, dtype=np.float64).astype(np.float32))

    if not np.all(np.isfinite(values)):
        warnings.warn("Matrix has values that are not finite as float32; "
                      "the shader will receive inf/nan", RuntimeWarning, stacklevel=2)
    return values
