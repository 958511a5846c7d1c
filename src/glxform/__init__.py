"""glxform - homogeneous transformation matrices for a rendering pipeline."""

__version__ = "0.1.0"

import glxform.mathutils.glx_matrix2d as Matrix2DOp
import glxform.mathutils.glx_matrix3d as Matrix3D
from glxform.mathutils.glx_types import Axis, X_AXIS, Y_AXIS, Z_AXIS
from glxform.mathutils.glx_errors import (
    MatrixError,
    ShapeMismatch,
    InvalidAxis,
    DegenerateProjection,
)
from glxform.glx_chain import (
    TransformChain,
    FrameConfig,
    FrameTransform,
    build_frame_matrix,
    center_of,
    transform_points,
    as_uniform,
)


__all__ = [
    'Matrix2DOp', 'Matrix3D',
    'Axis', 'X_AXIS', 'Y_AXIS', 'Z_AXIS',
    'MatrixError', 'ShapeMismatch', 'InvalidAxis', 'DegenerateProjection',
    'TransformChain', 'FrameConfig', 'FrameTransform', 'build_frame_matrix',
    'center_of', 'transform_points', 'as_uniform',
]
