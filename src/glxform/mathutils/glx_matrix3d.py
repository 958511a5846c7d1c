"""
Matrix3D - 4x4 homogeneous transforms for 3D rendering.

Matrices are flat tuples of 16 floats in row-major order with the translation
in the last row. Every function is pure and returns a tuple.

The composers translate(), rotate(), scale() and project() right-multiply a
transform onto an accumulator so a chain reads top to bottom:

    m = Matrix3D.identity()
    m = Matrix3D.translate(m, 200, 200, 0)
    m = Matrix3D.rotate(m, 30, Axis.X)
"""

from .glx_core import (
    check_dimensions,
    compose_flat,
    cos_sin,
    multiply_flat,
    multiply_flat_into,
    transform_point_flat,
    unpack_vector,
)
from .glx_types import Axis, X_AXIS, Y_AXIS, Z_AXIS

SIZE = 4

_IDENTITY_4x4 = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def multiply(matrix1, matrix2):
    """Compose two 4x4 matrices, applying ``matrix2`` first, then ``matrix1``.

    The result is ``matrix2 @ matrix1`` in mathematical notation. Callers
    folding a chain pass the new step first and the accumulator second.

    Raises:
        ShapeMismatch: If either input does not have exactly 16 elements.
    """
    return multiply_flat(matrix1, matrix2, SIZE)


def multiply_into(out, matrix1, matrix2):
    """Same as multiply() but writes into the 16-element buffer ``out``.

    Useful on per-frame paths that keep one preallocated buffer.
    """
    return multiply_flat_into(out, matrix1, matrix2, SIZE)


def translation(*args):
    """Translation by (tx, ty, tz), given as three scalars or one 3-sequence."""
    tx, ty, tz = unpack_vector(args, 3)
    return (
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        tx, ty, tz, 1.0,
    )


def rotation(angle, axis):
    """Rotation by ``angle`` degrees about one of the coordinate axes.

    Each axis has its own sign layout; the Z matrix carries -sin in the
    lower-left of its 2x2 block, which is the handedness the shaders expect.

    Raises:
        InvalidAxis: If ``axis`` is not X, Y or Z.
    """
    axis = Axis.parse(axis)
    c, s = cos_sin(angle)

    if axis is Axis.X:
        return (
            1.0, 0.0, 0.0, 0.0,
            0.0, c, s, 0.0,
            0.0, -s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    if axis is Axis.Y:
        return (
            c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    return (
        c, s, 0.0, 0.0,
        -s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def scaling(*args):
    sx, sy, sz = unpack_vector(args, 3)
    return (
        sx, 0.0, 0.0, 0.0,
        0.0, sy, 0.0, 0.0,
        0.0, 0.0, sz, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def identity():
    """Return the 4x4 identity matrix."""
    return _IDENTITY_4x4


def orthographic_projection(width, height, depth):
    """Map a pixel-space box (origin top-left, Y down) to the clip-space cube.

    Raises:
        DegenerateProjection: If width, height or depth is zero.
    """
    check_dimensions(width=width, height=height, depth=depth)
    return (
        2.0 / width, 0.0, 0.0, 0.0,
        0.0, -2.0 / height, 0.0, 0.0,
        0.0, 0.0, 2.0 / depth, 0.0,
        -1.0, 1.0, 0.0, 1.0,
    )


def translate(matrix, *args):
    return multiply(matrix, translation(*args))


def rotate(matrix, angle, axis):
    return multiply(matrix, rotation(angle, axis))


def scale(matrix, *args):
    return multiply(matrix, scaling(*args))


def project(matrix, width, height, depth):
    return multiply(matrix, orthographic_projection(width, height, depth))


def compose(steps):
    """Fold step matrices in order, starting from identity.

    ``steps[0]`` is applied first and ``steps[-1]`` last, e.g.
    anchor -> scale -> rotate -> translate -> project.
    """
    return compose_flat(steps, SIZE, _IDENTITY_4x4)


def transform_point(point, matrix):
    """Transform a 3D point (row vector) by a 4x4 matrix."""
    return transform_point_flat(point, matrix, SIZE)


__all__ = [
    'Axis', 'X_AXIS', 'Y_AXIS', 'Z_AXIS',
    'multiply', 'multiply_into', 'translation', 'rotation', 'scaling',
    'identity', 'orthographic_projection', 'translate', 'rotate', 'scale',
    'project', 'compose', 'transform_point',
]
