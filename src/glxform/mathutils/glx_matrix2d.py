"""
Matrix2DOp - 3x3 homogeneous transforms for 2D rendering.

Matrices are flat tuples of 9 floats in row-major order with the translation
in the last row. Every function is pure and returns a tuple.

Usage:
    import glxform.mathutils.glx_matrix2d as Matrix2DOp

    matrix = Matrix2DOp.compose([
        Matrix2DOp.translation(-50, -75),   # move the pivot to the origin
        Matrix2DOp.rotation(30),
        Matrix2DOp.translation(200, 150),
        Matrix2DOp.orthographic_projection(800, 600),
    ])
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

SIZE = 3

_IDENTITY_3x3 = (
    1.0, 0.0, 0.0,
    0.0, 1.0, 0.0,
    0.0, 0.0, 1.0,
)


def multiply(matrix1, matrix2):
    """Compose two 3x3 matrices, applying ``matrix2`` first, then ``matrix1``.

    Raises:
        ShapeMismatch: If either input does not have exactly 9 elements.
    """
    return multiply_flat(matrix1, matrix2, SIZE)


def multiply_into(out, matrix1, matrix2):
    """Same as multiply() but writes into the 9-element buffer ``out``."""
    return multiply_flat_into(out, matrix1, matrix2, SIZE)


def translation(*args):
    """Translation by (tx, ty), given as two scalars or one 2-sequence."""
    tx, ty = unpack_vector(args, 2)
    return (
        1.0, 0.0, 0.0,
        0.0, 1.0, 0.0,
        tx, ty, 1.0,
    )


def rotation(angle):
    """Counter-clockwise rotation by ``angle`` degrees about the implicit Z axis."""
    c, s = cos_sin(angle)
    return (
        c, -s, 0.0,
        s, c, 0.0,
        0.0, 0.0, 1.0,
    )


def scaling(*args):
    sx, sy = unpack_vector(args, 2)
    return (
        sx, 0.0, 0.0,
        0.0, sy, 0.0,
        0.0, 0.0, 1.0,
    )


def identity():
    """Return the 3x3 identity matrix."""
    return _IDENTITY_3x3


def orthographic_projection(width, height):
    """Map pixel coordinates (origin top-left, Y down) to clip space.

    Raises:
        DegenerateProjection: If width or height is zero.
    """
    check_dimensions(width=width, height=height)
    return (
        2.0 / width, 0.0, 0.0,
        0.0, -2.0 / height, 0.0,
        -1.0, 1.0, 1.0,
    )


def translate(matrix, *args):
    return multiply(matrix, translation(*args))


def rotate(matrix, angle):
    return multiply(matrix, rotation(angle))


def scale(matrix, *args):
    return multiply(matrix, scaling(*args))


def project(matrix, width, height):
    return multiply(matrix, orthographic_projection(width, height))


def compose(steps):
    """Fold step matrices in order, starting from identity.

    Each step becomes the first argument of multiply() with the running
    product as the second, so ``steps[0]`` is applied first.
    """
    return compose_flat(steps, SIZE, _IDENTITY_3x3)


def transform_point(point, matrix):
    """Transform a 2D point (row vector) by a 3x3 matrix."""
    return transform_point_flat(point, matrix, SIZE)

