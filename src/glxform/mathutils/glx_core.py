"""
Shared helpers for flat, row-major homogeneous matrices.

A matrix of dimension ``size`` is a flat sequence of ``size * size`` numbers
where element (row, col) sits at index ``row * size + col``. Points are row
vectors: a point ``p`` maps to ``p @ M`` and the translation lives in the last
row. This is the layout a shader receives from ``uniformMatrix{3,4}fv`` with
``transpose=False``.

Both the 2D and 3D modules build on these helpers; they never import each
other.
"""

import math

from .glx_errors import ShapeMismatch, DegenerateProjection

# Exact (cos, sin) pairs for quarter turns, keyed by the angle reduced to [0, 360)
_QUARTER_TURNS = {
    0.0: (1.0, 0.0),
    90.0: (0.0, 1.0),
    180.0: (-1.0, 0.0),
    270.0: (0.0, -1.0),
}


def check_matrix(matrix, size):
    """Return ``matrix`` as a tuple of floats or raise ShapeMismatch."""
    expected = size * size
    actual = len(matrix)
    if actual != expected:
        raise ShapeMismatch(expected, actual)
    return tuple(float(v) for v in matrix)


def unpack_vector(args, count):
    """Unpack ``count`` components given either as scalars or as one sequence.

    Mirrors the ``translate_matrix(x, y, z)`` / ``translate_matrix((x, y, z))``
    calling convention.

    Raises:
        ShapeMismatch: If the number of components is not ``count``.
    """
    if len(args) == 1:
        values = args[0]
        try:
            actual = len(values)
        except TypeError:
            raise ShapeMismatch(count, 1, what="vector") from None
        if actual != count:
            raise ShapeMismatch(count, actual, what="vector")
        return tuple(float(v) for v in values)

    if len(args) != count:
        raise ShapeMismatch(count, len(args), what="vector")
    return tuple(float(v) for v in args)


def _product(a, b, size):
    # result[r][c] = sum_k b[r][k] * a[k][c], accumulated in ascending k
    result = []
    for row in range(size):
        base = row * size
        for col in range(size):
            total = b[base] * a[col]
            for k in range(1, size):
                total += b[base + k] * a[k * size + col]
            result.append(total)
    return result


def multiply_flat(a, b, size):
    """Compose two flat matrices: ``b`` is applied first, then ``a``.

    In mathematical terms the result is ``B @ A``. The second argument plays
    the role of the transform already accumulated so far.
    """
    a = check_matrix(a, size)
    b = check_matrix(b, size)
    return tuple(_product(a, b, size))


def multiply_flat_into(out, a, b, size):
    """Write ``multiply_flat(a, b, size)`` into the mutable buffer ``out``.

    ``out`` may be a list or a numpy array of length ``size * size`` and may
    be the same object as ``a`` or ``b``. Returns ``out``.

    Raises:
        ShapeMismatch: If ``out`` does not hold ``size * size`` values.
        TypeError: If ``out`` is an array with a non-floating dtype, which
            would truncate the product on assignment.
    """
    expected = size * size
    if len(out) != expected:
        raise ShapeMismatch(expected, len(out))
    dtype = getattr(out, "dtype", None)
    if dtype is not None and dtype.kind != "f":
        raise TypeError(f"Output buffer must have a floating dtype, got {dtype}")
    a = check_matrix(a, size)
    b = check_matrix(b, size)
    out[:] = _product(a, b, size)
    return out


def compose_flat(steps, size, start):
    """Left-fold ``steps`` onto ``start`` with ``acc = step (x) acc``.

    Each step is applied after every step before it.
    """
    accumulator = start
    for step in steps:
        accumulator = multiply_flat(step, accumulator, size)
    return accumulator


def cos_sin(degrees):
    """Return ``(cos, sin)`` of an angle given in degrees.

    The angle is reduced modulo 360 first, so ``angle`` and ``angle + 360``
    give identical values. Quarter turns are exact.
    """
    wrapped = float(degrees) % 360.0
    exact = _QUARTER_TURNS.get(wrapped)
    if exact is not None:
        return exact
    radian = math.radians(wrapped)
    return math.cos(radian), math.sin(radian)


def check_dimensions(**dimensions):
    """Raise DegenerateProjection for the first zero dimension."""
    for name, value in dimensions.items():
        if value == 0:
            raise DegenerateProjection(name, value)


def transform_point_flat(point, matrix, size):
    """Transform a (size - 1)-component point by a flat matrix.

    Divides by the homogeneous coordinate when it is not 1. Returns the origin
    if the homogeneous coordinate vanishes.
    """
    m = check_matrix(matrix, size)
    coords = unpack_vector((point,), size - 1) + (1.0,)

    result = []
    for col in range(size):
        total = coords[0] * m[col]
        for k in range(1, size):
            total += coords[k] * m[k * size + col]
        result.append(total)

    w = result[-1]
    if abs(w) < 1e-10:
        return (0.0,) * (size - 1)
    if w != 1.0:
        inv_w = 1.0 / w
        return tuple(v * inv_w for v in result[:-1])
    return tuple(result[:-1])
