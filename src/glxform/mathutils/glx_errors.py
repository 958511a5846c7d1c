"""
Errors raised by the glxform matrix functions.

All errors derive from ValueError so callers that already guard geometric
input with ``except ValueError`` keep working.
"""


class MatrixError(ValueError):
    """Base class for invalid matrix, vector, axis or projection input."""


class ShapeMismatch(MatrixError):
    """A matrix or vector does not have the length its dimension requires."""

    def __init__(self, expected, actual, what="matrix"):
        self.expected = expected
        self.actual = actual
        self.what = what
        super().__init__(f"Expected {what} of length {expected}, got length {actual}")


class InvalidAxis(MatrixError):
    """Axis selector outside the closed set {X, Y, Z}."""

    def __init__(self, axis):
        self.axis = axis
        super().__init__(f"Invalid axis: {axis!r}. Use Axis.X, Axis.Y or Axis.Z.")


class DegenerateProjection(MatrixError, ZeroDivisionError):
    """A projection was requested with a zero width, height or depth."""

    def __init__(self, name, value):
        self.name = name
        self.value = value
        super().__init__(f"Projection {name} must be non-zero, got {value!r}")
