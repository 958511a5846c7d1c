"""
    Provides the axis enumeration used by 3D rotations.
"""

from enum import IntEnum
import numbers

from .glx_errors import InvalidAxis


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2

    @staticmethod
    def parse(axis):
        """Resolve an Axis member, its integer value or 'x'/'y'/'z' to an Axis.

        Raises:
            InvalidAxis: For anything outside {X, Y, Z}.
        """
        if isinstance(axis, Axis):
            return axis
        if isinstance(axis, str):
            key = axis.strip().upper()
            if key in Axis.__members__:
                return Axis[key]
            raise InvalidAxis(axis)
        # bool is an int subclass, True must not mean Axis.Y
        if isinstance(axis, numbers.Integral) and not isinstance(axis, bool):
            try:
                return Axis(int(axis))
            except ValueError:
                raise InvalidAxis(axis) from None
        raise InvalidAxis(axis)


X_AXIS = Axis.X
Y_AXIS = Axis.Y
Z_AXIS = Axis.Z
