"""Test fixtures and utilities for glxform testing.

- assertions: Custom assertion functions (assert_matrix_close, assert_point_close)
- matrices: Sample non-symmetric matrices shared by the unit tests
"""

from .assertions import assert_matrix_close, assert_point_close
from .matrices import SAMPLE_3x3, OTHER_3x3, THIRD_3x3, SAMPLE_4x4, OTHER_4x4, THIRD_4x4

__all__ = [
    'assert_matrix_close',
    'assert_point_close',
    'SAMPLE_3x3',
    'OTHER_3x3',
    'THIRD_3x3',
    'SAMPLE_4x4',
    'OTHER_4x4',
    'THIRD_4x4',
]
