"""Flat row-major matrix math for 2D (3x3) and 3D (4x4) homogeneous transforms."""
