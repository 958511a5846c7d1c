"""
Setup script for glxform.

Usage:
    pip install -e .           # Editable install
    pip install -e ".[dev]"    # With dev dependencies

Sources live under src/ (src/glxform).
"""

from setuptools import setup, find_packages


setup(
    name='glxform',
    version='0.1.0',
    description='Homogeneous 2D/3D transformation matrices for rendering pipelines',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=[
        'numpy',
    ],
    extras_require={
        'dev': ['pytest'],
    },
)
