"""
Pytest configuration for glxform tests.
Adds src/ and tests/ to sys.path so tests run against the working tree without an install.
"""
import sys
from pathlib import Path

# src/ for `import glxform`, tests/ for `from test_fixtures import ...`
for path in (Path(__file__).parent.parent / "src", Path(__file__).parent):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
