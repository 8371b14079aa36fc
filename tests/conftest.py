"""
Pytest configuration and shared fixtures for ShapeDrawer tests.
"""

import logging
import os
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Qt widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from shapedrawer.config import get_settings
from shapedrawer.core import AnchorEditor, Frame, QuadrilateralEditor


# ============== Settings Fixtures ==============

@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached settings so env changes in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


# ============== Model Fixtures ==============

@pytest.fixture
def straight_editor() -> AnchorEditor:
    """Two-anchor curve along the x axis."""
    return AnchorEditor([(0.0, 0.0), (10.0, 0.0)], hit_tolerance=2.0)


@pytest.fixture
def arch_editor() -> AnchorEditor:
    """Three-anchor arch (0,0) -> (5,5) -> (10,0)."""
    return AnchorEditor([(0.0, 0.0), (5.0, 5.0), (10.0, 0.0)], hit_tolerance=2.0)


@pytest.fixture
def square_quad() -> QuadrilateralEditor:
    """10x10 quadrilateral at the origin."""
    return QuadrilateralEditor(10.0, 10.0)


@pytest.fixture
def frame() -> Frame:
    return Frame(100.0, 100.0, 200.0, 150.0)
