from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for trees and configuration dictionaries.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from pathtree.core.tree import PathTree  # noqa: E402
from pathtree.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def tree() -> PathTree:
    """Return an empty, unsynchronized path tree."""
    return PathTree()


@pytest.fixture
def populated_tree() -> PathTree:
    """
    Return a tree holding a small two-host site map.

    Structure:
    a.com
      x
        y
        z
      about
    b.org
      api
    """
    t = PathTree()
    t.insert(["a.com", "x", "y"])
    t.insert(["a.com", "x", "z"])
    t.insert(["a.com", "about"])
    t.insert(["b.org", "api"])
    return t


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary."""
    return {
        "input_files": ["urls.txt"],
        "output_format": "json",
        "json_indent": 0,
        "synchronized": True,
        "log_level": "DEBUG",
        "log_file": "",
    }


@pytest.fixture
def reset_logging():
    """Detach handlers installed by configure_logging after the test."""
    shutdown_logging()
    yield
    shutdown_logging()
