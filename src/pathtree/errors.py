from __future__ import annotations

"""
Application Error Taxonomy.

The tree itself never fails; these types cover the collaborators around it
(target splitting, configuration loading).
"""


class PathTreeError(Exception):
    """Base class for all application-level errors."""


class InvalidTargetError(PathTreeError, ValueError):
    """Raised when an observed target cannot be split into segments."""


class ConfigError(PathTreeError):
    """Raised when a configuration source cannot be loaded."""
