"""Base exception for launch failures."""

from __future__ import annotations


class LaunchError(Exception):
    """Raised when the launcher cannot prepare or perform a launch."""
