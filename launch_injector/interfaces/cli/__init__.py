"""CLI interface for the launch injector.

``launch`` is the pass-through launcher itself, ``inspect_config`` is a
debugging aid that prints what a config would inject.
"""

from .inspect_config import inspect_config
from .launch import launch, main

__all__ = ["inspect_config", "launch", "main"]
