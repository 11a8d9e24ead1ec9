"""Service layer modules for the launch injector."""

from .entry_point import (  # noqa: F401
    EntryResolutionError,
    invoke_entry_point,
    resolve_entry_point,
)
from .launcher import Handoff, LaunchOrchestrator, MissingEntryPoint  # noqa: F401

__all__ = [
    "EntryResolutionError",
    "Handoff",
    "LaunchOrchestrator",
    "MissingEntryPoint",
    "invoke_entry_point",
    "resolve_entry_point",
]
