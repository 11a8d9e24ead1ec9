"""Infrastructure adapters for the launch injector."""

from .host import HostEnvironment, OsEnvironment, setting_problem, take

__all__ = ["HostEnvironment", "OsEnvironment", "setting_problem", "take"]
