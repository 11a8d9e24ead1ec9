"""Domain layer for the launch injector.

Pure data types shared by the parsers and the services. Nothing here touches
the filesystem or the process environment.
"""

from .errors import LaunchError
from .models import LaunchConfig, LaunchPlan, LaunchRequest, Section

__all__ = ["LaunchConfig", "LaunchError", "LaunchPlan", "LaunchRequest", "Section"]
