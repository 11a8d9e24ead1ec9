"""Configuration for the launcher itself.

The launcher is configured entirely through environment variables. Each one is
read once and removed so the delegated program starts with a clean
environment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from launch_injector.domain import LaunchRequest
from launch_injector.infrastructure.host import HostEnvironment, take
from launch_injector.infrastructure.observability import parse_log_level

ENV_VAR = "DLI_ENV"
MAIN_VAR = "DLI_MAIN"
CONFIG_VAR = "DLI_CONFIG"
LOG_LEVEL_VAR = "DLI_LOG_LEVEL"

DEFAULT_LOG_LEVEL = logging.WARNING


@dataclass(frozen=True)
class LauncherSettings:
    """Settings that tune the launcher rather than the launched program."""

    log_level: int = DEFAULT_LOG_LEVEL


def load_settings(host: HostEnvironment) -> LauncherSettings:
    """Read and clear the launcher's own settings from ``host``."""

    return LauncherSettings(
        log_level=parse_log_level(take(host, LOG_LEVEL_VAR), DEFAULT_LOG_LEVEL)
    )


def load_request(host: HostEnvironment) -> LaunchRequest:
    """Read and clear the three launch inputs from ``host``."""

    return LaunchRequest(
        environment=take(host, ENV_VAR),
        entry_point=take(host, MAIN_VAR),
        config_location=take(host, CONFIG_VAR),
    )


__all__ = [
    "CONFIG_VAR",
    "ENV_VAR",
    "LOG_LEVEL_VAR",
    "MAIN_VAR",
    "LauncherSettings",
    "load_request",
    "load_settings",
]
