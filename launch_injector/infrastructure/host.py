"""Access to process-wide settings.

The launcher reads its own inputs from, and writes injected properties to, the
process environment. Services depend on the :class:`HostEnvironment` protocol
rather than on ``os.environ`` directly so that tests can hand in a fake.
"""

from __future__ import annotations

import os
from typing import MutableMapping, Protocol


class HostEnvironment(Protocol):
    """Capability for reading, clearing and setting process-wide settings."""

    def get(self, key: str) -> str | None:
        ...

    def clear(self, key: str) -> None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class OsEnvironment:
    """HostEnvironment backed by ``os.environ`` (or any mutable mapping)."""

    def __init__(self, environ: MutableMapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str) -> str | None:
        return self._environ.get(key)

    def clear(self, key: str) -> None:
        self._environ.pop(key, None)

    def set(self, key: str, value: str) -> None:
        self._environ[key] = value


def setting_problem(key: str, value: str) -> str | None:
    """Return why ``key=value`` cannot be stored as a setting, or None.

    Mirrors what ``os.putenv`` rejects: empty names, names containing ``=``,
    and NUL characters anywhere.
    """

    if not key:
        return "empty setting name"
    if "=" in key:
        return f"setting name contains '=': {key!r}"
    if "\0" in key:
        return f"setting name contains NUL: {key!r}"
    if "\0" in value:
        return f"setting value for {key!r} contains NUL"
    return None


def take(host: HostEnvironment, key: str) -> str | None:
    """Read a setting and clear it from the host in one step."""

    value = host.get(key)
    host.clear(key)
    return value
