"""Launch domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence


class Section(str, Enum):
    """Attribute word that closes a config section header."""

    ARGS = "Args"
    PROPERTIES = "Properties"

    @classmethod
    def from_attribute(cls, value: str) -> "Section | None":
        """Return the section for an exact attribute word, or None."""
        for member in cls:
            if member.value == value:
                return member
        return None


def _blank_to_none(value: str | None) -> str | None:
    return value if value else None


@dataclass(frozen=True)
class LaunchRequest:
    """The three host inputs that drive a launch.

    Empty strings count as absent.
    """

    environment: str | None = None
    entry_point: str | None = None
    config_location: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "environment", _blank_to_none(self.environment))
        object.__setattr__(self, "entry_point", _blank_to_none(self.entry_point))
        object.__setattr__(
            self, "config_location", _blank_to_none(self.config_location)
        )


@dataclass
class LaunchConfig:
    """Extra arguments and properties selected from a config file."""

    args: list[str] = field(default_factory=list)
    properties: dict[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "LaunchConfig":
        return cls()

    def merge_args(self, original: Sequence[str]) -> list[str]:
        """Return the injected arguments followed by ``original`` in order."""
        return [*self.args, *original]


@dataclass(frozen=True)
class LaunchPlan:
    """A fully decided launch: what to call, with what, in which mode."""

    entry_point: str
    args: tuple[str, ...]
    properties: dict[str, str] = field(default_factory=dict)
    pass_through_reason: str | None = None

    @property
    def is_pass_through(self) -> bool:
        return self.pass_through_reason is not None
