"""Launch orchestration: decide, apply settings, hand over control.

Every problem up to and including config parsing degrades to pass-through
mode, where the entry point is started with the original arguments only and a
warning is emitted. A missing entry point and an entry point that cannot be
resolved are the only fatal cases; both are raised to the caller.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Sequence

from launch_injector.app.config import CONFIG_VAR, ENV_VAR, MAIN_VAR, load_request
from launch_injector.domain import LaunchConfig, LaunchError, LaunchPlan, LaunchRequest
from launch_injector.infrastructure.host import HostEnvironment, setting_problem
from launch_injector.infrastructure.observability import (
    get_logger,
    log_context,
    log_exception,
)
from launch_injector.parsers import ConfigError, decode_escaped, load_config_file

from .entry_point import EntryPoint, invoke_entry_point, resolve_entry_point

LOGGER = get_logger(__name__)

PASS_THROUGH_PREFIX = "warning: dev-launch-injector in pass-through mode"

Resolver = Callable[[str], EntryPoint]
Warn = Callable[[str], None]


class MissingEntryPoint(LaunchError):
    """Raised when no entry point was supplied to the launcher."""

    def __init__(self) -> None:
        super().__init__(f"missing {MAIN_VAR} setting, can't launch")


def pass_through_message(reason: str) -> str:
    return f"{PASS_THROUGH_PREFIX}, {reason}"


def _log_warning(message: str) -> None:
    LOGGER.warning("%s", message)


def _is_readable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


@dataclass(frozen=True)
class Handoff:
    """A prepared launch: settings applied, entry point resolved."""

    plan: LaunchPlan
    func: EntryPoint

    def run(self) -> Any:
        """Call the entry point with the plan's arguments."""
        return invoke_entry_point(self.plan.entry_point, self.func, self.plan.args)


class LaunchOrchestrator:
    """Run one launch against a host environment.

    Args:
        host: Source of the launch inputs and target of injected properties.
        resolver: Turns an entry point name into a callable. Defaults to
            :func:`resolve_entry_point`.
        warn: Receives each pass-through warning line. Defaults to the
            module logger; the CLI passes a stdout writer.
    """

    def __init__(
        self,
        host: HostEnvironment,
        resolver: Resolver = resolve_entry_point,
        warn: Warn | None = None,
    ) -> None:
        self._host = host
        self._resolver = resolver
        self._warn = warn or _log_warning

    def read_request(self) -> LaunchRequest:
        """Read the launch inputs and clear them from the host."""

        return load_request(self._host)

    def _pass_through(
        self, entry_point: str, original_args: Sequence[str], reason: str
    ) -> LaunchPlan:
        self._warn(pass_through_message(reason))
        return LaunchPlan(
            entry_point=entry_point,
            args=tuple(original_args),
            pass_through_reason=reason,
        )

    def plan(self, request: LaunchRequest, original_args: Sequence[str]) -> LaunchPlan:
        """Decide how to launch for ``request``.

        Raises:
            MissingEntryPoint: ``request`` names no entry point. Nothing is
                read from disk in that case.
        """

        if request.entry_point is None:
            raise MissingEntryPoint()
        entry_point = request.entry_point

        if request.environment is None or request.config_location is None:
            return self._pass_through(
                entry_point,
                original_args,
                f"missing {ENV_VAR} or {CONFIG_VAR} settings",
            )

        config_path = Path(decode_escaped(request.config_location))
        if not _is_readable_file(config_path):
            return self._pass_through(
                entry_point,
                original_args,
                f"missing or unreadable config file ({config_path})",
            )

        with log_context(environment=request.environment, config=config_path):
            try:
                config = load_config_file(config_path, request.environment)
            except (ConfigError, OSError, UnicodeDecodeError) as exc:
                log_exception(LOGGER, "Config parsing failed", exc)
                return self._pass_through(
                    entry_point,
                    original_args,
                    f"parsing failed: {type(exc).__name__}: {exc}",
                )

            for key, value in config.properties.items():
                problem = setting_problem(key, value)
                if problem is not None:
                    return self._pass_through(
                        entry_point, original_args, f"invalid property: {problem}"
                    )

            LOGGER.debug(
                "Injecting %d args and %d properties",
                len(config.args),
                len(config.properties),
            )

        return self._plan_from_config(entry_point, config, original_args)

    @staticmethod
    def _plan_from_config(
        entry_point: str, config: LaunchConfig, original_args: Sequence[str]
    ) -> LaunchPlan:
        return LaunchPlan(
            entry_point=entry_point,
            args=tuple(config.merge_args(original_args)),
            properties=dict(config.properties),
        )

    def apply(self, plan: LaunchPlan) -> None:
        """Write the plan's properties into the host, overwriting old values."""

        for key, value in plan.properties.items():
            self._host.set(key, value)

    def prepare(self, original_args: Sequence[str]) -> Handoff:
        """Read the inputs, plan, apply settings and resolve the entry point.

        Raises:
            MissingEntryPoint: No entry point was supplied.
            EntryResolutionError: The entry point cannot be resolved.
        """

        plan = self.plan(self.read_request(), original_args)
        self.apply(plan)
        return Handoff(plan=plan, func=self._resolver(plan.entry_point))

    def launch(self, original_args: Sequence[str]) -> Any:
        """Perform the whole launch and return what the entry point returns."""

        return self.prepare(original_args).run()
