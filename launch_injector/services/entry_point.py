"""Resolution and invocation of the delegated entry point.

An entry point is named either ``package.module:attribute`` (the notation used
by console scripts, ``attribute`` may be dotted) or a bare
``package.module``, in which case the module's ``main`` attribute is used.
The resolved callable must accept the argument list as its single positional
parameter.
"""

from __future__ import annotations

import importlib
import inspect
import sys
from typing import Any, Callable, Sequence

from launch_injector.domain import LaunchError
from launch_injector.infrastructure.observability import get_logger

LOGGER = get_logger(__name__)

DEFAULT_ATTRIBUTE = "main"

EntryPoint = Callable[[list[str]], Any]


class EntryResolutionError(LaunchError, ImportError):
    """Raised when an entry point name does not resolve to a usable callable."""


def split_entry_point(name: str) -> tuple[str, str]:
    """Split ``name`` into module path and attribute path."""

    module_name, sep, attribute = name.partition(":")
    if not sep:
        attribute = DEFAULT_ATTRIBUTE
    if not module_name or not attribute:
        raise EntryResolutionError(f"invalid entry point name: {name!r}")
    return module_name, attribute


def _is_missing_module(exc: ModuleNotFoundError, module_name: str) -> bool:
    # True when the target itself (or a parent package) is absent, not when
    # one of its own imports fails.
    missing = exc.name or ""
    return module_name == missing or module_name.startswith(missing + ".")


def _accepts_argument_list(func: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins expose no signature; let the call decide.
        return True
    try:
        signature.bind([])
    except TypeError:
        return False
    return True


def resolve_entry_point(name: str) -> EntryPoint:
    """Import the module named by ``name`` and return its entry callable.

    Raises:
        EntryResolutionError: The module or attribute does not exist, the
            attribute is not callable, or it cannot take an argument list.
    """

    module_name, attribute = split_entry_point(name)
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        if _is_missing_module(exc, module_name):
            raise EntryResolutionError(
                f"entry point module not found: {module_name}", name=module_name
            ) from exc
        raise

    target: Any = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise EntryResolutionError(
                f"entry point {name!r} has no attribute {attribute!r}",
                name=module_name,
            ) from exc

    if not callable(target):
        raise EntryResolutionError(f"entry point {name!r} is not callable")
    if not _accepts_argument_list(target):
        raise EntryResolutionError(
            f"entry point {name!r} does not accept an argument list"
        )
    LOGGER.debug("Resolved entry point %s to %r", name, target)
    return target


def invoke_entry_point(name: str, func: EntryPoint, args: Sequence[str]) -> Any:
    """Call ``func`` with ``args`` as if the program had been started directly.

    ``sys.argv`` is replaced with ``[name, *args]`` first so programs that read
    it see the final argument list. Whatever the callable returns or raises,
    ``SystemExit`` included, reaches the caller unchanged.
    """

    final_args = list(args)
    sys.argv = [name, *final_args]
    LOGGER.debug("Invoking %s with %d args", name, len(final_args))
    return func(final_args)
