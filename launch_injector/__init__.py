"""
dev-launch-injector package initializer.

This package wraps a Python entry point and injects extra arguments and
environment settings read from an environment-scoped config file before
handing control over.

The package exposes a ``__version__`` attribute indicating the installed
version. The version is read from pyproject.toml via importlib.metadata –
this is the single source of truth.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dev-launch-injector")
except PackageNotFoundError:
    # Package is not installed (running from source without pip install -e .)
    __version__ = "0.0.0.dev"

__all__: list[str] = ["__version__"]
