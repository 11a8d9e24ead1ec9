"""Parser for the environment-scoped launch config format.

The format is line based. A line that is not indented is a section header, an
indented line (space or tab) is a value. Headers start with ``common`` or the
name of an environment, immediately followed by ``Args`` for extra program
arguments or ``Properties`` for extra environment settings::

    commonProperties
      app.development=true
    clientProperties
      native.path=/home/user/.cache/natives/1.14.4
    clientArgs
      --assetIndex=1.14.4-1.14
      --assetsDir=/home/user/.cache/assets

Headers for other environments leave the open section as it is, and the value
lines that follow them are skipped until the next applicable header. Arguments
are trimmed and otherwise taken as-is. Properties are split into key and value
at the first ``=``; a line without ``=`` is a key with an empty value.
"""

from __future__ import annotations

import re
from pathlib import Path

from launch_injector.domain import LaunchConfig, LaunchError, Section
from launch_injector.infrastructure.observability import get_logger

LOGGER = get_logger(__name__)

COMMON_PREFIX = "common"
INDENT_CHARS = (" ", "\t")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class ConfigError(LaunchError, ValueError):
    """Raised when a config file violates the section/value structure."""

    def __init__(self, reason: str, line: str, line_number: int) -> None:
        super().__init__(f"{reason}: {line}")
        self.reason = reason
        self.line = line
        self.line_number = line_number


def _match_environment(header: str, environment: str) -> int | None:
    """Return the length of the environment prefix on ``header``, if any.

    ``common`` is checked first. No separator is required between the prefix
    and the attribute word.
    """

    if header.startswith(COMMON_PREFIX):
        return len(COMMON_PREFIX)
    if header.startswith(environment):
        return len(environment)
    return None


def _split_property(line: str) -> tuple[str, str]:
    key, sep, value = line.partition("=")
    if not sep:
        return line, ""
    return key.strip(), value.strip()


def parse_config(text: str, environment: str) -> LaunchConfig:
    """Parse config ``text`` and keep the sections for ``environment``.

    Args:
        text: Full contents of the config file.
        environment: Name of the environment whose sections apply in
            addition to the ``common`` ones.

    Returns:
        The extra arguments in file order and the extra properties, where a
        later key overwrites an earlier one.

    Raises:
        ConfigError: A header has an unknown attribute word, or a value line
            appears before any applicable header.
    """

    config = LaunchConfig()
    state: Section | None = None
    skipping = False

    for number, raw_line in enumerate(_LINE_BREAK.split(text), start=1):
        if not raw_line:
            continue

        indented = raw_line.startswith(INDENT_CHARS)
        line = raw_line.strip()
        if not line:
            continue

        if not indented:
            offset = _match_environment(line, environment)
            if offset is None:
                LOGGER.debug("Skipping section for other environment: %s", line)
                skipping = True
                continue
            section = Section.from_attribute(line[offset:])
            if section is None:
                raise ConfigError("invalid attribute", line, number)
            state = section
            skipping = False
        elif skipping:
            continue
        elif state is None:
            raise ConfigError("value without preceding attribute", line, number)
        elif state is Section.ARGS:
            config.args.append(line)
        else:
            key, value = _split_property(line)
            config.properties[key] = value

    LOGGER.debug(
        "Parsed %d extra args and %d extra properties",
        len(config.args),
        len(config.properties),
    )
    return config


def load_config_file(path: Path | str, environment: str) -> LaunchConfig:
    """Read a UTF-8 config file and parse it for ``environment``.

    The file is read completely and closed before parsing starts. ``OSError``
    and ``UnicodeDecodeError`` from reading propagate to the caller.
    """

    with open(path, "r", encoding="utf-8", newline="") as f:
        text = f.read()
    return parse_config(text, environment)
