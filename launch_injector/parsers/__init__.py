"""Text parsers used by the launcher: config files and escaped paths."""

from .config_file import ConfigError, load_config_file, parse_config
from .escapes import decode_escaped

__all__ = ["ConfigError", "decode_escaped", "load_config_file", "parse_config"]
