"""Tests for the launch config parser."""

from __future__ import annotations

from pathlib import Path

import pytest

from launch_injector.parsers import ConfigError, load_config_file, parse_config

EXAMPLE = """\
commonProperties
  app.development=true
clientProperties
  java.library.path=/home/user/.cache/natives/1.14.4
  org.lwjgl.librarypath=/home/user/.cache/natives/1.14.4
clientArgs
  --assetIndex=1.14.4-1.14
  --assetsDir=/home/user/.cache/assets
serverArgs
  nogui
"""


class TestSections:
    def test_client_environment(self):
        config = parse_config(EXAMPLE, "client")
        assert config.args == [
            "--assetIndex=1.14.4-1.14",
            "--assetsDir=/home/user/.cache/assets",
        ]
        assert config.properties == {
            "app.development": "true",
            "java.library.path": "/home/user/.cache/natives/1.14.4",
            "org.lwjgl.librarypath": "/home/user/.cache/natives/1.14.4",
        }

    def test_server_environment(self):
        config = parse_config(EXAMPLE, "server")
        assert config.args == ["nogui"]
        assert config.properties == {"app.development": "true"}

    def test_prefix_without_separator_routes_to_args(self):
        config = parse_config("fooArgs\n  --one\n  two\n", "foo")
        assert config.args == ["--one", "two"]

    def test_other_environment_lines_are_skipped(self):
        config = parse_config("barArgs\n  --one\n  two\n", "foo")
        assert config.args == []
        assert config.properties == {}

    def test_other_environment_does_not_leak_into_open_section(self):
        text = "fooArgs\n  --mine\nbarArgs\n  --theirs\nfooArgs\n  --again\n"
        assert parse_config(text, "foo").args == ["--mine", "--again"]

    def test_common_checked_before_environment(self):
        # "comm" is a prefix of "common"; the header still reads as common.
        config = parse_config("commonArgs\n  --shared\n", "comm")
        assert config.args == ["--shared"]

    def test_common_prefix_wins_over_longer_environment(self):
        with pytest.raises(ConfigError):
            parse_config("commonerArgs\n  x\n", "commoner")

    def test_dangling_header_at_end_is_fine(self):
        config = parse_config("clientArgs\n  --x\nclientProperties\n", "client")
        assert config.args == ["--x"]
        assert config.properties == {}

    def test_parse_is_deterministic(self):
        first = parse_config(EXAMPLE, "client")
        second = parse_config(EXAMPLE, "client")
        assert first == second


class TestValues:
    def test_duplicate_args_preserved_in_order(self):
        config = parse_config("commonArgs\n  -v\n  -x\n  -v\n", "client")
        assert config.args == ["-v", "-x", "-v"]

    def test_property_split_at_first_equals(self):
        config = parse_config("commonProperties\n  java.library.path=/x/y\n", "c")
        assert config.properties == {"java.library.path": "/x/y"}

        config = parse_config("commonProperties\n  opts = a=b \n", "c")
        assert config.properties == {"opts": "a=b"}

    def test_property_without_equals_has_empty_value(self):
        config = parse_config("commonProperties\n  flag\n", "c")
        assert config.properties == {"flag": ""}

    def test_last_property_value_wins(self):
        text = (
            "commonProperties\n  level=1\n"
            "clientProperties\n  level=2\n  other=x\n  level=3\n"
        )
        config = parse_config(text, "client")
        assert config.properties == {"level": "3", "other": "x"}

    def test_values_are_trimmed(self):
        config = parse_config("commonArgs\n\t  --spaced arg  \t\n", "c")
        assert config.args == ["--spaced arg"]

    def test_tab_indented_value(self):
        config = parse_config("commonArgs\n\t--tab\n", "c")
        assert config.args == ["--tab"]


class TestWhitespace:
    def test_blank_and_whitespace_only_lines_skipped(self):
        text = "\n   \n\t\ncommonArgs\n\n  a\n    \n  b\n"
        assert parse_config(text, "c").args == ["a", "b"]

    def test_whitespace_only_line_before_header_is_not_a_value(self):
        assert parse_config("  \ncommonArgs\n  a\n", "c").args == ["a"]

    def test_windows_and_old_mac_line_endings(self):
        assert parse_config("commonArgs\r\n  a\r\n  b\r\n", "c").args == ["a", "b"]
        assert parse_config("commonArgs\r  a\r  b", "c").args == ["a", "b"]

    def test_header_trailing_whitespace_is_trimmed(self):
        assert parse_config("commonArgs   \n  a\n", "c").args == ["a"]


class TestErrors:
    def test_invalid_attribute(self):
        with pytest.raises(ConfigError) as excinfo:
            parse_config("commonArgs\n  a\nclientStuff\n", "client")
        assert str(excinfo.value) == "invalid attribute: clientStuff"
        assert excinfo.value.line_number == 3

    def test_value_without_preceding_attribute(self):
        with pytest.raises(ConfigError) as excinfo:
            parse_config("  --orphan\ncommonArgs\n", "client")
        assert str(excinfo.value) == "value without preceding attribute: --orphan"
        assert excinfo.value.line_number == 1

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_config("commonNope\n", "client")


def test_load_config_file(write_config):
    path = write_config(EXAMPLE)
    config = load_config_file(path, "client")
    assert config.args[0] == "--assetIndex=1.14.4-1.14"


def test_load_config_file_reads_utf8(write_config):
    path = write_config("commonProperties\n  greeting=héllo wörld\n")
    assert load_config_file(str(path), "c").properties == {
        "greeting": "héllo wörld"
    }


def test_load_config_file_missing(tmp_path: Path):
    with pytest.raises(OSError):
        load_config_file(tmp_path / "missing.cfg", "client")
