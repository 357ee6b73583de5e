"""Tests for config: get/set/list/unset and typed graph settings."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from commitgraph.config import (
    GraphSettings,
    default_config_path,
    get_value,
    list_values,
    load_settings,
    set_value,
    unset_value,
)
from commitgraph.errors import InvalidConfigKeyError, InvalidConfigValueError


class TestConfigGetSetListUnset(unittest.TestCase):
    """Config --get, --set, --list, --unset."""

    def setUp(self) -> None:
        d = tempfile.mkdtemp(prefix="commitgraph_config_")
        self.path = Path(d) / "config.ini"

    def test_config_set_get(self) -> None:
        set_value("graph.format", "json", self.path)
        set_value("graph.abbrev", "10", self.path)
        self.assertEqual(get_value("graph.format", self.path), "json")
        self.assertEqual(get_value("graph.abbrev", self.path), "10")

    def test_config_get_missing_file(self) -> None:
        self.assertIsNone(get_value("graph.format", self.path))
        self.assertEqual(list_values(self.path), [])

    def test_config_list_sorted(self) -> None:
        set_value("graph.head", "false", self.path)
        set_value("graph.abbrev", "9", self.path)
        pairs = list_values(self.path)
        keys = [k for k, _ in pairs]
        self.assertEqual(keys, sorted(keys))
        self.assertEqual(dict(pairs), {"graph.abbrev": "9", "graph.head": "false"})

    def test_config_unset_removes(self) -> None:
        set_value("graph.format", "json", self.path)
        set_value("graph.abbrev", "10", self.path)
        self.assertTrue(unset_value("graph.format", self.path))
        self.assertIsNone(get_value("graph.format", self.path))
        self.assertEqual(get_value("graph.abbrev", self.path), "10")
        self.assertFalse(unset_value("graph.format", self.path))

    def test_config_unset_last_option_drops_section(self) -> None:
        set_value("graph.format", "json", self.path)
        unset_value("graph.format", self.path)
        self.assertNotIn("[graph]", self.path.read_text())

    def test_config_invalid_key_raises(self) -> None:
        with self.assertRaises(InvalidConfigKeyError):
            set_value("invalid", "x", self.path)
        with self.assertRaises(InvalidConfigKeyError):
            get_value("a.b.c", self.path)

    def test_corrupt_file_reads_as_empty(self) -> None:
        self.path.write_text("this is not ini\n")
        self.assertEqual(list_values(self.path), [])

    def test_default_path_from_env(self) -> None:
        with mock.patch.dict(os.environ, {"COMMITGRAPH_CONFIG": str(self.path)}):
            self.assertEqual(default_config_path(), self.path)
            set_value("graph.format", "json")
            self.assertEqual(get_value("graph.format", self.path), "json")


class TestGraphSettings(unittest.TestCase):
    def setUp(self) -> None:
        d = tempfile.mkdtemp(prefix="commitgraph_settings_")
        self.path = Path(d) / "config.ini"

    def test_defaults_without_file(self) -> None:
        self.assertEqual(load_settings(self.path), GraphSettings())

    def test_reads_all_keys(self) -> None:
        self.path.write_text("[graph]\nformat = JSON\nhead = no\nabbrev = 12\npage-size = 50\n")
        settings = load_settings(self.path)
        self.assertEqual(settings.format, "json")
        self.assertFalse(settings.head)
        self.assertEqual(settings.abbrev, 12)
        self.assertEqual(settings.page_size, 50)

    def test_invalid_format(self) -> None:
        set_value("graph.format", "svg", self.path)
        with self.assertRaises(InvalidConfigValueError):
            load_settings(self.path)

    def test_invalid_boolean(self) -> None:
        set_value("graph.head", "maybe", self.path)
        with self.assertRaises(InvalidConfigValueError):
            load_settings(self.path)

    def test_invalid_count(self) -> None:
        set_value("graph.abbrev", "-3", self.path)
        with self.assertRaises(InvalidConfigValueError):
            load_settings(self.path)
        set_value("graph.abbrev", "seven", self.path)
        with self.assertRaises(InvalidConfigValueError):
            load_settings(self.path)


if __name__ == "__main__":
    unittest.main()
