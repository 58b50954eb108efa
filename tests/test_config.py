from __future__ import annotations

import json
import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtree import config
from dirtree.tree_model import MAX_DEPTH_LIMIT


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("dirtree.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_max_depth(), 256)
                self.assertEqual(config.load_max_roots(), 64)
                self.assertTrue(config.load_color())
                self.assertIsNone(config.load_theme_name())
                self.assertEqual(config.load_log_level(), logging.WARNING)

    def test_stored_values_are_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(
                json.dumps({"max_depth": 5, "max_roots": 3, "color": False, "theme": "mono", "log_level": "info"}),
                encoding="utf-8",
            )
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_max_depth(), 5)
                self.assertEqual(config.load_max_roots(), 3)
                self.assertFalse(config.load_color())
                self.assertEqual(config.load_theme_name(), "mono")
                self.assertEqual(config.load_log_level(), logging.INFO)

    def test_invalid_values_fall_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(
                json.dumps({"max_depth": 0, "max_roots": True, "color": "no", "theme": " ", "log_level": "LOUD"}),
                encoding="utf-8",
            )
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_max_depth(), 256)
                self.assertEqual(config.load_max_roots(), 64)
                self.assertTrue(config.load_color())
                self.assertIsNone(config.load_theme_name())
                self.assertEqual(config.load_log_level(), logging.WARNING)

    def test_max_depth_above_walker_limit_is_clamped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps({"max_depth": 100000}), encoding="utf-8")
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_max_depth(), MAX_DEPTH_LIMIT)

    def test_malformed_or_non_object_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
