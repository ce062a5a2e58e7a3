import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from debugcon import (
    DEFAULT_CONFIG,
    FORCE_CONSOLE_ALLOCATION,
    TIMESTAMPS_ENABLED,
    get_bool_setting,
    get_setting,
    load_config,
)


class TestConfigFile(unittest.TestCase):
    """Test loading settings from the JSON config file"""

    def setUp(self):
        """Create a temporary config file"""
        self.temp_file = tempfile.NamedTemporaryFile(mode="w", delete=False, suffix=".json")  # noqa: SIM115
        self.temp_path = Path(self.temp_file.name)
        self.temp_file.close()

    def tearDown(self):
        """Clean up temporary file"""
        if self.temp_path.exists():
            self.temp_path.unlink()

    def write_config(self, content):
        self.temp_path.write_text(content)

    def test_load_config(self):
        self.write_config(json.dumps({"DEBUGCON_TIMESTAMPS": "false"}))
        self.assertEqual(load_config(self.temp_path), {"DEBUGCON_TIMESTAMPS": "false"})

    def test_load_config_missing_file(self):
        self.assertEqual(load_config(Path("/tmp/this_file_does_not_exist_debugcon.json")), {})

    @patch("debugcon.config.error_console")
    def test_load_config_invalid_json(self, mock_console):
        self.write_config("invalid json content {{{")
        self.assertEqual(load_config(self.temp_path), {})
        mock_console.print.assert_called_once()

    @patch("debugcon.config.error_console")
    def test_load_config_not_an_object(self, mock_console):
        self.write_config("[1, 2, 3]")
        self.assertEqual(load_config(self.temp_path), {})
        mock_console.print.assert_called_once()

    def test_config_file_used_when_env_unset(self):
        self.write_config(json.dumps({"DEBUGCON_TIMESTAMPS": "off"}))
        with patch.dict(os.environ), patch("debugcon.config.CONFIG_FILE", self.temp_path):
            os.environ.pop("DEBUGCON_TIMESTAMPS", None)
            self.assertEqual(get_setting("DEBUGCON_TIMESTAMPS", "true"), "off")
            self.assertFalse(get_bool_setting("DEBUGCON_TIMESTAMPS", True))

    def test_env_overrides_config_file(self):
        self.write_config(json.dumps({"DEBUGCON_FORCE_CONSOLE": "false"}))
        with patch.dict(os.environ, {"DEBUGCON_FORCE_CONSOLE": "yes"}), patch(
            "debugcon.config.CONFIG_FILE", self.temp_path
        ):
            self.assertTrue(get_bool_setting("DEBUGCON_FORCE_CONSOLE", False))

    def test_empty_env_var_overrides_config_file(self):
        self.write_config(json.dumps({"DEBUGCON_TIMESTAMPS": "true"}))
        with patch.dict(os.environ, {"DEBUGCON_TIMESTAMPS": ""}), patch(
            "debugcon.config.CONFIG_FILE", self.temp_path
        ):
            self.assertEqual(get_setting("DEBUGCON_TIMESTAMPS", "true"), "")
            self.assertFalse(get_bool_setting("DEBUGCON_TIMESTAMPS", True))


class TestSettings(unittest.TestCase):
    """Test setting resolution and defaults"""

    def test_default_when_unset(self):
        missing = Path("/tmp/this_file_does_not_exist_debugcon.json")
        with patch.dict(os.environ), patch("debugcon.config.CONFIG_FILE", missing):
            os.environ.pop("DEBUGCON_TEST_SETTING", None)
            self.assertEqual(get_setting("DEBUGCON_TEST_SETTING", "fallback"), "fallback")
            self.assertTrue(get_bool_setting("DEBUGCON_TEST_SETTING", True))
            self.assertFalse(get_bool_setting("DEBUGCON_TEST_SETTING", False))

    def test_bool_values(self):
        for value, expected in (("1", True), ("ON", True), ("true", True), ("0", False), ("no", False)):
            with patch.dict(os.environ, {"DEBUGCON_TEST_SETTING": value}):
                self.assertEqual(get_bool_setting("DEBUGCON_TEST_SETTING", not expected), expected)

    def test_flags_are_bools(self):
        self.assertIsInstance(FORCE_CONSOLE_ALLOCATION, bool)
        self.assertIsInstance(TIMESTAMPS_ENABLED, bool)

    def test_defaults(self):
        self.assertEqual(DEFAULT_CONFIG["DEBUGCON_FORCE_CONSOLE"], "false")
        self.assertEqual(DEFAULT_CONFIG["DEBUGCON_TIMESTAMPS"], "false")


if __name__ == "__main__":
    unittest.main()
