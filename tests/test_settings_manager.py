# tests/test_settings_manager.py
import unittest
import os
import sys
import tempfile
from unittest import mock

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import settings_manager
from settings_manager import (save_settings, load_settings,
                              load_week_view_config, WeekViewConfig)
from error_messages import SettingsError


class TestSettingsManager(unittest.TestCase):

    def setUp(self):
        """Point the settings file at a temporary directory."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.settings_file = os.path.join(self.temp_dir.name, "settings.json")
        self.patcher = mock.patch.object(settings_manager, "SETTINGS_FILE", self.settings_file)
        self.patcher.start()

    def tearDown(self):
        self.patcher.stop()
        self.temp_dir.cleanup()

    def test_save_and_load_settings(self):
        test_settings = {
            "week_min_hour": 7,
            "hide_weekends": True,
            "selected_calendars": ["cal1", "cal2"]
        }

        save_settings(test_settings)

        self.assertTrue(os.path.exists(self.settings_file))
        self.assertEqual(load_settings(), test_settings)

    def test_load_settings_no_file(self):
        self.assertEqual(load_settings(), {})

    def test_load_settings_corrupted_file(self):
        with open(self.settings_file, 'w') as f:
            f.write("this is not a valid json")

        self.assertEqual(load_settings(), {})

    def test_week_view_config_from_settings_file(self):
        save_settings({"week_min_hour": 8, "week_max_hour": 20, "hide_weekends": True})

        config = load_week_view_config()

        self.assertEqual(config.min_hour, 8)
        self.assertEqual(config.max_hour, 20)
        self.assertTrue(config.hide_weekends)
        self.assertEqual(config.num_visible_days, 7)

    def test_week_view_config_defaults(self):
        config = load_week_view_config({})

        self.assertEqual((config.min_hour, config.max_hour), (0, 24))


class TestWeekViewConfigValidation(unittest.TestCase):

    def test_rejects_out_of_range_min_hour(self):
        with self.assertRaises(SettingsError) as ctx:
            WeekViewConfig(min_hour=24)
        self.assertEqual(ctx.exception.error_code, 'CONFIG_002')

    def test_rejects_max_hour_before_min_hour(self):
        with self.assertRaises(SettingsError):
            WeekViewConfig(min_hour=10, max_hour=9)

    def test_rejects_non_integer_hours(self):
        with self.assertRaises(SettingsError):
            WeekViewConfig(min_hour="8")
        with self.assertRaises(SettingsError):
            load_week_view_config({"week_min_hour": True})

    def test_rejects_empty_day_range(self):
        with self.assertRaises(SettingsError):
            WeekViewConfig(num_visible_days=0)


if __name__ == '__main__':
    unittest.main()
