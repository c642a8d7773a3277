# tests/test_error_messages.py
import unittest
import logging
import os
import sys
from unittest import mock

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import logger_config
from error_messages import (ErrorMessages, CalendarError, ConfigurationError,
                            EventLoadError, SettingsError)


class TestErrorMessages(unittest.TestCase):

    def test_format_suggestions(self):
        self.assertEqual(ErrorMessages.format_suggestions([]), "")
        self.assertEqual(ErrorMessages.format_suggestions(["Retry"]), "Suggestion: Retry")
        self.assertEqual(ErrorMessages.format_suggestions(["Retry", "Restart"]),
                         "Suggestions:\n1. Retry\n2. Restart")

    def test_from_template(self):
        error = ConfigurationError.from_template(ErrorMessages.NO_EVENT_LOADER)

        self.assertIsInstance(error, CalendarError)
        self.assertEqual(error.error_code, 'CONFIG_001')
        self.assertEqual(error.suggestions, ErrorMessages.NO_EVENT_LOADER['suggestions'])
        self.assertIsNot(error.suggestions, ErrorMessages.NO_EVENT_LOADER['suggestions'])

    def test_load_error_carries_period_and_detail(self):
        error = EventLoadError.from_template(ErrorMessages.EVENT_LOAD_FAILED, detail="period 5", period=5)

        self.assertEqual(error.period, 5)
        self.assertIn("(period 5)", str(error))
        self.assertEqual(error.error_code, 'LOAD_001')

    def test_settings_error_is_a_calendar_error(self):
        self.assertTrue(issubclass(SettingsError, CalendarError))


class TestLoggerConfig(unittest.TestCase):

    def test_setup_logger_adds_one_handler(self):
        root = logging.getLogger()
        with mock.patch.object(root, 'handlers', []):
            logger_config.setup_logger()
            logger_config.setup_logger()

            self.assertEqual(len(root.handlers), 1)
            self.assertEqual(root.handlers[0].formatter._fmt, logger_config.LOG_FORMAT)

    def test_get_logger(self):
        self.assertIs(logger_config.get_logger("data_manager"), logging.getLogger("data_manager"))


if __name__ == '__main__':
    unittest.main()
