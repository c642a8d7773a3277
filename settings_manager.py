import json
import logging
import os

from config import (SETTINGS_FILE, DEFAULT_MIN_HOUR, DEFAULT_MAX_HOUR,
                    DEFAULT_NUM_VISIBLE_DAYS, DEFAULT_HIDE_WEEKENDS)
from error_messages import ErrorMessages, SettingsError

logger = logging.getLogger(__name__)

def load_settings():
    """Read settings.json and return it as a dict."""
    if os.path.exists(SETTINGS_FILE):
        with open(SETTINGS_FILE, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError:
                logger.warning(f"Settings file is corrupted, using defaults: {SETTINGS_FILE}")
                return {}
    return {}

def save_settings(data):
    """Write the settings dict to settings.json."""
    with open(SETTINGS_FILE, "w") as f:
        json.dump(data, f, indent=4)


class WeekViewConfig:
    """Values of the week view the layout engine consumes."""

    def __init__(self, min_hour=DEFAULT_MIN_HOUR, max_hour=DEFAULT_MAX_HOUR,
                 num_visible_days=DEFAULT_NUM_VISIBLE_DAYS,
                 hide_weekends=DEFAULT_HIDE_WEEKENDS):
        self.min_hour = min_hour
        self.max_hour = max_hour
        self.num_visible_days = num_visible_days
        self.hide_weekends = hide_weekends
        self.validate()

    def validate(self):
        for name in ("min_hour", "max_hour", "num_visible_days"):
            value = getattr(self, name)
            # bool is an int subclass but never a valid hour
            if not isinstance(value, int) or isinstance(value, bool):
                raise SettingsError.from_template(
                    ErrorMessages.INVALID_CONFIGURATION,
                    detail=f"{name}={value!r} is not an integer")
        if not 0 <= self.min_hour <= 23:
            raise SettingsError.from_template(
                ErrorMessages.INVALID_CONFIGURATION, detail=f"min_hour={self.min_hour}")
        if not self.min_hour < self.max_hour <= 24:
            raise SettingsError.from_template(
                ErrorMessages.INVALID_CONFIGURATION,
                detail=f"max_hour={self.max_hour} with min_hour={self.min_hour}")
        if self.num_visible_days < 1:
            raise SettingsError.from_template(
                ErrorMessages.INVALID_CONFIGURATION,
                detail=f"num_visible_days={self.num_visible_days}")

    def __repr__(self):
        return (f"WeekViewConfig(min_hour={self.min_hour}, max_hour={self.max_hour}, "
                f"num_visible_days={self.num_visible_days}, hide_weekends={self.hide_weekends})")


def load_week_view_config(settings=None):
    """Build a WeekViewConfig from a settings dict (settings.json when omitted)."""
    if settings is None:
        settings = load_settings()
    return WeekViewConfig(
        min_hour=settings.get("week_min_hour", DEFAULT_MIN_HOUR),
        max_hour=settings.get("week_max_hour", DEFAULT_MAX_HOUR),
        num_visible_days=settings.get("week_visible_days", DEFAULT_NUM_VISIBLE_DAYS),
        hide_weekends=settings.get("hide_weekends", DEFAULT_HIDE_WEEKENDS),
    )
