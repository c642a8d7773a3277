# config.py
import os

def get_data_dir():
    """Get the appropriate data directory for user files."""
    override = os.environ.get("DESKCAL_DATA_DIR")
    if override:
        data_dir = override
    else:
        data_dir = os.path.dirname(os.path.abspath(__file__))

    os.makedirs(data_dir, exist_ok=True)
    return data_dir

# --- File Paths ---
_DATA_DIR = get_data_dir()
SETTINGS_FILE = os.path.join(_DATA_DIR, "settings.json")

# --- Period Cache ---
NO_PERIOD_FETCHED = -1  # nothing loaded yet

# --- Week View Defaults ---
DEFAULT_MIN_HOUR = 0
DEFAULT_MAX_HOUR = 24
DEFAULT_NUM_VISIBLE_DAYS = 7
DEFAULT_HIDE_WEEKENDS = False

# --- Layout ---
# Placeholder vertical extent for all-day chips, in minutes.
ALL_DAY_CHIP_TOP = 0
ALL_DAY_CHIP_BOTTOM = 100

# --- Background Loading ---
DEFAULT_LOADER_THREADS = 3  # previous / current / next
