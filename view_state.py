# view_state.py
import logging

logger = logging.getLogger(__name__)


class WeekViewState:
    """View flags the host sets and the load scheduler consults."""

    def __init__(self, preview_mode=False):
        self.should_refresh_events = False
        # Non-interactive preview: no loader needed, nothing is loaded
        self.preview_mode = preview_mode

    def request_refresh(self):
        """Drop the cache and refetch on the next load pass."""
        self.should_refresh_events = True
        logger.info("[STATE] event refresh requested")
