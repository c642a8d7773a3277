# providers/local_provider.py
import logging

from .base_provider import BaseEventLoader
from .month_loader import month_period_index

logger = logging.getLogger(__name__)


class LocalEventLoader(BaseEventLoader):
    """In-memory loader: serves a fixed event list bucketed by period."""

    def __init__(self, events=None, to_period_index=month_period_index):
        self.events = list(events or [])
        self._to_period_index = to_period_index
        self.load_count = 0

    def add_event(self, event):
        self.events.append(event)

    def remove_event(self, event):
        try:
            self.events.remove(event)
            return True
        except ValueError:
            return False

    def to_period_index(self, day):
        return self._to_period_index(day)

    def on_load(self, period_index):
        self.load_count += 1
        events = [event for event in self.events
                  if self._to_period_index(event.start_time) == period_index]
        logger.debug(f"LocalEventLoader: period {period_index} -> {len(events)} events")
        return events
