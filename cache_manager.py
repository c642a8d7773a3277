# cache_manager.py
import logging
import operator

from config import NO_PERIOD_FETCHED
from views.event_chip import EventChip

logger = logging.getLogger(__name__)


def default_sort_key(event):
    return (event.start_time, event.end_time)


class PeriodCache:
    """
    In-memory three-period cache of one week view.

    Holds the events of the last fetched period and its two neighbours plus
    the flattened chip list built from them. Only the load scheduler that
    owns the cache writes to it.
    """

    def __init__(self, sort_key=default_sort_key, split_multi_day_events=True):
        self.sort_key = sort_key
        self.split_multi_day_events = split_multi_day_events
        self.fetched_period = NO_PERIOD_FETCHED
        self.previous_period_events = None
        self.current_period_events = None
        self.next_period_events = None
        self.all_event_chips = []

    def is_empty(self):
        return not self.all_event_chips

    def has_all_periods(self):
        return (self.previous_period_events is not None
                and self.current_period_events is not None
                and self.next_period_events is not None)

    def clear(self):
        """Drop every period and chip."""
        self.fetched_period = NO_PERIOD_FETCHED
        self.previous_period_events = None
        self.current_period_events = None
        self.next_period_events = None
        self.all_event_chips = []
        logger.debug("[CACHE] cleared")

    def snapshot(self):
        return (self.fetched_period, self.previous_period_events, self.current_period_events,
                self.next_period_events, list(self.all_event_chips))

    def restore(self, snapshot):
        (self.fetched_period, self.previous_period_events, self.current_period_events,
         self.next_period_events, chips) = snapshot
        self.all_event_chips = list(chips)

    def sort_and_cache_events(self, events):
        """Sort one period's events and append their chips to the chip list."""
        for event in sorted(events, key=self.sort_key):
            pieces = event.split_by_day() if self.split_multi_day_events else [event]
            for piece in pieces:
                self.all_event_chips.append(EventChip(piece))

    def commit(self, period, previous_events, current_events, next_events):
        """Replace the whole cache with the three period lists of `period`."""
        self.all_event_chips = []
        self.sort_and_cache_events(previous_events)
        self.sort_and_cache_events(current_events)
        self.sort_and_cache_events(next_events)

        self.previous_period_events = previous_events
        self.current_period_events = current_events
        self.next_period_events = next_events
        self.fetched_period = period
        logger.info(f"[CACHE] period {period} committed ({len(self.all_event_chips)} chips)")

    def put(self, chips):
        """Store the laid-out chips."""
        self.all_event_chips = list(chips)

    def chips_for_day(self, day):
        return [chip for chip in self.all_event_chips if chip.event.is_same_day(day)]

    def all_day_chips_for_day(self, day):
        return [chip for chip in self.chips_for_day(day) if chip.event.is_all_day]

    def timed_chips_for_day(self, day):
        chips = [chip for chip in self.chips_for_day(day) if not chip.event.is_all_day]
        return sorted(chips, key=operator.attrgetter('event.start_time'))

    def __repr__(self):
        return f"PeriodCache(fetched_period={self.fetched_period}, chips={len(self.all_event_chips)})"


def plan_period_reuse(cache, period):
    """
    Decide which cached period lists can be reused for `period`.

    Returns (previous, current, next); None marks a slot that must be fetched.
    """
    if not cache.has_all_periods():
        return None, None, None

    if period == cache.fetched_period - 1:
        return None, cache.previous_period_events, cache.current_period_events
    if period == cache.fetched_period:
        return cache.previous_period_events, cache.current_period_events, cache.next_period_events
    if period == cache.fetched_period + 1:
        return cache.current_period_events, cache.next_period_events, None
    return None, None, None
