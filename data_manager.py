# data_manager.py
import datetime
import logging

from PyQt6.QtCore import QObject, pyqtSignal, QMutex, QMutexLocker

from cache_manager import PeriodCache, plan_period_reuse
from config import NO_PERIOD_FETCHED
from error_messages import ErrorMessages, ConfigurationError, EventLoadError
from settings_manager import WeekViewConfig
from view_state import WeekViewState
from views.layout_calculator import EventChipLayoutCalculator

logger = logging.getLogger(__name__)


def get_visible_days(first_day, num_days=7, hide_weekends=False):
    """Days shown by a week view starting at first_day."""
    days = []
    day = first_day
    while len(days) < num_days:
        if not (hide_weekends and day.weekday() >= 5):
            days.append(day)
        day += datetime.timedelta(days=1)
    return days


class EventChipsProvider(QObject):
    """
    Keeps the period cache in step with the visible days and lays out its chips.

    The week view stores the events of three periods: the visible one, the
    previous one and the next one. Moving one period forward or back reuses
    two of them and fetches only the missing neighbour.
    """
    events_loaded = pyqtSignal(int)
    load_failed = pyqtSignal(int, str)

    def __init__(self, config=None, cache=None, view_state=None, event_loader=None):
        super().__init__()
        self.config = config if config is not None else WeekViewConfig()
        self.cache = cache if cache is not None else PeriodCache()
        self.view_state = view_state if view_state is not None else WeekViewState()
        self.event_loader = event_loader
        self.layout_calculator = EventChipLayoutCalculator(self.config)
        self._mutex = QMutex()

    def set_event_loader(self, event_loader):
        self.event_loader = event_loader

    def update_config(self, config):
        """Swap the configuration and lay the cached chips out again."""
        with QMutexLocker(self._mutex):
            self.config = config
            self.layout_calculator = EventChipLayoutCalculator(config)
            self._calculate_event_chip_positions()

    def _require_loader(self):
        if self.event_loader is None:
            raise ConfigurationError.from_template(ErrorMessages.NO_EVENT_LOADER)

    def needs_to_fetch(self, period):
        return (self.cache.is_empty()
                or self.view_state.should_refresh_events
                or self.cache.fetched_period != period)

    def load_events_if_necessary(self, day_range):
        """Make sure the cache covers every day in day_range, then lay it out."""
        if self.view_state.preview_mode:
            return

        self._require_loader()

        for day in day_range:
            period = self.event_loader.to_period_index(day)
            if self.needs_to_fetch(period):
                self._load_events_and_calculate_positions(period)
                self.view_state.should_refresh_events = False

    def _load_events_and_calculate_positions(self, period):
        error = None
        loaded = False
        with QMutexLocker(self._mutex):
            snapshot = self.cache.snapshot()
            refresh = self.view_state.should_refresh_events
            if refresh:
                self.cache.clear()

            try:
                loaded = self._load_events(period, refresh)
                self._calculate_event_chip_positions()
            except Exception as e:
                # Never keep a partially loaded window
                self.cache.restore(snapshot)
                logger.error(f"[LOAD] loading period {period} failed, cache rolled back", exc_info=True)
                error = e

        if error is not None:
            self.load_failed.emit(period, str(error))
            load_error = EventLoadError.from_template(
                ErrorMessages.EVENT_LOAD_FAILED, detail=f"period {period}: {error}", period=period)
            logger.error(ErrorMessages.format_suggestions(load_error.suggestions))
            raise load_error from error

        if loaded:
            self.events_loaded.emit(period)

    def _load_events(self, period, refresh=False):
        """Fetch (or reuse) the three periods around `period` and commit them."""
        if (self.cache.fetched_period != NO_PERIOD_FETCHED
                and self.cache.fetched_period == period and not refresh):
            return False

        previous_events, current_events, next_events = plan_period_reuse(self.cache, period)

        # Current period first, it is the one on screen
        if current_events is None:
            current_events = self._fetch_period(period)
        if previous_events is None:
            previous_events = self._fetch_period(period - 1)
        if next_events is None:
            next_events = self._fetch_period(period + 1)

        self.cache.commit(period, previous_events, current_events, next_events)
        return True

    def _fetch_period(self, period):
        events = self.event_loader.on_load(period)
        if events is None:
            logger.warning(f"[LOAD] loader returned nothing for period {period}, treating as empty")
            return []
        return list(events)

    def _calculate_event_chip_positions(self):
        self.cache.put(self.layout_calculator.calculate(self.cache.all_event_chips))

    def commit_loaded_periods(self, period, previous_events, current_events, next_events,
                              should_commit=None):
        """
        Commit periods fetched elsewhere (e.g. on a worker thread) and lay them out.

        should_commit is checked under the cache lock; returning False drops
        the result without touching the cache. If committing or laying out
        raises, the cache is rolled back and the exception propagates.
        """
        with QMutexLocker(self._mutex):
            if should_commit is not None and not should_commit():
                logger.info(f"[LOAD] stale result for period {period} discarded")
                return False
            snapshot = self.cache.snapshot()
            try:
                self.cache.commit(period, previous_events, current_events, next_events)
                self._calculate_event_chip_positions()
            except Exception:
                self.cache.restore(snapshot)
                raise

        self.events_loaded.emit(period)
        return True

    def plan_reuse(self, period):
        """Reuse plan for `period` taken under the cache lock."""
        with QMutexLocker(self._mutex):
            return plan_period_reuse(self.cache, period)

    def get_event_chips(self):
        with QMutexLocker(self._mutex):
            return list(self.cache.all_event_chips)
