# background_loader.py
import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, QMutex, QMutexLocker, QThreadPool, QRunnable

from config import DEFAULT_LOADER_THREADS
from error_messages import ErrorMessages, EventLoadError

logger = logging.getLogger(__name__)

# Fetch order inside one task: the visible period first
_FETCH_ORDER = (('current', 0), ('previous', -1), ('next', 1))


class PeriodFetchTask:
    """One background loader round for a period, shared by every requester of it."""

    def __init__(self, period, previous_events=None, current_events=None, next_events=None):
        self.period = period
        self.slots = {
            'previous': previous_events,
            'current': current_events,
            'next': next_events,
        }
        self.callbacks = []
        self.error = None
        self.committed = False
        self._cancelled = threading.Event()
        self._done = threading.Event()

    def cancel(self):
        self._cancelled.set()

    def is_cancelled(self):
        return self._cancelled.is_set()

    def is_done(self):
        return self._done.is_set()

    def wait(self, timeout=None):
        return self._done.wait(timeout)

    def __repr__(self):
        state = "done" if self.is_done() else "running"
        return f"PeriodFetchTask(period={self.period}, {state}, committed={self.committed})"


class _FetchRunnable(QRunnable):
    def __init__(self, owner, task):
        super().__init__()
        self.owner = owner
        self.task = task

    def run(self):
        task = self.task
        try:
            for slot, offset in _FETCH_ORDER:
                if task.is_cancelled():
                    logger.info(f"[BG LOAD] period {task.period} cancelled before fetching {slot}")
                    break
                if task.slots[slot] is None:
                    task.slots[slot] = self.owner.provider._fetch_period(task.period + offset)
        except Exception as e:
            logger.error(f"[BG LOAD] loading period {task.period} failed", exc_info=True)
            task.error = e
        finally:
            self.owner._on_task_finished(task)


class BackgroundEventLoader(QObject):
    """
    Runs the sliding-window fetch of an EventChipsProvider on a thread pool.

    Concurrent requests for the same period share one task. Asking for a
    different period cancels the others, and only the most recently
    requested period may commit into the cache.
    """
    load_failed = pyqtSignal(int, str)

    def __init__(self, provider, max_threads=DEFAULT_LOADER_THREADS, parent=None):
        super().__init__(parent)
        self.provider = provider
        self.thread_pool = QThreadPool(self)
        self.thread_pool.setMaxThreadCount(max_threads)
        self._mutex = QMutex()
        self._in_flight = {}
        self._latest_period = None

    @property
    def latest_period(self):
        with QMutexLocker(self._mutex):
            return self._latest_period

    def in_flight_periods(self):
        with QMutexLocker(self._mutex):
            return sorted(self._in_flight)

    def request_period(self, day, callback=None):
        """
        Start (or join) the background load of the period containing `day`.

        Returns the PeriodFetchTask, or None when the period is already
        loaded or the view is in preview mode.
        """
        view_state = self.provider.view_state
        if view_state.preview_mode:
            return None
        self.provider._require_loader()

        period = self.provider.event_loader.to_period_index(day)
        refresh = view_state.should_refresh_events

        with QMutexLocker(self._mutex):
            self._latest_period = period
            for other_period, other_task in list(self._in_flight.items()):
                if other_period != period:
                    other_task.cancel()
                    del self._in_flight[other_period]
                    logger.info(f"[BG LOAD] period {other_period} superseded by {period}")

            task = self._in_flight.get(period)
            if task is not None:
                if callback is not None:
                    task.callbacks.append(callback)
                logger.debug(f"[BG LOAD] joined in-flight load of period {period}")
                return task

        if not refresh and not self.provider.needs_to_fetch(period):
            return None

        reuse = (None, None, None) if refresh else self.provider.plan_reuse(period)

        with QMutexLocker(self._mutex):
            # Another requester may have started the same period meanwhile
            task = self._in_flight.get(period)
            if task is not None:
                if callback is not None:
                    task.callbacks.append(callback)
                return task
            if self._latest_period != period:
                return None

            task = PeriodFetchTask(period, *reuse)
            if callback is not None:
                task.callbacks.append(callback)
            self._in_flight[period] = task

        logger.info(f"[BG LOAD] loading period {period} in background")
        self.thread_pool.start(_FetchRunnable(self, task))
        return task

    def load_events_if_necessary(self, day_range, callback=None):
        """Background counterpart of EventChipsProvider.load_events_if_necessary."""
        tasks = []
        for day in day_range:
            task = self.request_period(day, callback)
            if task is not None and task not in tasks:
                tasks.append(task)
        return tasks

    def _is_latest(self, task):
        with QMutexLocker(self._mutex):
            return task.period == self._latest_period and not task.is_cancelled()

    def _fail_task(self, task, error):
        load_error = EventLoadError.from_template(
            ErrorMessages.EVENT_LOAD_FAILED, detail=f"period {task.period}: {error}",
            period=task.period)
        load_error.__cause__ = error
        task.error = load_error
        logger.error(f"[BG LOAD] {load_error}\n{ErrorMessages.format_suggestions(load_error.suggestions)}")
        self.load_failed.emit(task.period, str(error))
        self.provider.load_failed.emit(task.period, str(error))

    def _on_task_finished(self, task):
        with QMutexLocker(self._mutex):
            if self._in_flight.get(task.period) is task:
                del self._in_flight[task.period]
            callbacks = list(task.callbacks)

        try:
            if task.error is not None:
                self._fail_task(task, task.error)
            elif task.is_cancelled():
                logger.info(f"[BG LOAD] period {task.period} result discarded")
            else:
                try:
                    # Lock order: provider mutex, then this loader's mutex (inside _is_latest).
                    # Never call into the provider while holding self._mutex.
                    task.committed = self.provider.commit_loaded_periods(
                        task.period, task.slots['previous'], task.slots['current'], task.slots['next'],
                        should_commit=lambda: self._is_latest(task))
                except Exception as e:
                    logger.error(f"[BG LOAD] committing period {task.period} failed", exc_info=True)
                    self._fail_task(task, e)
                else:
                    if task.committed:
                        self.provider.view_state.should_refresh_events = False
        finally:
            task._done.set()

        for callback in callbacks:
            try:
                callback(task)
            except Exception:
                logger.error(f"[BG LOAD] callback for period {task.period} failed", exc_info=True)

    def cancel_all(self):
        with QMutexLocker(self._mutex):
            for task in self._in_flight.values():
                task.cancel()
            self._in_flight.clear()
            self._latest_period = None

    def wait_for_done(self, msecs=-1):
        return self.thread_pool.waitForDone(msecs)
