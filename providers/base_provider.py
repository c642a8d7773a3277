from abc import ABC, abstractmethod

class BaseEventLoader(ABC):
    """
    Base class every event source of the week view follows.
    Subclasses map days to period indices and load the events of a period.
    """

    @abstractmethod
    def to_period_index(self, day):
        """
        Return the integer period a day (date or datetime) belongs to.
        Must be consistent and increase with the day.
        """
        pass

    @abstractmethod
    def on_load(self, period_index):
        """
        Return the events of one period.
        Called with p-1, p and p+1; must be safe to call repeatedly.
        """
        pass


class CallableEventLoader(BaseEventLoader):
    """Adapts two plain callables to the loader interface."""

    def __init__(self, on_load, to_period_index):
        self._on_load = on_load
        self._to_period_index = to_period_index

    def to_period_index(self, day):
        return self._to_period_index(day)

    def on_load(self, period_index):
        return self._on_load(period_index)
