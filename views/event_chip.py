# views/event_chip.py
from collections import namedtuple

# left/width are fractions of the day column, top/bottom minutes from min_hour
ChipLayout = namedtuple('ChipLayout', ['left', 'width', 'top', 'bottom'])


class EventChip:
    """An event plus the layout the engine computed for it."""

    __slots__ = ('event', 'layout')

    def __init__(self, event, layout=None):
        self.event = event
        self.layout = layout

    def with_layout(self, layout):
        """Return a new chip for the same event with the given layout."""
        return EventChip(self.event, layout)

    @property
    def left(self):
        return self.layout.left if self.layout else None

    @property
    def width(self):
        return self.layout.width if self.layout else None

    @property
    def top(self):
        return self.layout.top if self.layout else None

    @property
    def bottom(self):
        return self.layout.bottom if self.layout else None

    def __repr__(self):
        return f"EventChip({self.event!r}, {self.layout!r})"
