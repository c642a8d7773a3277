# event_model.py
import datetime
import logging

from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

END_OF_DAY = datetime.time(23, 59)


def _to_date(value):
    """Return the calendar date of an event, datetime or date."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return value.start_time.date()


class WeekViewEvent:
    """
    A time-bounded calendar event as the week view engine sees it.

    The engine only reads start_time, end_time and is_all_day and calls
    is_same_day() / collides_with(). Hosts may hand in any object that
    offers the same surface.
    """

    def __init__(self, start_time, end_time, is_all_day=False, id=None, title="",
                 location=None, color=None, data=None):
        self.id = id
        self.title = title
        self.start_time = start_time
        self.end_time = end_time
        self.is_all_day = is_all_day
        self.location = location
        self.color = color
        self.data = data

    def is_same_day(self, other):
        """True when other (event, datetime or date) falls on this event's start date."""
        return self.start_time.date() == _to_date(other)

    def collides_with(self, other):
        """Time overlap; all-day events only collide with all-day events on the same day."""
        if self.is_all_day != other.is_all_day:
            return False
        if self.is_all_day:
            return self.is_same_day(other)
        return self.start_time < other.end_time and other.start_time < self.end_time

    def _ends_on_start_day(self):
        end_date = self.end_time.date()
        start_date = self.start_time.date()
        if end_date == start_date:
            return True
        # Ending exactly at midnight still belongs to the previous day
        return (end_date - start_date).days == 1 and self.end_time.time() == datetime.time(0, 0)

    def copy_with_times(self, start_time, end_time):
        return WeekViewEvent(start_time, end_time, is_all_day=self.is_all_day, id=self.id,
                             title=self.title, location=self.location, color=self.color,
                             data=self.data)

    def split_by_day(self):
        """
        Split a timed event that crosses midnight into one piece per day.

        All-day events and events that end on their start day are returned
        unchanged as a single-item list.
        """
        if self.is_all_day or self.end_time < self.start_time or self._ends_on_start_day():
            return [self]

        pieces = []
        day = self.start_time.date()
        last_day = self.end_time.date()
        if self.end_time.time() == datetime.time(0, 0):
            last_day -= datetime.timedelta(days=1)

        while day <= last_day:
            if day == self.start_time.date():
                start = self.start_time
            else:
                start = datetime.datetime.combine(day, datetime.time(0, 0), tzinfo=self.start_time.tzinfo)

            if day == self.end_time.date():
                end = self.end_time
            else:
                end = datetime.datetime.combine(day, END_OF_DAY, tzinfo=self.end_time.tzinfo)

            pieces.append(self.copy_with_times(start, end))
            day += datetime.timedelta(days=1)

        logger.debug(f"[EVENT] '{self.title}' split into {len(pieces)} day pieces")
        return pieces

    @classmethod
    def from_google_event(cls, event):
        """
        Build an event from a Google-Calendar-style dict.

        {'start': {'dateTime': ...}} is a timed event, {'start': {'date': ...}}
        an all-day event whose end date is exclusive.
        """
        start_info, end_info = event['start'], event['end']
        is_all_day = 'date' in start_info

        if is_all_day:
            start_date = datetime.datetime.strptime(start_info['date'], '%Y-%m-%d')
            end_date = datetime.datetime.strptime(end_info['date'], '%Y-%m-%d')
            # exclusive end date -> last covered day
            last_day = (end_date - datetime.timedelta(days=1)).date()
            start_time = start_date
            end_time = datetime.datetime.combine(last_day, END_OF_DAY)
        else:
            start_time = dateutil_parser.isoparse(start_info['dateTime'])
            end_time = dateutil_parser.isoparse(end_info['dateTime'])

        return cls(start_time, end_time, is_all_day=is_all_day, id=event.get('id'),
                   title=event.get('summary', ''), location=event.get('location'),
                   color=event.get('color'), data=event)

    def __repr__(self):
        kind = "all-day" if self.is_all_day else "timed"
        return f"WeekViewEvent({self.title!r}, {self.start_time.isoformat()} - {self.end_time.isoformat()}, {kind})"
