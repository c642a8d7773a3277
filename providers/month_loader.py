# providers/month_loader.py
import datetime
import logging

from dateutil.relativedelta import relativedelta

from .base_provider import BaseEventLoader

logger = logging.getLogger(__name__)


def month_period_index(day):
    """Index of the month a date or datetime falls in."""
    return day.year * 12 + (day.month - 1)


def period_to_year_month(period_index):
    """Inverse of month_period_index."""
    year, month_offset = divmod(period_index, 12)
    return year, month_offset + 1


def period_date_range(period_index):
    """(first_day, last_day) of a month period."""
    year, month = period_to_year_month(period_index)
    first_day = datetime.date(year, month, 1)
    last_day = first_day + relativedelta(months=1) - datetime.timedelta(days=1)
    return first_day, last_day


class MonthLoader(BaseEventLoader):
    """
    Loader whose periods are calendar months.

    on_month_change(year, month) is the host callback that returns the
    events of that month.
    """

    def __init__(self, on_month_change):
        self.on_month_change = on_month_change

    def to_period_index(self, day):
        return month_period_index(day)

    def on_load(self, period_index):
        year, month = period_to_year_month(period_index)
        logger.info(f"[LOAD] requesting events for {year}-{month:02d}")
        return self.on_month_change(year, month)
