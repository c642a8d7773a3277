"""
Event loaders for the week view.
"""

from .base_provider import BaseEventLoader, CallableEventLoader
from .month_loader import MonthLoader, month_period_index, period_to_year_month, period_date_range
from .local_provider import LocalEventLoader
