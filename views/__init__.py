"""
Week view layout package.
"""

from .event_chip import EventChip, ChipLayout
from .layout_calculator import (
    EventChipLayoutCalculator, compute_collision_groups, group_chips_by_day,
    group_colliding_chips, find_columns_in_group, pack_collision_group
)
