# views/layout_calculator.py
import logging

from config import ALL_DAY_CHIP_TOP, ALL_DAY_CHIP_BOTTOM, DEFAULT_MIN_HOUR
from .event_chip import ChipLayout

logger = logging.getLogger(__name__)


def group_chips_by_day(chips):
    """Split chips into day groups, anchored on the first remaining chip each time."""
    remaining = list(chips)
    day_groups = []

    while remaining:
        anchor = remaining.pop(0)
        day_group = [anchor]

        i = 0
        while i < len(remaining):
            chip = remaining[i]
            if anchor.event.is_same_day(chip.event):
                day_group.append(remaining.pop(i))
            else:
                i += 1

        day_groups.append(day_group)

    return day_groups


def group_colliding_chips(day_chips):
    """Greedy collision groups for the chips of one day, in discovery order."""
    collision_groups = []

    for chip in day_chips:
        placed = False
        for group in collision_groups:
            if any(member.event.collides_with(chip.event)
                   and member.event.is_all_day == chip.event.is_all_day
                   for member in group):
                group.append(chip)
                placed = True
                break

        if not placed:
            collision_groups.append([chip])

    return collision_groups


def compute_collision_groups(chips):
    """All collision groups of a chip sequence, day by day."""
    collision_groups = []
    for day_group in group_chips_by_day(chips):
        collision_groups.extend(group_colliding_chips(day_group))
    return collision_groups


def find_columns_in_group(group):
    """
    Pack one collision group into columns.

    A chip goes into the first column that is still empty or whose last chip
    it does not collide with; otherwise a new column is opened. Greedy and
    stable with respect to the input order.
    """
    if not group:
        return []

    columns = [[]]
    for chip in group:
        placed = False
        for column in columns:
            if not column or not chip.event.collides_with(column[-1].event):
                column.append(chip)
                placed = True
                break

        if not placed:
            columns.append([chip])

    return columns


def _minutes_from(moment, min_hour):
    return (moment.hour - min_hour) * 60 + moment.minute


def vertical_extent(event, min_hour):
    """(top, bottom) in minutes since min_hour."""
    if event.is_all_day:
        return ALL_DAY_CHIP_TOP, ALL_DAY_CHIP_BOTTOM
    return _minutes_from(event.start_time, min_hour), _minutes_from(event.end_time, min_hour)


def pack_collision_group(group, min_hour):
    """
    Assign a ChipLayout to every chip of a collision group.

    Width depends only on the number of columns, so every chip of the group
    gets 1/column_count. Returns (chip, layout) pairs row by row.
    """
    columns = find_columns_in_group(group)
    column_count = len(columns)
    if column_count == 0:
        return []

    max_row_count = max(len(column) for column in columns)

    placements = []
    for i in range(max_row_count):
        for j, column in enumerate(columns):
            if len(column) > i:
                chip = column[i]
                top, bottom = vertical_extent(chip.event, min_hour)
                layout = ChipLayout(left=j / column_count, width=1 / column_count,
                                    top=top, bottom=bottom)
                placements.append((chip, layout))

    return placements


class EventChipLayoutCalculator:
    """Runs collision grouping and column packing over a chip list."""

    def __init__(self, config=None, min_hour=None):
        if min_hour is None:
            min_hour = config.min_hour if config is not None else DEFAULT_MIN_HOUR
        self.min_hour = min_hour

    def calculate(self, chips):
        """Return new, laid-out chips, day by day in the input order of each day."""
        if not chips:
            return []

        results = []
        group_count = 0
        for day_group in group_chips_by_day(chips):
            layouts = {}
            for group in group_colliding_chips(day_group):
                group_count += 1
                for chip, layout in pack_collision_group(group, self.min_hour):
                    layouts[id(chip)] = layout
            for chip in day_group:
                results.append(chip.with_layout(layouts[id(chip)]))

        logger.debug(f"[LAYOUT] {len(results)} chips laid out in {group_count} collision groups")
        return results
