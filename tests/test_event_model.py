# tests/test_event_model.py
import unittest
import datetime
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_model import WeekViewEvent


def dt(day, hour, minute=0):
    return datetime.datetime(2025, 8, day, hour, minute)


class TestWeekViewEvent(unittest.TestCase):

    def test_is_same_day_accepts_events_dates_and_datetimes(self):
        event = WeekViewEvent(dt(14, 9), dt(14, 10))

        self.assertTrue(event.is_same_day(WeekViewEvent(dt(14, 22), dt(14, 23))))
        self.assertTrue(event.is_same_day(datetime.date(2025, 8, 14)))
        self.assertTrue(event.is_same_day(dt(14, 0)))
        self.assertFalse(event.is_same_day(datetime.date(2025, 8, 15)))

    def test_collision_is_strict_overlap(self):
        a = WeekViewEvent(dt(14, 9), dt(14, 10))

        self.assertTrue(a.collides_with(WeekViewEvent(dt(14, 9, 30), dt(14, 11))))
        self.assertFalse(a.collides_with(WeekViewEvent(dt(14, 10), dt(14, 11))))
        self.assertFalse(a.collides_with(WeekViewEvent(dt(14, 8), dt(14, 9))))

    def test_all_day_events_only_collide_with_all_day_events(self):
        holiday = WeekViewEvent(dt(14, 0), dt(14, 23, 59), is_all_day=True)
        trip = WeekViewEvent(dt(14, 0), dt(14, 23, 59), is_all_day=True)
        next_day = WeekViewEvent(dt(15, 0), dt(15, 23, 59), is_all_day=True)
        meeting = WeekViewEvent(dt(14, 9), dt(14, 10))

        self.assertTrue(holiday.collides_with(trip))
        self.assertFalse(holiday.collides_with(next_day))
        self.assertFalse(holiday.collides_with(meeting))
        self.assertFalse(meeting.collides_with(holiday))

    def test_split_by_day(self):
        event = WeekViewEvent(dt(14, 22), dt(16, 2), title="night shift")

        pieces = event.split_by_day()

        self.assertEqual([(p.start_time, p.end_time) for p in pieces], [
            (dt(14, 22), dt(14, 23, 59)),
            (dt(15, 0), dt(15, 23, 59)),
            (dt(16, 0), dt(16, 2)),
        ])
        self.assertTrue(all(p.title == "night shift" for p in pieces))

    def test_split_keeps_single_day_and_midnight_ending_events(self):
        same_day = WeekViewEvent(dt(14, 9), dt(14, 10))
        until_midnight = WeekViewEvent(dt(14, 22), dt(15, 0))
        all_day = WeekViewEvent(dt(14, 0), dt(16, 23, 59), is_all_day=True)

        self.assertEqual(same_day.split_by_day(), [same_day])
        self.assertEqual(until_midnight.split_by_day(), [until_midnight])
        self.assertEqual(all_day.split_by_day(), [all_day])

    def test_from_google_timed_event(self):
        event = WeekViewEvent.from_google_event({
            'id': 'evt-1',
            'summary': 'Standup',
            'start': {'dateTime': '2025-08-14T09:00:00'},
            'end': {'dateTime': '2025-08-14T09:15:00'},
        })

        self.assertEqual(event.id, 'evt-1')
        self.assertEqual(event.title, 'Standup')
        self.assertFalse(event.is_all_day)
        self.assertEqual(event.start_time, dt(14, 9))
        self.assertEqual(event.end_time, dt(14, 9, 15))

    def test_from_google_all_day_event_has_exclusive_end(self):
        event = WeekViewEvent.from_google_event({
            'summary': 'Holiday',
            'start': {'date': '2025-08-15'},
            'end': {'date': '2025-08-16'},
        })

        self.assertTrue(event.is_all_day)
        self.assertEqual(event.start_time, dt(15, 0))
        self.assertEqual(event.end_time, dt(15, 23, 59))


if __name__ == '__main__':
    unittest.main()
