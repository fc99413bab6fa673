"""
Render reservations as JSON records or as an iCalendar document.
"""

from datetime import datetime, timedelta

import pytz
from icalendar import Alarm, Calendar, Event, Timezone, TimezoneStandard

PRODID = 'dewi-reservations'
ALARM_TRIGGER = timedelta(hours=-1)
ALARM_DESCRIPTION = 'Time to sport!~'


def json_timestamp(dt):
    return dt.astimezone(pytz.utc).strftime('%Y-%m-%dT%H:%M:%SZ')


def ical_timestamp(dt):
    return dt.astimezone(pytz.utc).strftime('%Y%m%dT%H%M%SZ')


def to_json(reservations):
    """Reservations as JSON-ready dicts with RFC 3339 UTC timestamps."""
    return [
        {
            'id': r.id,
            'name': r.name,
            'start': json_timestamp(r.start),
            'end': json_timestamp(r.end),
        }
        for r in reservations
    ]


class CalendarGenerator:
    def __init__(self, prodid=PRODID):
        self.prodid = prodid

    def generate(self, reservations):
        """Build the calendar: a UTC timezone and one event per reservation."""
        cal = Calendar()
        cal.add('prodid', self.prodid)
        cal.add('version', '2.0')
        cal.add_component(self._create_timezone())

        for reservation in reservations:
            cal.add_component(self._create_event(reservation))

        return cal

    def to_ical(self, reservations):
        return self.generate(reservations).to_ical()

    def _create_timezone(self):
        tz = Timezone()
        tz.add('tzid', 'UTC')

        standard = TimezoneStandard()
        standard.add('dtstart', datetime(1970, 3, 29, 2, 0, 0))
        standard.add('tzoffsetfrom', timedelta(0))
        standard.add('tzoffsetto', timedelta(0))
        tz.add_component(standard)

        return tz

    def _create_event(self, reservation):
        """Create iCalendar event with a display alarm one hour before start."""
        start = reservation.start.astimezone(pytz.utc)
        end = reservation.end.astimezone(pytz.utc)

        event = Event()
        event.add('uid', str(reservation.id))
        event.add('dtstamp', start)
        event.add('dtstart', start)
        event.add('dtend', end)
        event.add('summary', reservation.name)

        alarm = Alarm()
        alarm.add('action', 'DISPLAY')
        alarm.add('trigger', ALARM_TRIGGER)
        alarm.add('description', ALARM_DESCRIPTION)
        event.add_component(alarm)

        return event
