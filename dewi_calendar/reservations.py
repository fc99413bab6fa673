"""
Turn upstream reservations into absolute UTC reservations.

Upstream reports date, start and end as separate civil strings in the
facility's local time (Europe/Amsterdam).
"""

import logging
from dataclasses import dataclass
from datetime import datetime

import pytz

from . import upstream
from .errors import Inconsistency

logger = logging.getLogger(__name__)

FACILITY_TIMEZONE = pytz.timezone('Europe/Amsterdam')
DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S'


@dataclass(frozen=True)
class Reservation:
    id: int
    name: str
    start: datetime
    end: datetime


def local_to_utc(date_str, time_str, tz=FACILITY_TIMEZONE):
    """Interpret "date time" as wall-clock time in tz and return it in UTC.

    Raises ValueError for malformed strings, and pytz's
    AmbiguousTimeError/NonExistentTimeError for wall-clock times that a DST
    switch makes ambiguous or skips.
    """
    naive = datetime.strptime(f"{date_str} {time_str}", DATETIME_FORMAT)
    return tz.localize(naive, is_dst=None).astimezone(pytz.utc)


def to_reservation(raw):
    return Reservation(
        id=raw.id,
        name=raw.name,
        start=local_to_utc(raw.date, raw.start_time),
        end=local_to_utc(raw.date, raw.end_time),
    )


def transform(raws):
    """Convert every raw reservation, failing the whole batch on the first bad one."""
    reservations = []
    for raw in raws:
        try:
            reservations.append(to_reservation(raw))
        except (ValueError, pytz.exceptions.InvalidTimeError) as e:
            logger.warning("Reservation %s has unparsable date/time (%s %s-%s): %s",
                           raw.id, raw.date, raw.start_time, raw.end_time, e)
            raise Inconsistency(f"reservation {raw.id}: {e}") from e
    return reservations


def compute_reservations(config):
    """Log in, fetch and convert the upcoming reservations."""
    login_result = upstream.login(config)
    payload = upstream.get_reservations(config, login_result)
    # Old reservations are part of the payload but never published
    return transform(payload.upcoming)
