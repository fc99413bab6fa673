"""
Dewi-online reservations as JSON and iCalendar.

This package provides:
- Environment-based configuration
- A client for the Dewi-online facility API (login + reservations)
- Conversion of facility-local reservation times to UTC
- JSON and iCalendar rendering
- A Flask app serving both formats

Usage:
    # Start the server (reads DIWI_* settings from the environment or .env)
    dewi-calendar --port 8080

    # Subscribe a calendar client to
    http://127.0.0.1:8080/ical
"""

from .config import Configuration, load
from .generator import CalendarGenerator, to_json
from .reservations import Reservation, compute_reservations, transform
from .server import create_app

__all__ = [
    'Configuration', 'load', 'CalendarGenerator', 'to_json',
    'Reservation', 'compute_reservations', 'transform', 'create_app',
]
__version__ = '1.0.0'
