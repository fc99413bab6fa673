import pytest

from dewi_calendar.config import Configuration
from dewi_calendar.server import create_app

LOGIN_URL = 'https://testclub.dewi-online.nl/api/app/login'
RESERVATIONS_URL = 'https://testclub.dewi-online.nl/api/app/club/42/reservations'


def make_reservation(id, name, date, start_time, end_time):
    """Reservation as the upstream API returns it."""
    return {
        'id': id,
        'name': name,
        'model': {'date': date, 'start_time': start_time, 'end_time': end_time},
    }


@pytest.fixture()
def configuration():
    return Configuration(email='member@example.com', password='s3cret', club='testclub')


@pytest.fixture()
def client(configuration):
    app = create_app(configuration)
    app.config['TESTING'] = True
    return app.test_client()


@pytest.fixture()
def upstream_ok(requests_mock):
    """Upstream API that logs in fine and returns one upcoming and one old reservation."""
    requests_mock.post(LOGIN_URL, json={'access_token': 'tok-123', 'club_id': 42})
    requests_mock.get(RESERVATIONS_URL, json={
        'upcomingReservations': [
            make_reservation(7, 'Tennis', '2024-07-10', '18:00:00', '19:00:00'),
        ],
        'oldReservations': [
            make_reservation(3, 'Squash', '2024-01-02', '10:00:00', '11:00:00'),
        ],
    })
    return requests_mock
