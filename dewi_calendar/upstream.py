"""
Client for the Dewi-online facility API.

Two calls per request: login (credentials -> bearer token + club id), then
the reservations fetch. No retries, no caching.
"""

import logging
from dataclasses import dataclass, field

import requests

from .errors import AuthenticationFailure, Inconsistency, UpstreamFailure

logger = logging.getLogger(__name__)

USER_AGENT = 'dewi-reservations-ical'
BASE_URL = 'https://{club}.dewi-online.nl/api/app'
# Ids are unsigned 32-bit upstream
MAX_ID = 0xFFFFFFFF


@dataclass(frozen=True)
class LoginResult:
    access_token: str
    club_id: int

    def __repr__(self):
        return f"LoginResult(club_id={self.club_id!r})"


@dataclass(frozen=True)
class RawReservation:
    id: int
    name: str
    date: str
    start_time: str
    end_time: str


@dataclass(frozen=True)
class ReservationsPayload:
    upcoming: list = field(default_factory=list)
    old: list = field(default_factory=list)


def _session(access_token=None):
    session = requests.Session()
    # Replace requests' defaults (Accept, Accept-Encoding, Connection).
    # http.client still adds Host and Accept-Encoding: identity on the wire.
    session.headers = {'User-Agent': USER_AGENT}
    if access_token:
        session.headers['Authorization'] = f"Bearer {access_token}"
    return session


def _check_status(resp, what):
    if resp.status_code == 422:
        logger.warning("%s rejected credentials (422)", what)
        raise AuthenticationFailure(f"{what}: credentials rejected")
    if resp.status_code != 200:
        logger.warning("%s failed with status %s", what, resp.status_code)
        raise UpstreamFailure(f"{what}: unexpected status {resp.status_code}")


def _json(resp, what):
    try:
        return resp.json()
    except ValueError as e:
        logger.warning("%s returned a body that is not JSON", what)
        raise Inconsistency(f"{what}: response is not JSON") from e


def _field(data, snake, camel=None):
    if snake in data:
        return data[snake]
    if camel and camel in data:
        return data[camel]
    raise KeyError(snake)


def _expect(value, kind):
    # bool is an int subclass and never a valid id
    if not isinstance(value, kind) or isinstance(value, bool):
        raise TypeError(f"expected {kind.__name__}, got {type(value).__name__}")
    return value


def _expect_id(value):
    value = _expect(value, int)
    if not 0 <= value <= MAX_ID:
        raise ValueError(f"id out of range: {value}")
    return value


def parse_login(data):
    """Build a LoginResult from the login response body."""
    try:
        return LoginResult(
            access_token=_expect(_field(data, 'access_token', 'accessToken'), str),
            club_id=_expect_id(_field(data, 'club_id', 'clubId')),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise Inconsistency(f"login: malformed response ({e})") from e


def parse_reservation(item):
    model = _field(item, 'model')
    return RawReservation(
        id=_expect_id(_field(item, 'id')),
        name=_expect(_field(item, 'name'), str),
        date=_expect(_field(model, 'date'), str),
        start_time=_expect(_field(model, 'start_time', 'startTime'), str),
        end_time=_expect(_field(model, 'end_time', 'endTime'), str),
    )


def parse_reservations(data):
    """Build a ReservationsPayload from the reservations response body."""
    try:
        upcoming = _field(data, 'upcoming_reservations', 'upcomingReservations')
        old = _field(data, 'old_reservations', 'oldReservations')
        return ReservationsPayload(
            upcoming=[parse_reservation(r) for r in upcoming],
            old=[parse_reservation(r) for r in old],
        )
    except (KeyError, TypeError, ValueError) as e:
        raise Inconsistency(f"reservations: malformed response ({e})") from e


def login(config):
    """Exchange the configured credentials for a bearer token and club id."""
    url = f"{BASE_URL.format(club=config.club)}/login"
    logger.info("Logging in to %s as %s", url, config.email)

    try:
        with _session() as session:
            resp = session.post(url, data={
                'email': config.email,
                'password': config.password,
            })
    except requests.RequestException as e:
        logger.warning("login request failed: %s", e)
        raise UpstreamFailure(f"login: {e}") from e

    _check_status(resp, 'login')
    return parse_login(_json(resp, 'login'))


def get_reservations(config, login_result):
    """Fetch upcoming and old reservations for the logged-in account."""
    # club_id is an int, safe to put in the path
    url = (f"{BASE_URL.format(club=config.club)}"
           f"/club/{login_result.club_id}/reservations")
    logger.info("Fetching reservations from %s", url)

    try:
        with _session(login_result.access_token) as session:
            resp = session.get(url)
    except requests.RequestException as e:
        logger.warning("reservations request failed: %s", e)
        raise UpstreamFailure(f"reservations: {e}") from e

    _check_status(resp, 'reservations')
    payload = parse_reservations(_json(resp, 'reservations'))
    logger.info("Got %d upcoming and %d old reservations",
                len(payload.upcoming), len(payload.old))
    return payload
