"""
Configuration read from environment variables.

Required:
    DIWI_EMAIL, DIWI_PASSWORD, DIWI_CLUB
Optional:
    DIWI_HOST (default 127.0.0.1), DIWI_PORT (default 8080)
"""

import os
from dataclasses import dataclass

from .errors import InvalidSetting, MissingSetting

DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class Configuration:
    email: str
    password: str
    club: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def __repr__(self):
        return (f"Configuration(email={self.email!r}, club={self.club!r}, "
                f"host={self.host!r}, port={self.port!r})")


def _parse_str(value):
    return value


def parse_host(value):
    if not value.strip():
        raise ValueError("empty host")
    return value.strip()


def parse_port(value):
    digits = value[1:] if value.startswith('+') else value
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not a port number: {value!r}")
    port = int(digits)
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range: {port}")
    return port


def var(environ, key, parse=_parse_str):
    """Read and parse a required setting."""
    if key not in environ:
        raise MissingSetting(key)
    value = environ[key]
    try:
        return parse(value)
    except ValueError as e:
        raise InvalidSetting(key, value) from e


def with_default(environ, key, default, parse=_parse_str):
    """Read an optional setting, falling back to default only when absent."""
    if key not in environ:
        return default
    return var(environ, key, parse)


def load(environ=None):
    """Build the Configuration, raising ConfigError on bad or missing settings."""
    if environ is None:
        environ = os.environ

    return Configuration(
        email=var(environ, 'DIWI_EMAIL'),
        password=var(environ, 'DIWI_PASSWORD'),
        club=var(environ, 'DIWI_CLUB'),
        host=with_default(environ, 'DIWI_HOST', DEFAULT_HOST, parse_host),
        port=with_default(environ, 'DIWI_PORT', DEFAULT_PORT, parse_port),
    )
