"""
Error types for dewi-calendar.

Upstream and transform errors carry the HTTP status the front end answers
with; configuration errors only ever happen at startup.
"""


class DewiError(Exception):
    """Base class for every failure while serving a request."""

    kind = 'DewiError'
    status_code = 500


class UpstreamFailure(DewiError):
    """Upstream API unreachable or answered with an unexpected status."""

    kind = 'UpstreamFailure'
    status_code = 503


class AuthenticationFailure(DewiError):
    """Upstream API rejected the configured credentials."""

    kind = 'AuthenticationFailure'
    status_code = 500


class Inconsistency(DewiError):
    """Upstream data could not be parsed into the expected shape."""

    kind = 'Inconsistency'
    status_code = 500


class ConfigError(Exception):
    def __init__(self, setting, message):
        super().__init__(f"{setting}: {message}")
        self.setting = setting


class MissingSetting(ConfigError):
    def __init__(self, setting):
        super().__init__(setting, "required setting is not set")


class InvalidSetting(ConfigError):
    def __init__(self, setting, value):
        super().__init__(setting, f"cannot parse value {value!r}")
        self.value = value
