# Configuration loading from environment variables.

import pytest

from dewi_calendar.config import Configuration, load
from dewi_calendar.errors import InvalidSetting, MissingSetting

REQUIRED = {
    'DIWI_EMAIL': 'member@example.com',
    'DIWI_PASSWORD': 's3cret',
    'DIWI_CLUB': 'testclub',
}


def test_defaults():
    assert load(dict(REQUIRED)) == Configuration(
        email='member@example.com',
        password='s3cret',
        club='testclub',
        host='127.0.0.1',
        port=8080,
    )


def test_host_and_port():
    conf = load(dict(REQUIRED, DIWI_HOST='0.0.0.0', DIWI_PORT='9000'))
    assert conf.host == '0.0.0.0'
    assert conf.port == 9000


@pytest.mark.parametrize('missing', sorted(REQUIRED))
def test_missing_required(missing):
    env = dict(REQUIRED)
    del env[missing]
    with pytest.raises(MissingSetting) as exc:
        load(env)
    assert exc.value.setting == missing


@pytest.mark.parametrize('key, value', [
    ('DIWI_PORT', 'eighty'),
    ('DIWI_PORT', '70000'),
    ('DIWI_PORT', '-1'),
    ('DIWI_PORT', ''),
    ('DIWI_PORT', ' 80 '),
    ('DIWI_PORT', '8_0'),
    ('DIWI_PORT', '0x50'),
    ('DIWI_HOST', ''),
])
def test_invalid_optional(key, value):
    with pytest.raises(InvalidSetting) as exc:
        load(dict(REQUIRED, **{key: value}))
    assert exc.value.setting == key


def test_reads_process_environment(monkeypatch):
    for key, value in REQUIRED.items():
        monkeypatch.setenv(key, value)
    monkeypatch.setenv('DIWI_PORT', '8181')
    monkeypatch.delenv('DIWI_HOST', raising=False)
    conf = load()
    assert conf.club == 'testclub'
    assert conf.port == 8181


def test_repr_hides_password():
    assert 's3cret' not in repr(load(dict(REQUIRED)))


def test_configuration_is_immutable():
    conf = load(dict(REQUIRED))
    with pytest.raises(AttributeError):
        conf.port = 1


@pytest.mark.parametrize('value, port', [('80', 80), ('+80', 80), ('0', 0), ('65535', 65535)])
def test_port_digits(value, port):
    assert load(dict(REQUIRED, DIWI_PORT=value)).port == port
