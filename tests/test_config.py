import logging

import pytest

from webapp.config import Settings


def test_port_defaults_to_3001():
    assert Settings.from_env({}).port == 3001


def test_port_from_env():
    assert Settings.from_env({'PORT': '8080'}).port == 8080


@pytest.mark.parametrize('value', ['', 'abc', '-1', '0', '70000'])
def test_bad_port_falls_back(value):
    assert Settings.from_env({'PORT': value}).port == 3001


def test_host_and_log_level():
    settings = Settings.from_env({'HOST': '127.0.0.1', 'LOG_LEVEL': 'debug'})
    assert settings.host == '127.0.0.1'
    assert settings.log_level == logging.DEBUG
    assert Settings.from_env({'LOG_LEVEL': 'loud'}).log_level == logging.INFO
