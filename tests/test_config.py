import logging

from formulizer.config import Settings, get_logging_level


def test_defaults():
    config = Settings(_env_file=None)
    assert config.COPY_REVERT_SECONDS == 2.0
    assert config.EVALUATE_PATH.startswith('/services/apexrest/')


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv('FORMULIZER_INSTANCE_URL', 'https://acme.my.salesforce.com')
    monkeypatch.setenv('FORMULIZER_REQUEST_TIMEOUT', '12.5')
    config = Settings(_env_file=None)
    assert config.INSTANCE_URL == 'https://acme.my.salesforce.com'
    assert config.REQUEST_TIMEOUT == 12.5


def test_logging_levels():
    assert get_logging_level('debug') == logging.DEBUG
    assert get_logging_level('ERROR') == logging.ERROR
    assert get_logging_level('verbose') == logging.INFO
    assert get_logging_level(None) == logging.INFO
