import io
import logging

import pytest

import ksample


def test_seed_unset(environment):
    assert ksample.config.seed() is None

    environment.setenv(ksample.config.seed_variable, '  ')
    assert ksample.config.seed() is None


def test_seed_values(environment):

    environment.setenv(ksample.config.seed_variable, '17')
    assert ksample.config.seed() == 17

    environment.setenv(ksample.config.seed_variable, '0x10')
    assert ksample.config.seed() == 16

    environment.setenv(ksample.config.seed_variable, '007')
    assert ksample.config.seed() == 7


def test_seed_malformed(environment):

    environment.setenv(ksample.config.seed_variable, 'seventeen')

    with pytest.raises(ValueError):
        ksample.config.seed()


def test_log_level(environment):

    assert ksample.config.log_level() == logging.WARNING

    environment.setenv(ksample.config.level_variable, 'debug')
    assert ksample.config.log_level() == logging.DEBUG

    environment.setenv(ksample.config.level_variable, '10')
    assert ksample.config.log_level() == logging.DEBUG

    environment.setenv(ksample.config.level_variable, '25')
    assert ksample.config.log_level() == 25

    environment.setenv(ksample.config.level_variable, 'chatty')
    with pytest.raises(ValueError):
        ksample.config.log_level()


def test_logging_setup(environment):

    environment.setenv(ksample.config.level_variable, 'DEBUG')
    stream = io.StringIO()

    logger = ksample.config.logging_setup(stream)
    logger = ksample.config.logging_setup(stream)

    try:
        ours = [handler for handler in logger.handlers if getattr(handler, '_ksample', False)]
        assert len(ours) == 1
        assert logger.level == logging.DEBUG

        samples = ksample.for_keys(ksample.protocol.versions.latest, ksample.ApiKey.HEARTBEAT)
        list(samples)

        assert 'generated Heartbeat v4' in stream.getvalue()
    finally:
        for handler in ours:
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
