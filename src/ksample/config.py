""" Environment-driven settings. Every value is read when asked for, not
    at import, so a test harness can adjust the environment before the
    first sample is generated.
"""

import logging
import os


seed_variable = 'KSAMPLE_SEED'
level_variable = 'KSAMPLE_LOG_LEVEL'
default_level = 'WARNING'


def seed():
    """ Return the integer seed for the default name source, as set in the
        ``KSAMPLE_SEED`` environment variable. None is returned if the
        variable is not set, in which case names are seeded from system
        randomness.
    """

    try:
        raw = os.environ[seed_variable]
    except KeyError:
        return None

    raw = raw.strip()
    if raw == '':
        return None

    # Base prefixes (0x, 0o, 0b) are honoured; anything else, including a
    # zero-padded decimal such as 007, is read as plain decimal.

    try:
        value = int(raw, 0)
    except ValueError:
        try:
            value = int(raw)
        except ValueError:
            raise ValueError("%s must be an integer, not %s" % (seed_variable, repr(raw)))

    return value


def log_level():
    """ Return the numeric logging level named by ``KSAMPLE_LOG_LEVEL``,
        defaulting to WARNING. A plain number, such as 10, is accepted as
        the level itself.
    """

    name = os.environ.get(level_variable, default_level)
    name = name.strip().upper()

    if name.isdigit():
        return int(name)

    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level

    raise ValueError("%s is not a logging level: %s" % (level_variable, repr(name)))


def logging_setup(stream=None):
    """ Attach a stream handler to the package logger at the configured
        level. This is for scripts and test harnesses; the library itself
        never configures logging. Calling this more than once does not add
        additional handlers.
    """

    logger = logging.getLogger('ksample')
    logger.setLevel(log_level())

    for handler in logger.handlers:
        if getattr(handler, '_ksample', False):
            return logger

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
    handler._ksample = True
    logger.addHandler(handler)

    return logger


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
