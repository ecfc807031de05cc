import pytest

import ksample


@pytest.fixture
def names():
    """ A seeded name source, so failures can be reproduced.
    """

    return ksample.names.NameSource(1234)


@pytest.fixture
def environment(monkeypatch):
    """ Start each test with no ksample settings in the environment, and a
        fresh shared name source.
    """

    monkeypatch.delenv(ksample.config.seed_variable, raising=False)
    monkeypatch.delenv(ksample.config.level_variable, raising=False)
    ksample.names.reset()

    yield monkeypatch

    ksample.names.reset()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
