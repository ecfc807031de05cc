import ksample
from ksample import exclusions
from ksample.protocol.apikeys import ApiKey


def test_default_identifiers():

    defaults = exclusions.default_identifiers()

    assert isinstance(defaults, tuple)
    assert len(defaults) == len(ApiKey) - len(exclusions.EXCLUDED)

    for key in defaults:
        assert key not in exclusions.EXCLUDED

    assert list(defaults) == sorted(defaults)


def test_membership():

    assert exclusions.is_excluded(ApiKey.DELETE_GROUPS)
    assert exclusions.is_excluded(ApiKey.DESCRIBE_TOPIC_PARTITIONS)
    assert not exclusions.is_excluded(ApiKey.PRODUCE)
    assert not exclusions.is_excluded(ApiKey.DESCRIBE_GROUPS)


def test_immutable():
    assert isinstance(exclusions.EXCLUDED, frozenset)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
