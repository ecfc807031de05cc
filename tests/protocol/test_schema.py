import pytest

import ksample
from ksample.protocol import message
from ksample.protocol import schema
from ksample.protocol.apikeys import ApiKey


def test_every_key_has_a_skeleton():

    for key in ApiKey:
        skeleton = schema.default_skeleton(key)
        assert isinstance(skeleton, message.RequestData)
        assert skeleton.api_key is key
        assert isinstance(skeleton, schema.message_class(key))


def test_skeletons_are_fresh():

    first = schema.default_skeleton(ApiKey.METADATA)
    second = schema.default_skeleton(ApiKey.METADATA)

    assert first is not second
    assert first.topics is not second.topics

    first.topics.append(message.MetadataRequestTopic())
    assert second.topics == []


def test_default_values():

    produce = schema.default_skeleton(ApiKey.PRODUCE)
    assert produce.acks == 0
    assert produce.transactional_id is None
    assert produce.topic_data == []

    groups = schema.default_skeleton(ApiKey.DELETE_GROUPS)
    assert groups.groups_names == []
    assert groups.empty_mandatory() == ['groups_names']


def test_generic_skeleton():

    skeleton = schema.default_skeleton(ApiKey.END_TXN)
    assert type(skeleton) is message.GenericRequestData
    assert skeleton.api_key is ApiKey.END_TXN
    assert skeleton.mandatory == ()
    assert skeleton.empty_mandatory() == []


def test_integer_keys():

    skeleton = schema.default_skeleton(0)
    assert isinstance(skeleton, message.ProduceRequestData)

    assert schema.supported_versions(18) == range(0, 4)


def test_unknown_keys():

    for bogus in (-1, 76, 1000, 'PRODUCE', None):
        with pytest.raises(ksample.errors.SchemaUnknown):
            schema.default_skeleton(bogus)

        with pytest.raises(ksample.errors.SchemaUnknown):
            schema.supported_versions(bogus)

    # Also catchable the way any other failed lookup would be.

    with pytest.raises(KeyError):
        schema.default_skeleton(9999)


def test_supported_versions():

    for key in ApiKey:
        known = schema.supported_versions(key)
        assert len(known) >= 1
        assert known[0] >= 0

    assert 9 in schema.supported_versions(ApiKey.PRODUCE)
    assert 6 in schema.supported_versions(ApiKey.LIST_OFFSETS)
    assert 4 in schema.supported_versions(ApiKey.DESCRIBE_GROUPS)


def test_tables_are_read_only():

    with pytest.raises(TypeError):
        schema.versions[ApiKey.PRODUCE] = (0, 99)

    with pytest.raises(TypeError):
        schema.classes[ApiKey.END_TXN] = message.GenericRequestData


def test_api_key_names():

    assert str(ApiKey.API_VERSIONS) == 'ApiVersions'
    assert ApiKey.CONSUMER_GROUP_DESCRIBE.title == 'ConsumerGroupDescribe'
    assert ApiKey(3) is ApiKey.METADATA


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
