import pytest

import ksample
from ksample import exclusions
from ksample import populators
from ksample.protocol import message
from ksample.protocol import records
from ksample.protocol import schema
from ksample.protocol.apikeys import ApiKey


def populated(key, names):
    """ Return a fresh skeleton for *key* run through its populator.
    """

    skeleton = schema.default_skeleton(key)
    populators.resolve(key)(skeleton, names)
    return skeleton


def test_every_key_classified():
    assert populators.unclassified() == set()
    assert populators.overlapping() == set()


def test_resolve_fallback():

    assert populators.resolve(ApiKey.PRODUCE) is populators.populate_produce
    assert populators.resolve(ApiKey.FETCH) is populators.noop
    assert populators.resolve(ApiKey.DELETE_GROUPS) is populators.noop


def test_registry_read_only():

    with pytest.raises(TypeError):
        populators.registry[ApiKey.FETCH] = populators.noop


def test_mandatory_collections(names):

    for key in exclusions.default_identifiers():
        skeleton = populated(key, names)
        assert skeleton.empty_mandatory() == [], key


def test_produce(names):

    request = populated(ApiKey.PRODUCE, names)

    assert request.acks == -1
    assert len(request.topic_data) == 1

    topic = request.topic_data[0]
    assert len(topic.partition_data) == 1

    batch = topic.partition_data[0].records
    assert isinstance(batch, bytes)

    # Record count is the last field before the records themselves.

    count = int.from_bytes(batch[57:61], 'big', signed=True)
    assert count == 1
    assert batch[16] == records.MAGIC


def test_list_offsets(names):

    request = populated(ApiKey.LIST_OFFSETS, names)

    assert request.replica_id == -1
    assert len(request.topics) == 1

    topic = request.topics[0]
    assert topic.name
    assert len(topic.partitions) == 1
    assert topic.partitions[0].partition_index == 0
    assert topic.partitions[0].current_leader_epoch == 1


def test_offset_fetch(names):

    request = populated(ApiKey.OFFSET_FETCH, names)

    assert request.group_id
    assert len(request.topics) == 1
    assert request.topics[0].name
    assert request.topics[0].partition_indexes == [0, 1]


def test_metadata(names):

    request = populated(ApiKey.METADATA, names)

    assert len(request.topics) == 1
    assert request.topics[0].name
    assert request.topics[0].topic_id != message.ZERO_UUID


def test_update_metadata(names):

    request = populated(ApiKey.UPDATE_METADATA, names)

    assert len(request.topic_states) == 1
    assert request.topic_states[0].topic_id != message.ZERO_UUID


def test_leave_group(names):

    request = populated(ApiKey.LEAVE_GROUP, names)

    assert len(request.members) == 1
    assert request.members[0].member_id


def test_group_lists(names):

    request = populated(ApiKey.DESCRIBE_GROUPS, names)
    assert len(request.groups) == 2
    assert request.groups[0] != request.groups[1]

    request = populated(ApiKey.CONSUMER_GROUP_DESCRIBE, names)
    assert len(request.group_ids) == 2
    assert request.group_ids[0] != request.group_ids[1]


def test_noop_leaves_skeleton(names):

    skeleton = schema.default_skeleton(ApiKey.DELETE_GROUPS)
    populators.noop(skeleton, names)

    assert skeleton == message.DeleteGroupsRequestData()


def test_shape_mismatch(names):

    wrong = schema.default_skeleton(ApiKey.FETCH)

    with pytest.raises(ksample.errors.PopulatorShapeMismatch) as caught:
        populators.populate_produce(wrong, names)

    assert caught.value.expected is message.ProduceRequestData
    assert caught.value.actual is message.FetchRequestData

    with pytest.raises(TypeError):
        populators.populate_metadata(wrong, names)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
