import uuid

import ksample
from ksample.protocol import message
from ksample.protocol.apikeys import ApiKey


def test_to_dict():

    request = message.MetadataRequestData()
    topic = message.MetadataRequestTopic()
    topic.name = 'quirky_turing_000001'
    topic.topic_id = uuid.UUID('5f1b1e4c-8a43-4f5e-9d7c-3a9b2e0f6c11')
    request.topics = [topic]

    converted = request.to_dict()

    assert converted['allow_auto_topic_creation'] == True
    assert converted['topics'] == [{
        'topic_id': '5f1b1e4c-8a43-4f5e-9d7c-3a9b2e0f6c11',
        'name': 'quirky_turing_000001',
    }]

    # Class-level attributes are not part of the record.

    assert 'api_key' not in converted
    assert 'mandatory' not in converted


def test_encapsulate():

    request = message.ProduceRequestData()
    partition = message.PartitionProduceData(index=3, records=b'\x01\x02\x03')
    request.topic_data = [message.TopicProduceData(name='t', partition_data=[partition])]

    encapsulated = request.encapsulate()
    assert isinstance(encapsulated, bytes)

    decoded = ksample.json.loads(encapsulated)
    assert decoded == request.to_dict()
    assert decoded['topic_data'][0]['partition_data'][0]['records'] == 'AQID'
    assert decoded['transactional_id'] is None


def test_generic_to_dict():

    skeleton = message.GenericRequestData(api_key=ApiKey.VOTE)
    assert skeleton.to_dict() == {'api_key': 52}


def test_empty_mandatory():

    request = message.OffsetFetchRequestData()
    assert request.empty_mandatory() == ['topics']

    request.topics = None
    assert request.empty_mandatory() == ['topics']

    request.topics = [message.OffsetFetchRequestTopic()]
    assert request.empty_mandatory() == []

    assert message.FetchRequestData().empty_mandatory() == []


def test_null_topic_id():
    assert message.ZERO_UUID.int == 0
    assert message.FetchTopic().topic_id == message.ZERO_UUID


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
