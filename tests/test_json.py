import json
import uuid

import ksample


def test_dumps_returns_bytes():

    encoded = ksample.json.dumps({'a': 1})
    assert isinstance(encoded, bytes)

    decoded = ksample.json.loads(encoded)
    assert decoded == {'a': 1}


def test_stdlib_agrees():

    input_dictionary = dict()
    input_dictionary['list'] = [1, 2, 3, 'a', 'b', None, 'c', 'z']
    input_dictionary['dict'] = {'one': 1, 'two': 2}
    input_dictionary['none'] = None
    input_dictionary['true'] = True
    input_dictionary['false'] = False

    # Whitespace handling differs between the two encoders, so compare the
    # decoded forms rather than the encoded bytes.

    ours = json.loads(ksample.json.dumps(input_dictionary))
    theirs = ksample.json.loads(json.dumps(input_dictionary))

    assert ours == input_dictionary
    assert theirs == input_dictionary


def test_uuid_and_bytes():

    topic_id = uuid.UUID('5f1b1e4c-8a43-4f5e-9d7c-3a9b2e0f6c11')
    encoded = ksample.json.dumps({'id': topic_id, 'blob': b'\x00\x01'})
    decoded = ksample.json.loads(encoded)

    assert decoded['id'] == '5f1b1e4c-8a43-4f5e-9d7c-3a9b2e0f6c11'
    assert decoded['blob'] == 'AAE='


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
