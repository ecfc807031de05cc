''' Wrapper module around msgspec to handle the equivalent of
    :func:`json.loads` and :func:`json.dumps`, plus the reduction of
    message skeletons to plain Python builtins.
'''

import msgspec


# The msgspec 'encode' operation returns bytes. Anything calling dumps()
# should expect bytes back, not a str. UUIDs are encoded as their canonical
# string form, bytes as base64 text.

encoder = msgspec.json.Encoder()
decoder = msgspec.json.Decoder()

dumps = encoder.encode
loads = decoder.decode
builtins = msgspec.to_builtins

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
