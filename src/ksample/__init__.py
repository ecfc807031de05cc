""" Sample Kafka request generation for conformance and round-trip testing
    of protocol-aware intermediaries. Given a request type and a way to pick
    its wire version, produce a minimally but meaningfully populated request.
"""

# Utility components.

from . import config
from . import errors
from . import json
from . import names

# Request type descriptions.

from . import protocol
from .protocol import ApiKey

# Primary public-facing interfaces.

from . import exclusions
from . import populators
from . import factory

generate = factory.generate
for_all = factory.for_all
for_keys = factory.for_keys
Sample = factory.Sample

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
