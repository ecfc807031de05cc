from . import apikeys
from . import message
from . import records
from . import schema
from . import versions

from .apikeys import ApiKey
from .message import RequestData


"""
ksample Protocol Layer
======================

This package describes the Kafka request types that sample messages are
built from. It knows what a request looks like; it does not know how to
put one on the wire, and it never performs I/O.

---------------------------------------------------------------------

Layer Overview
--------------

Version Resolvers (versions.py)
    Choose a wire version per request type
    - latest() / oldest()
    - fixed(version)
    - negotiated(advertised ranges)

    │
    ▼
Schema Registry (schema.py)
    Per api key:
    - default_skeleton()
    - supported_versions()
    Built once at import, read-only afterwards

    │
    ▼
Message Skeletons (message.py)
    Mutable, default-valued request bodies
    - RequestData base class
    - one dataclass per modelled request type
    - GenericRequestData for the rest

    │
    ▼
Identifiers (apikeys.py)
    The closed ApiKey enumeration

Record batches (records.py) sit beside the skeletons: they build the
opaque record bytes carried by Produce partitions.

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
