"""Sample request construction.

:func:`generate` is the single entry point; :func:`for_all` and
:func:`for_keys` are the two common ways of calling it.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, NamedTuple, Optional

from . import exclusions
from . import names as _names
from . import populators
from .protocol import schema
from .protocol.apikeys import ApiKey
from .protocol.message import RequestData
from .protocol.versions import VersionResolver


logger = logging.getLogger(__name__)


class Sample(NamedTuple):
    """A populated request and the wire version to encode it at."""

    message: RequestData
    version: int

    @property
    def api_key(self) -> ApiKey:
        return self.message.api_key


def generate(
    version_of: VersionResolver,
    api_keys: Optional[Iterable[ApiKey]] = None,
    names: Optional[_names.NameSource] = None,
) -> Iterator[Sample]:
    """Yield one :class:`Sample` per entry in *api_keys*.

    *api_keys* defaults to :func:`ksample.exclusions.default_identifiers`.
    Entries are processed in the order given, duplicates included, and
    excluded request types are honoured when asked for explicitly.

    Nothing is computed until the caller pulls: each sample gets a fresh
    skeleton from the schema registry, the registered populator for its
    request type, and a version from *version_of*. Any exception raised
    along the way (an unknown api key, a resolver with no answer for a
    request type) ends the iteration; samples already yielded stay valid.

    *names* is the source of generated names and ids, defaulting to the
    shared :func:`ksample.names.default` instance.
    """

    if api_keys is None:
        api_keys = exclusions.default_identifiers()

    if names is None:
        names = _names.default()

    for api_key in api_keys:
        skeleton = schema.default_skeleton(api_key)
        key = skeleton.api_key

        if exclusions.is_excluded(key):
            logger.info("%s is excluded from default generation, generating on request", key)

        populate = populators.resolve(key)
        populate(skeleton, names)

        version = version_of(key)

        logger.debug("generated %s v%d", key, version)
        yield Sample(skeleton, version)


def for_all(version_of: VersionResolver, names: Optional[_names.NameSource] = None) -> Iterator[Sample]:
    """Samples for every request type not excluded from default generation."""
    return generate(version_of, names=names)


def for_keys(version_of: VersionResolver, *api_keys: ApiKey, names: Optional[_names.NameSource] = None) -> Iterator[Sample]:
    """Samples for exactly the listed request types, in order."""
    return generate(version_of, api_keys, names=names)
