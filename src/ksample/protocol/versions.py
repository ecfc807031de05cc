"""Ready-made version resolvers.

A version resolver is any callable taking an :class:`ApiKey` and returning
the wire version a sample should be encoded at. The factory treats it as a
black box; these are the common cases.
"""

from __future__ import annotations

from typing import Callable, Mapping, Tuple

from ..errors import VersionUnresolved
from . import schema
from .apikeys import ApiKey


VersionResolver = Callable[[ApiKey], int]


def latest(api_key: ApiKey) -> int:
    """Highest version the schema registry knows for *api_key*."""
    return schema.supported_versions(api_key)[-1]


def oldest(api_key: ApiKey) -> int:
    """Lowest version the schema registry knows for *api_key*."""
    return schema.supported_versions(api_key)[0]


def fixed(version: int) -> VersionResolver:
    """Resolve every request type to the same *version*.

    The returned resolver raises :class:`VersionUnresolved` for request
    types where *version* is not a known version.
    """

    def resolve(api_key: ApiKey) -> int:
        known = schema.supported_versions(api_key)
        if version not in known:
            raise VersionUnresolved(
                api_key, f"version {version} outside {known[0]}..{known[-1]}"
            )
        return version

    return resolve


def negotiated(advertised: Mapping[ApiKey, Tuple[int, int]]) -> VersionResolver:
    """Pick the highest version shared with a peer.

    *advertised* maps api keys to the inclusive (min, max) range the peer
    reported, the way a broker answers an ApiVersions request.
    """

    def resolve(api_key: ApiKey) -> int:
        try:
            lowest, highest = advertised[api_key]
        except KeyError:
            raise VersionUnresolved(api_key, "not advertised by peer") from None

        known = schema.supported_versions(api_key)
        highest = min(highest, known[-1])
        lowest = max(lowest, known[0])

        if highest < lowest:
            raise VersionUnresolved(api_key, "no version in common with peer")

        return highest

    return resolve
